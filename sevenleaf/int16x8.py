"""Eight-lane vector of signed 16-bit integers: construction, lane shuffles and bitwise logic."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union, overload

LANES = 8
INT16_MIN = -0x8000
INT16_MAX = 0x7FFF


def _wrap16(value: int) -> int:
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


class Int16x8:
    """An immutable vector of eight signed 16-bit lanes.

    Values given to the constructor wrap around to 16 bits, as a conversion
    to a 16-bit integer would.
    """

    __slots__ = ("_lanes",)

    def __init__(self, *args: int) -> None:
        if not args:
            args = (0,) * LANES
        if len(args) != LANES:
            raise ValueError(f"expected {LANES} lanes, got {len(args)}")
        self._lanes = tuple(_wrap16(v) for v in args)

    @classmethod
    def splat(cls, s: int) -> "Int16x8":
        """Return a vector with every lane set to ``s``."""
        return cls(*([s] * LANES))

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> "Int16x8":
        """Return a vector built from exactly eight values."""
        return cls(*values)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[int, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[int, tuple[int, ...]]:
        return self._lanes[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._lanes)

    def __len__(self) -> int:
        return LANES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Int16x8):
            return NotImplemented
        return self._lanes == other._lanes

    def __hash__(self) -> int:
        return hash(self._lanes)

    def __repr__(self) -> str:
        return f"Int16x8{self._lanes}"

    def set_at(self, index: int, value: int) -> "Int16x8":
        """Return a copy with lane ``index`` replaced by ``value``."""
        if not -LANES <= index < LANES:
            raise IndexError(f"lane index {index} out of range")
        lanes = list(self._lanes)
        lanes[index] = value
        return Int16x8(*lanes)

    # --- Packing ---

    def unpack16_lo(self, other: "Int16x8") -> "Int16x8":
        """Interleave the low halves: a0, b0, a1, b1, a2, b2, a3, b3."""
        return Int16x8(*(v for pair in zip(self[:4], other[:4]) for v in pair))

    def unpack16_hi(self, other: "Int16x8") -> "Int16x8":
        """Interleave the high halves: a4, b4, a5, b5, a6, b6, a7, b7."""
        return Int16x8(*(v for pair in zip(self[4:], other[4:]) for v in pair))

    def unpack16(self, other: "Int16x8") -> tuple["Int16x8", "Int16x8"]:
        """Return both 16-bit interleavings as ``(lo, hi)``."""
        return self.unpack16_lo(other), self.unpack16_hi(other)

    def unpack32_lo(self, other: "Int16x8") -> "Int16x8":
        """Interleave 32-bit pairs of the low halves: a0, a1, b0, b1, a2, a3, b2, b3."""
        return Int16x8(*self[0:2], *other[0:2], *self[2:4], *other[2:4])

    def unpack32_hi(self, other: "Int16x8") -> "Int16x8":
        """Interleave 32-bit pairs of the high halves: a4, a5, b4, b5, a6, a7, b6, b7."""
        return Int16x8(*self[4:6], *other[4:6], *self[6:8], *other[6:8])

    def unpack32(self, other: "Int16x8") -> tuple["Int16x8", "Int16x8"]:
        """Return both 32-bit interleavings as ``(lo, hi)``."""
        return self.unpack32_lo(other), self.unpack32_hi(other)

    def unpack64_lo(self, other: "Int16x8") -> "Int16x8":
        """Join the low halves: a0, a1, a2, a3, b0, b1, b2, b3."""
        return Int16x8(*self[:4], *other[:4])

    def unpack64_hi(self, other: "Int16x8") -> "Int16x8":
        """Join the high halves: a4, a5, a6, a7, b4, b5, b6, b7."""
        return Int16x8(*self[4:], *other[4:])

    def unpack64(self, other: "Int16x8") -> tuple["Int16x8", "Int16x8"]:
        """Return both 64-bit joins as ``(lo, hi)``."""
        return self.unpack64_lo(other), self.unpack64_hi(other)

    # --- Reversal ---

    def _reverse_within(self, group: int, unit: int) -> "Int16x8":
        lanes: list[int] = []
        for start in range(0, LANES, group):
            chunk = self._lanes[start:start + group]
            units = [chunk[i:i + unit] for i in range(0, group, unit)]
            for piece in reversed(units):
                lanes.extend(piece)
        return Int16x8(*lanes)

    def reverse32p16(self) -> "Int16x8":
        """Swap lanes within each 32-bit pair: a1, a0, a3, a2, a5, a4, a7, a6."""
        return self._reverse_within(2, 1)

    def reverse64p16(self) -> "Int16x8":
        """Reverse lanes within each 64-bit half: a3, a2, a1, a0, a7, a6, a5, a4."""
        return self._reverse_within(4, 1)

    def reverse128p16(self) -> "Int16x8":
        """Reverse all lanes: a7, a6, a5, a4, a3, a2, a1, a0."""
        return self._reverse_within(8, 1)

    def reverse64p32(self) -> "Int16x8":
        """Swap 32-bit pairs within each half: a2, a3, a0, a1, a6, a7, a4, a5."""
        return self._reverse_within(4, 2)

    def reverse128p32(self) -> "Int16x8":
        """Reverse the 32-bit pairs: a6, a7, a4, a5, a2, a3, a0, a1."""
        return self._reverse_within(8, 2)

    def reverse128p64(self) -> "Int16x8":
        """Swap the 64-bit halves: a4, a5, a6, a7, a0, a1, a2, a3."""
        return self._reverse_within(8, 4)

    # --- Selection ---

    def blend(self, other: "Int16x8", mask: int) -> "Int16x8":
        """Take lane ``i`` from ``other`` where bit ``i`` of ``mask`` is set, else from self."""
        if not 0 <= mask <= 0xFF:
            raise ValueError(f"blend mask {mask} out of range 0..255")
        return Int16x8(
            *(b if mask >> i & 1 else a for i, (a, b) in enumerate(zip(self, other)))
        )

    def alignr(self, other: "Int16x8", align: int) -> "Int16x8":
        """Shift the concatenation self:other right by ``align`` lanes.

        The result is the lanes of ``other`` from ``align`` on, followed by
        the first ``align`` lanes of self.
        """
        if not 0 <= align <= LANES:
            raise ValueError(f"align {align} out of range 0..{LANES}")
        return Int16x8(*other[align:], *self[:align])

    def swizzle(self, *args: int) -> "Int16x8":
        """Return a vector whose lane ``i`` is lane ``args[i]`` of self."""
        if len(args) != LANES:
            raise ValueError(f"expected {LANES} lane indices, got {len(args)}")
        for index in args:
            if not 0 <= index < LANES:
                raise ValueError(f"lane index {index} out of range 0..{LANES - 1}")
        return Int16x8(*(self._lanes[index] for index in args))

    # --- Logic ---

    def __invert__(self) -> "Int16x8":
        return Int16x8(*(~a for a in self))

    def __and__(self, other: "Int16x8") -> "Int16x8":
        if not isinstance(other, Int16x8):
            return NotImplemented
        return Int16x8(*(a & b for a, b in zip(self, other)))

    def andnot(self, other: "Int16x8") -> "Int16x8":
        """Return ``~self & other``."""
        return Int16x8(*(~a & b for a, b in zip(self, other)))

    def __or__(self, other: "Int16x8") -> "Int16x8":
        if not isinstance(other, Int16x8):
            return NotImplemented
        return Int16x8(*(a | b for a, b in zip(self, other)))

    def ornot(self, other: "Int16x8") -> "Int16x8":
        """Return ``~self | other``."""
        return Int16x8(*(~a | b for a, b in zip(self, other)))

    def __xor__(self, other: "Int16x8") -> "Int16x8":
        if not isinstance(other, Int16x8):
            return NotImplemented
        return Int16x8(*(a ^ b for a, b in zip(self, other)))

    def select(self, other: "Int16x8", mask: "Int16x8") -> "Int16x8":
        """Return ``(self & ~mask) | (other & mask)`` bit by bit."""
        return Int16x8(*((a & ~m) | (b & m) for a, b, m in zip(self, other, mask)))