"""Lock-protected fixed-width signed integer with atomic read-modify-write operations."""

from __future__ import annotations

import threading

_SUPPORTED_BITS = (32, 64)


class AtomicInt:
    """A signed integer of ``bits`` width whose operations are atomic across threads.

    Arithmetic wraps around in two's complement, like the underlying
    fixed-width integer type would.
    """

    __slots__ = ("_bits", "_lock", "_value")

    def __init__(self, value: int = 0, bits: int = 32) -> None:
        if bits not in _SUPPORTED_BITS:
            raise ValueError(f"unsupported width {bits}; expected one of {_SUPPORTED_BITS}")
        self._bits = bits
        self._lock = threading.Lock()
        self._value = self._wrap(value)

    @property
    def bits(self) -> int:
        return self._bits

    def _wrap(self, value: int) -> int:
        modulus = 1 << self._bits
        value %= modulus
        if value >= modulus >> 1:
            value -= modulus
        return value

    def load(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def store(self, desired: int) -> None:
        """Replace the current value."""
        with self._lock:
            self._value = self._wrap(desired)

    def fetch_add(self, arg: int) -> int:
        """Add ``arg`` and return the value held before the addition."""
        with self._lock:
            previous = self._value
            self._value = self._wrap(previous + arg)
            return previous

    def fetch_sub(self, arg: int) -> int:
        """Subtract ``arg`` and return the value held before the subtraction."""
        with self._lock:
            previous = self._value
            self._value = self._wrap(previous - arg)
            return previous

    def fetch_increment(self) -> int:
        """Add one and return the previous value."""
        return self.fetch_add(1)

    def fetch_decrement(self) -> int:
        """Subtract one and return the previous value."""
        return self.fetch_sub(1)

    def __int__(self) -> int:
        return self.load()

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()}, bits={self._bits})"