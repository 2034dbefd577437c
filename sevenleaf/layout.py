"""Placement of a source picture inside a display area, and the matching projection."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

Point = tuple[float, float]
Matrix4x4 = tuple[tuple[float, float, float, float], ...]


class ResizeMode(enum.Enum):
    """How a source picture is sized to fit the display area."""

    DOT_BY_DOT = "dot_by_dot"
    ASPECT_FIT_SCALE_DOWN_ONLY = "aspect_fit_scale_down_only"
    ASPECT_FIT = "aspect_fit"
    FIT = "fit"


@dataclass(frozen=True)
class Thickness:
    """Widths of the four edges of a border."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Thickness":
        """Return a thickness with the same width on every edge."""
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def __mul__(self, scale: float) -> "Thickness":
        return Thickness(self.left * scale, self.top * scale, self.right * scale, self.bottom * scale)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Size:
    """A width and height."""

    width: float
    height: float

    def __sub__(self, other: object) -> "Size":
        if isinstance(other, Thickness):
            return Size(self.width - other.horizontal, self.height - other.vertical)
        if isinstance(other, Size):
            return Size(self.width - other.width, self.height - other.height)
        return NotImplemented

    def __add__(self, other: object) -> "Size":
        if isinstance(other, Size):
            return Size(self.width + other.width, self.height + other.height)
        return NotImplemented

    def __mul__(self, scale: float) -> "Size":
        return Size(self.width * scale, self.height * scale)

    __rmul__ = __mul__

    def aspect_fit(self, available: "Size", scale_down_only: bool = False) -> "Size":
        """Return the largest size with this aspect ratio that fits in ``available``.

        With ``scale_down_only`` a size already inside ``available`` is kept.
        """
        if self.width <= 0 or self.height <= 0:
            return Size(0.0, 0.0)
        scale = min(available.width / self.width, available.height / self.height)
        if scale_down_only:
            scale = min(scale, 1.0)
        return Size(self.width * scale, self.height * scale)


@dataclass(frozen=True)
class Layout:
    """Where a source picture is drawn inside the display area, in pixels."""

    preview_size: Size
    origin: Point
    center: Point
    available_size: Size = field(default=Size(0.0, 0.0))

    @property
    def scissor(self) -> tuple[int, int, int, int]:
        """Return ``(x, y, width, height)`` of the whole-pixel clip rectangle."""
        return (
            math.floor(self.origin[0]),
            math.floor(self.origin[1]),
            math.ceil(self.preview_size.width),
            math.ceil(self.preview_size.height),
        )


def compute_layout(
    source: Size,
    destination: Size,
    padding: Thickness = Thickness(),
    scale: float = 1.0,
    mode: ResizeMode = ResizeMode.ASPECT_FIT,
) -> Layout:
    """Place ``source`` inside ``destination`` less ``padding`` scaled by ``scale``.

    The picture is sized according to ``mode`` and centred in the area left
    inside the padding.
    """
    scaled_padding = scale * padding
    available = destination - scaled_padding

    if mode is ResizeMode.DOT_BY_DOT:
        preview = source
    elif mode is ResizeMode.ASPECT_FIT_SCALE_DOWN_ONLY:
        preview = source.aspect_fit(available, True)
    elif mode is ResizeMode.FIT:
        preview = available
    else:
        preview = source.aspect_fit(available)

    origin = (
        scaled_padding.left + 0.5 * (available.width - preview.width),
        scaled_padding.top + 0.5 * (available.height - preview.height),
    )
    center = (origin[0] + 0.5 * preview.width, origin[1] + 0.5 * preview.height)
    return Layout(preview_size=preview, origin=origin, center=center, available_size=available)


def ortho_offcenter(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix4x4:
    """Return an off-centre orthographic projection for row vectors (``p @ M``).

    The box maps to x and y in [-1, 1] and depth in [0, 1].
    """
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic projection needs a box of non-zero extent")
    width = right - left
    height = top - bottom
    depth = far - near
    return (
        (2.0 / width, 0.0, 0.0, 0.0),
        (0.0, 2.0 / height, 0.0, 0.0),
        (0.0, 0.0, 1.0 / depth, 0.0),
        (-(left + right) / width, -(top + bottom) / height, -near / depth, 1.0),
    )