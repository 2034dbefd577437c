"""Frame pacing for a render loop running at a rational frame rate."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from sevenleaf.timing import gettime_ns, wait_until_ns
from sevenleaf.uint128 import udiv128, umul64x64

_NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True)
class Framerate:
    """A frame rate expressed as ``numerator / denominator`` frames per second."""

    numerator: int = 60000
    denominator: int = 1001

    def __post_init__(self) -> None:
        if self.numerator <= 0 or self.denominator <= 0:
            raise ValueError(
                f"frame rate {self.numerator}/{self.denominator} must have positive terms"
            )

    def interval_ns(self) -> int:
        """Return the duration of one frame in whole nanoseconds."""
        return udiv128(umul64x64(_NS_PER_SECOND, self.denominator), self.numerator)


@dataclass
class FramePacer:
    """Tracks frame deadlines and counts frames that were delivered or dropped.

    ``wait_until`` blocks until a nanosecond deadline and returns True when the
    deadline had already passed; ``clock`` reads the current time in
    nanoseconds.
    """

    framerate: Framerate = field(default_factory=Framerate)
    start: Optional[int] = None
    wait_until: Callable[[int], bool] = wait_until_ns
    clock: Callable[[], int] = gettime_ns
    frame_count: int = field(default=0, init=False)
    dropped_frame_count: int = field(default=0, init=False)
    last_frame_time: int = field(default=0, init=False)
    interval: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.start is None:
            self.start = self.clock()
        self.interval = self.framerate.interval_ns()
        self.last_frame_time = self.start

    def next_timestamp(self) -> int:
        """Return the presentation time of the frame being prepared."""
        return self.last_frame_time + self.interval

    def advance(self) -> int:
        """Wait for the next frame deadline and return how many frames elapsed.

        When the deadline is met exactly one frame elapses. When it has
        already passed, every whole interval since the last frame counts, and
        all but one of them are recorded as dropped.
        """
        deadline = self.last_frame_time + self.interval
        if not self.wait_until(deadline):
            self.frame_count += 1
            self.last_frame_time = deadline
            return 1
        elapsed = max(1, (self.clock() - self.last_frame_time) // self.interval)
        self.frame_count += elapsed
        self.dropped_frame_count += elapsed - 1
        self.last_frame_time += self.interval * elapsed
        return elapsed