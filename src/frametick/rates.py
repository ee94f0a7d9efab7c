"""Frame rates usable for tick <-> frame conversion."""

import logging
import math
import numbers
import operator
from dataclasses import dataclass
from typing import List, Optional

from .constants import TICKS_PER_SECOND
from .errors import InvalidFrameRate, InvalidInput
from .tick import Tick

logger = logging.getLogger(__name__)


def _round_half_up(value: float, what: str) -> int:
    if not math.isfinite(value):
        raise InvalidInput(f"{what} overflows at this frame rate")
    return math.floor(value + 0.5)


@dataclass(frozen=True, order=True)
class FrameRate:
    """
    Exact integer frame rate.

    Only rates that evenly divide TICKS_PER_SECOND are accepted, so every
    frame starts on a whole tick and tick <-> frame conversion is plain
    integer arithmetic with no residual error. Anything else raises
    InvalidFrameRate; use ApproxFrameRate to opt into rounded conversion.
    """

    rate: int

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool):
            raise InvalidFrameRate(f"frame rate must be an integer, got {self.rate!r}")
        try:
            rate = operator.index(self.rate)
        except TypeError as e:
            raise InvalidFrameRate(
                f"frame rate must be an integer, got {self.rate!r} "
                "(use ApproxFrameRate for fractional rates)"
            ) from e

        if rate <= 0:
            logger.debug("Rejected frame rate %d: not positive", rate)
            raise InvalidFrameRate(f"frame rate must be positive, got {rate}")
        if TICKS_PER_SECOND % rate != 0:
            logger.debug(
                "Rejected frame rate %d: does not divide %d", rate, TICKS_PER_SECOND
            )
            raise InvalidFrameRate(
                f"{rate} fps does not evenly divide {TICKS_PER_SECOND} ticks/s; "
                "frames would not land on tick boundaries"
            )

        object.__setattr__(self, "rate", rate)

    @classmethod
    def new(cls, rate: int) -> "FrameRate":
        """Validate and build a FrameRate. Same as calling the class."""
        return cls(rate)

    @classmethod
    def supported(cls, max_rate: Optional[int] = None) -> List["FrameRate"]:
        """Every rate the active resolution represents exactly, ascending."""
        divisors = set()
        for i in range(1, math.isqrt(TICKS_PER_SECOND) + 1):
            if TICKS_PER_SECOND % i == 0:
                divisors.add(i)
                divisors.add(TICKS_PER_SECOND // i)

        return [
            cls(rate)
            for rate in sorted(divisors)
            if max_rate is None or rate <= max_rate
        ]

    # ---------------------------------------------------------
    # Derived values
    # ---------------------------------------------------------

    @property
    def ticks_per_frame(self) -> int:
        return TICKS_PER_SECOND // self.rate

    @property
    def frame_duration(self) -> Tick:
        return Tick(self.ticks_per_frame)

    def __int__(self) -> int:
        return self.rate

    # ---------------------------------------------------------
    # Conversion (exact)
    # ---------------------------------------------------------

    def to_frame(self, count: int) -> int:
        # Floor division keeps frame indexing monotonic for negative ticks.
        return count // self.ticks_per_frame

    def to_ticks(self, frame: int) -> int:
        return frame * self.ticks_per_frame


@dataclass(frozen=True)
class ApproxFrameRate:
    """
    Opt-in frame rate for values the tick resolution cannot represent.

    Conversions round to the nearest frame (or tick), half up, so frame
    boundaries may fall between ticks. Use it for display-only rates such as
    29.97; anything that must not strobe belongs on FrameRate.
    """

    rate: float

    def __post_init__(self) -> None:
        if isinstance(self.rate, bool) or not isinstance(self.rate, numbers.Real):
            raise InvalidFrameRate(f"frame rate must be a real number, got {self.rate!r}")

        try:
            rate = float(self.rate)
        except OverflowError as e:
            raise InvalidFrameRate(f"frame rate is too large to represent, got {self.rate!r}") from e
        if not math.isfinite(rate) or rate <= 0:
            raise InvalidFrameRate(f"frame rate must be positive and finite, got {rate}")

        object.__setattr__(self, "rate", rate)
        logger.debug("Approximate frame rate %s fps in use", rate)

    @property
    def is_exact(self) -> bool:
        """True when this rate could be a FrameRate without loss."""
        return self.rate.is_integer() and TICKS_PER_SECOND % int(self.rate) == 0

    def exact(self) -> FrameRate:
        """The equivalent FrameRate, or InvalidFrameRate if there is none."""
        if not self.rate.is_integer():
            raise InvalidFrameRate(f"{self.rate} fps is not an integral rate")
        return FrameRate(int(self.rate))

    # ---------------------------------------------------------
    # Conversion (approximate)
    # ---------------------------------------------------------

    def to_frame(self, count: int) -> int:
        try:
            scaled = count * self.rate / TICKS_PER_SECOND
        except OverflowError as e:
            raise InvalidInput(f"tick count {count} is too large to convert") from e
        return _round_half_up(scaled, "frame index")

    def to_ticks(self, frame: int) -> int:
        try:
            scaled = frame * TICKS_PER_SECOND / self.rate
        except OverflowError as e:
            raise InvalidInput(f"frame {frame} is too large to convert") from e
        return _round_half_up(scaled, "tick count")


# ---------------------------------------------------------------------------
# Common rates. Every one divides both resolutions.
# ---------------------------------------------------------------------------
FPS_6 = FrameRate(6)      # animating on 4s
FPS_8 = FrameRate(8)      # on 3s
FPS_12 = FrameRate(12)    # on 2s
FPS_24 = FrameRate(24)    # film
FPS_25 = FrameRate(25)    # PAL
FPS_30 = FrameRate(30)
FPS_48 = FrameRate(48)
FPS_50 = FrameRate(50)
FPS_60 = FrameRate(60)
FPS_72 = FrameRate(72)    # Quest 1
FPS_90 = FrameRate(90)    # Quest 2, Rift
FPS_120 = FrameRate(120)
FPS_144 = FrameRate(144)
FPS_240 = FrameRate(240)

COMMON_RATES = (
    FPS_6, FPS_8, FPS_12, FPS_24, FPS_25, FPS_30, FPS_48,
    FPS_50, FPS_60, FPS_72, FPS_90, FPS_120, FPS_144, FPS_240,
)
