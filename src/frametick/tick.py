"""Fixed-point time: each second is divided into TICKS_PER_SECOND ticks."""

import math
import numbers
import operator
import re
from dataclasses import dataclass
from datetime import timedelta
from fractions import Fraction
from typing import ClassVar, Union

from .constants import I64_MAX, I64_MIN, TICKS_PER_SECOND
from .errors import InvalidInput
from .utils.protocols import FrameRateConversion

_TICK_TEXT = re.compile(r"^\s*(?:Tick\(\s*([+-]?\d+)\s*\)|([+-]?\d+))\s*$")

_MICROS_PER_SECOND = 1_000_000


def _as_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidInput(f"{what} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise InvalidInput(f"{what} must be an integer, got {value!r}") from e


def _as_finite_float(value, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"{what} must be a real number, got {value!r}")
    try:
        result = float(value)
    except OverflowError as e:
        raise InvalidInput(f"{what} is too large to represent, got {value!r}") from e
    if not math.isfinite(result):
        raise InvalidInput(f"{what} must be finite, got {result}")
    return result


@dataclass(frozen=True, order=True, repr=False)
class Tick:
    """
    Fixed-point time value, counted in 1 / TICKS_PER_SECOND seconds.

    Negative values are allowed; timelines in editors and animation tools
    routinely start before zero. The count is confined to the signed 64-bit
    range and every operation that would leave it raises InvalidInput.

    Rounding: wherever a float is quantized to ticks (from_secs, float
    scaling) the result is rounded half to even.
    """

    count: int

    ZERO: ClassVar["Tick"]

    def __post_init__(self) -> None:
        count = _as_int(self.count, "tick count")
        if not I64_MIN <= count <= I64_MAX:
            raise InvalidInput(f"tick count {count} overflows a 64-bit integer")
        object.__setattr__(self, "count", count)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def new(cls, count: int) -> "Tick":
        return cls(count)

    @classmethod
    def from_secs(cls, seconds: float) -> "Tick":
        """Nearest tick to a second value. NaN and infinities raise InvalidInput."""
        secs = _as_finite_float(seconds, "seconds")
        scaled = secs * TICKS_PER_SECOND
        if not math.isfinite(scaled):
            raise InvalidInput(f"{secs} seconds overflows a 64-bit tick count")
        return cls(round(scaled))

    @classmethod
    def from_frame(cls, frame: int, rate: FrameRateConversion) -> "Tick":
        """Tick at which `frame` starts. Exact for FrameRate."""
        return cls(rate.to_ticks(_as_int(frame, "frame")))

    @classmethod
    def from_timedelta(cls, duration: timedelta) -> "Tick":
        if not isinstance(duration, timedelta):
            raise InvalidInput(f"expected a timedelta, got {duration!r}")
        micros = (
            (duration.days * 86_400 + duration.seconds) * _MICROS_PER_SECOND
            + duration.microseconds
        )
        return cls(round(Fraction(micros * TICKS_PER_SECOND, _MICROS_PER_SECOND)))

    @classmethod
    def parse(cls, text: str) -> "Tick":
        """Parse "123" or "Tick(123)"."""
        match = _TICK_TEXT.match(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidInput(f"cannot parse {text!r} as a Tick")
        return cls(int(match.group(1) or match.group(2)))

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_secs(self) -> float:
        return self.count / TICKS_PER_SECOND

    def to_frame(self, rate: FrameRateConversion) -> int:
        """Index of the frame this tick falls in. Exact for FrameRate."""
        return rate.to_frame(self.count)

    def to_timedelta(self) -> timedelta:
        # timedelta only resolves microseconds, so this quantizes.
        micros = round(Fraction(self.count * _MICROS_PER_SECOND, TICKS_PER_SECOND))
        return timedelta(microseconds=micros)

    def __int__(self) -> int:
        return self.count

    def __bool__(self) -> bool:
        return self.count != 0

    def __repr__(self) -> str:
        return f"Tick({self.count})"

    __str__ = __repr__

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: "Tick") -> "Tick":
        if not isinstance(other, Tick):
            return NotImplemented
        return Tick(self.count + other.count)

    def __radd__(self, other: "Tick") -> "Tick":
        # Lets sum() start from its default 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: "Tick") -> "Tick":
        if not isinstance(other, Tick):
            return NotImplemented
        return Tick(self.count - other.count)

    def __neg__(self) -> "Tick":
        return Tick(-self.count)

    def __pos__(self) -> "Tick":
        return self

    def __abs__(self) -> "Tick":
        return Tick(abs(self.count))

    def __mul__(self, factor: Union[int, float]) -> "Tick":
        if isinstance(factor, (Tick, bool)):
            return NotImplemented
        if isinstance(factor, numbers.Integral):
            return Tick(self.count * int(factor))
        if isinstance(factor, numbers.Real):
            scale = Fraction(_as_finite_float(factor, "scale factor"))
            return Tick(round(self.count * scale))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Tick", int, float]):
        """Tick / Tick is a float ratio, Tick / number is a rounded Tick."""
        if isinstance(other, Tick):
            return self.count / other.count
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, numbers.Integral):
            return Tick(round(Fraction(self.count, int(other))))
        if isinstance(other, numbers.Real):
            divisor = Fraction(_as_finite_float(other, "divisor"))
            return Tick(round(self.count / divisor))
        return NotImplemented

    def __floordiv__(self, other: Union["Tick", int]):
        """Tick // Tick is a whole count, Tick // int is a floored Tick."""
        if isinstance(other, Tick):
            return self.count // other.count
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return Tick(self.count // int(other))
        return NotImplemented

    def __mod__(self, other: "Tick") -> "Tick":
        if not isinstance(other, Tick):
            return NotImplemented
        return Tick(self.count % other.count)


Tick.ZERO = Tick(0)
