"""
Vectorised tick conversions for whole timelines at once.

Same semantics as the scalar Tick operations: seconds are rounded half to
even, frame indices are floored, and frame starts are exact multiples of the
rate's tick length. Tick and frame arrays are int64.
"""

import numpy as np
from numpy.typing import ArrayLike

from .constants import I64_MAX, I64_MIN, TICKS_PER_SECOND
from .errors import InvalidFrameRate, InvalidInput
from .rates import FrameRate

# float64 cannot hold I64_MAX, so bound against 2**63 itself.
_I64_LIMIT = float(2 ** 63)


def _as_int_array(values: ArrayLike, what: str) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size == 0:
        return arr.astype(np.int64)
    if arr.dtype.kind not in "iu":
        raise InvalidInput(f"{what} must be integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and int(arr.max()) > I64_MAX:
        raise InvalidInput(f"{what} overflow a 64-bit integer")
    return arr.astype(np.int64)


def _require_exact(rate: FrameRate) -> FrameRate:
    if not isinstance(rate, FrameRate):
        raise InvalidFrameRate(
            f"batch frame conversion needs an exact FrameRate, got {rate!r}"
        )
    return rate


def secs_to_ticks(seconds: ArrayLike) -> np.ndarray:
    """Nearest tick for each second value."""
    try:
        arr = np.asarray(seconds, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"seconds must be real numbers: {e}") from e

    if not np.all(np.isfinite(arr)):
        raise InvalidInput("seconds must be finite")

    with np.errstate(over="ignore"):
        scaled = np.rint(arr * TICKS_PER_SECOND)

    if arr.size and (scaled.max() >= _I64_LIMIT or scaled.min() < -_I64_LIMIT):
        raise InvalidInput("seconds overflow a 64-bit tick count")

    return scaled.astype(np.int64)


def ticks_to_secs(ticks: ArrayLike) -> np.ndarray:
    return _as_int_array(ticks, "ticks") / TICKS_PER_SECOND


def ticks_to_frames(ticks: ArrayLike, rate: FrameRate) -> np.ndarray:
    """Frame index containing each tick (floored, exact)."""
    rate = _require_exact(rate)
    return np.floor_divide(_as_int_array(ticks, "ticks"), rate.ticks_per_frame)


def frames_to_ticks(frames: ArrayLike, rate: FrameRate) -> np.ndarray:
    """Start tick of each frame (exact)."""
    rate = _require_exact(rate)
    arr = _as_int_array(frames, "frames")

    step = rate.ticks_per_frame
    lo = -((-I64_MIN) // step)
    hi = I64_MAX // step
    if arr.size and (arr.min() < lo or arr.max() > hi):
        raise InvalidInput(f"frames overflow a 64-bit tick count at {rate.rate} fps")

    return arr * np.int64(step)
