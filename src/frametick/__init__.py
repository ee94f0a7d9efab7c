"""frametick - Drift-free fixed-point time for frame-based media."""

from .config import Config
from .constants import TICKS_PER_SECOND
from .errors import InvalidFrameRate, InvalidInput, TickError
from .rates import COMMON_RATES, ApproxFrameRate, FrameRate
from .tick import Tick
from .utils.protocols import FrameRateConversion

__all__ = [
    "ApproxFrameRate",
    "COMMON_RATES",
    "Config",
    "FrameRate",
    "FrameRateConversion",
    "InvalidFrameRate",
    "InvalidInput",
    "Tick",
    "TickError",
    "TICKS_PER_SECOND",
]
