"""Tick resolution, fixed once per process when the package is first imported."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Resolutions
# ---------------------------------------------------------------------------
# 3,603,600 is the LCM of the common frame-rate denominators plus 11 and 13
# (needed for NTSC). 25,200 covers a reduced set with smaller tick counts.
DEFAULT_TICKS_PER_SECOND = 3_603_600
LOW_RES_TICKS_PER_SECOND = 25_200

LOW_RES_ENV_VAR = "FRAMETICK_LOW_RES"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}

# Tick counts live in a signed 64-bit range; leaving it is an error, never a wrap.
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def resolve_ticks_per_second(flag: Optional[str]) -> int:
    """
    Map the low-resolution flag to a tick resolution.

    None or a falsy value selects the default resolution, a truthy value
    selects the low-resolution one. Anything else raises ValueError so a typo
    never silently picks the wrong resolution.
    """
    if flag is None:
        return DEFAULT_TICKS_PER_SECOND

    value = flag.strip().lower()
    if value in _TRUTHY:
        return LOW_RES_TICKS_PER_SECOND
    if value in _FALSY:
        return DEFAULT_TICKS_PER_SECOND

    raise ValueError(
        f"{LOW_RES_ENV_VAR} must be one of "
        f"{sorted(_TRUTHY | _FALSY - {''})}, got {flag!r}"
    )


TICKS_PER_SECOND: int = resolve_ticks_per_second(os.environ.get(LOW_RES_ENV_VAR))
LOW_RES: bool = TICKS_PER_SECOND == LOW_RES_TICKS_PER_SECOND

logger.debug(
    "Tick resolution: %d ticks/s (%s)",
    TICKS_PER_SECOND,
    "low_res" if LOW_RES else "default",
)
