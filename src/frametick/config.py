import logging
import logging.config
from dataclasses import dataclass

from .constants import LOW_RES, TICKS_PER_SECOND


def _apply_logging(debug: bool, fmt: str, datefmt: str) -> None:
    """
    Configure logging for frametick.

    debug=True  → root logs at DEBUG, which surfaces the resolved tick
                  resolution, rejected frame rates and approximate rates.
    debug=False → INFO; frametick itself stays silent.
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": fmt,
                "datefmt": datefmt,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": logging.DEBUG if debug else logging.INFO,
        },
    })


@dataclass
class Config:
    """
    Runtime configuration for frametick.

    The tick resolution is deliberately not a field: it is fixed when the
    package is imported (see FRAMETICK_LOW_RES) and only reported here.
    """
    # ---------------------------------------------------------
    # Logging
    # ---------------------------------------------------------
    debug: bool = False
    log_format: str = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"
    log_datefmt: str = "%Y-%m-%d %H:%M:%S"

    # ---------------------------------------------------------
    # Resolution (read-only)
    # ---------------------------------------------------------
    @property
    def ticks_per_second(self) -> int:
        return TICKS_PER_SECOND

    @property
    def low_res(self) -> bool:
        return LOW_RES

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------
    def validate(self) -> None:
        if not isinstance(self.debug, bool):
            raise ValueError("debug must be a bool")
        if not isinstance(self.log_format, str):
            raise ValueError("log_format must be a string")
        if not isinstance(self.log_datefmt, str):
            raise ValueError("log_datefmt must be a string")
        if not self.log_format.strip():
            raise ValueError("log_format must not be empty")
        if "%(message)s" not in self.log_format:
            raise ValueError("log_format must include %(message)s")

    def apply_logging(self) -> None:
        """Configure logging based on this config. Call once at startup."""
        self.validate()
        _apply_logging(self.debug, self.log_format, self.log_datefmt)
