"""Errors raised by frametick."""


class TickError(ValueError):
    """Base class for every error raised by this package."""


class InvalidFrameRate(TickError):
    """A frame rate was rejected at construction.

    Raised for non-positive rates and, for exact rates, for rates that do not
    evenly divide ``TICKS_PER_SECOND``.
    """


class InvalidInput(TickError):
    """A conversion input was not a finite, representable value.

    Also raised when a result would leave the signed 64-bit tick range.
    """
