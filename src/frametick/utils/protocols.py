"""Core protocols for frametick extensibility."""

from typing import Protocol


class FrameRateConversion(Protocol):
    """Protocol for converting between tick counts and frame indices.

    Rates own the arithmetic so Tick stays agnostic of exact vs approximate
    conversion.
    """

    def to_frame(self, count: int) -> int:
        """Frame index containing the given tick count.

        Args:
            count: Raw tick count

        Returns:
            Frame index (may be negative)
        """
        ...

    def to_ticks(self, frame: int) -> int:
        """Tick count at which the given frame starts.

        Args:
            frame: Frame index

        Returns:
            Raw tick count
        """
        ...
