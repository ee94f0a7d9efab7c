"""Shared helpers."""

from .protocols import FrameRateConversion

__all__ = ["FrameRateConversion"]
