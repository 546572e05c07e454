"""Exceptions raised by streaming indicators."""

from __future__ import annotations


class IndicatorError(Exception):
    """Base class for indicator failures."""


class NotReadyError(IndicatorError):
    """Raised when a checked value is read before the indicator is ready."""


class IndicatorDivisionByZero(IndicatorError, ZeroDivisionError):
    """Raised when a ready indicator would divide by a zero denominator."""


class InvalidConfigurationError(IndicatorError, ValueError):
    """Raised when an indicator is constructed with invalid parameters."""
