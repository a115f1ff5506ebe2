"""Custom exception hierarchy for the drywall estimators."""

from __future__ import annotations


class DrywallError(Exception):
    """Base exception for all drywall estimator errors."""


class InvalidInputError(DrywallError, ValueError):
    """Raised when estimator input is out of range or unrecognized."""


class ZeroAreaError(DrywallError, ZeroDivisionError):
    """Raised when a per-square-foot ratio is requested for zero area."""
