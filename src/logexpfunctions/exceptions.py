"""Exceptions raised by logexpfunctions."""

from __future__ import annotations

__all__ = ["DimensionMismatchError"]


class DimensionMismatchError(ValueError):
    """Output and input containers have incompatible sizes."""
