"""Utility helpers for the appointment booking mapping layer."""

from .optional import AbsentValueError, Maybe

__all__ = ["AbsentValueError", "Maybe"]
