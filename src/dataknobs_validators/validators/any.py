"""Validator accepting any value.
"""

from __future__ import annotations

from .base import BaseValidator


class AnyValidator(BaseValidator):
    """No type rule; only the rules added to it apply."""
