# deck_snake/errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a game is constructed with settings it cannot honour."""
