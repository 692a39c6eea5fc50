"""
Core Package - BD Weighting Engine
bdscore/core/__init__.py

Core infrastructure: exceptions, logging, dependencies.
"""

from bdscore.core.exceptions import (
    ConfigurationError,
    InvalidDataError,
    MissingRequiredFieldError,
    ScoringError,
)

__all__ = [
    # Exceptions
    "ConfigurationError",
    "InvalidDataError",
    "MissingRequiredFieldError",
    "ScoringError",
]
