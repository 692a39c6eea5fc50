"""
Custom Exceptions - BD Weighting Engine
bdscore/core/exceptions.py

Exception classes for scoring and weight-configuration operations.
Validation issues are returned as data, not raised; these cover the
fail-hard paths only.
"""

from typing import Iterable, List, Optional


class ScoringError(Exception):
    """Base exception for scoring operations."""

    pass


class InvalidDataError(ScoringError):
    """Input data is malformed."""

    def __init__(self, message: str = "Invalid data"):
        self.message = message
        super().__init__(f"Invalid data: {message}")


class MissingRequiredFieldError(ScoringError):
    """One or more required fields are absent."""

    def __init__(self, fields: Iterable[str]):
        self.fields: List[str] = list(fields)
        super().__init__(f"Missing required field: {', '.join(self.fields)}")


class ConfigurationError(ScoringError):
    """Weight configuration cannot be used for the requested operation."""

    def __init__(self, message: str, issues: Optional[list] = None):
        self.message = message
        self.issues = list(issues or [])
        super().__init__(f"Configuration error: {message}")
