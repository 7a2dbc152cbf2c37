"""Engine error types.

Every failure the engine can report is an ``EngineError`` subclass carrying
its structured fields as attributes. The API layer maps these to HTTP status
codes; the engine itself never catches them.
"""

from __future__ import annotations

from datetime import date


class EngineError(Exception):
    """Base class for all award engine errors."""


class ConfigNotFoundError(EngineError):
    """Raised when a rule table file or directory is missing."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigParseError(EngineError):
    """Raised when a rule table file cannot be parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to parse configuration file '{path}': {message}")


class ClassificationNotFoundError(EngineError):
    """Raised when a classification code is not in the rule table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Classification not found: {code}")


class RateNotFoundError(EngineError):
    """Raised when no rate is effective for a classification on a date."""

    def __init__(self, classification: str, as_of_date: date):
        self.classification = classification
        self.as_of_date = as_of_date
        super().__init__(
            f"Rate not found for classification '{classification}' on date {as_of_date}"
        )


class InvalidShiftError(EngineError):
    """Raised when a shift is structurally inconsistent."""

    def __init__(self, shift_id: str, message: str):
        self.shift_id = shift_id
        self.message = message
        super().__init__(f"Invalid shift '{shift_id}': {message}")


class InvalidEmployeeError(EngineError):
    """Raised when an employee field holds an unusable value."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid employee field '{field}': {message}")


class CalculationError(EngineError):
    """Raised when an internal invariant is violated.

    Indicates a defect; never expected in normal operation.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Calculation error: {message}")
