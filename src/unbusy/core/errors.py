"""Custom exception hierarchy for the Unbusy domain model."""

from __future__ import annotations

from typing import Any


class UnbusyError(Exception):
    """Base exception for all Unbusy errors."""


# --- Input ---
class ParseError(UnbusyError, ValueError):
    """Textual input could not be interpreted as the expected form."""


# --- Identifiers ---
class InvalidRoll(UnbusyError, ValueError):
    """An integer does not satisfy the roll construction invariants."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid roll: {value}")


# --- Courses ---
class CourseNotFound(UnbusyError, LookupError):
    """No course entry for a (department, code) pair."""

    def __init__(self, department: Any, code: str):
        self.department = department
        self.code = code
        super().__init__(f"No course '{code}' available for {department}")


# --- Calendar ---
class InvalidSpan(UnbusyError, ValueError):
    """A multi-day holiday span ends before it starts."""

    def __init__(self, start: Any, end: Any):
        self.start = start
        self.end = end
        super().__init__(f"Invalid holiday span: {start} is after {end}")


# --- Internal ---
class InvariantViolated(UnbusyError, RuntimeError):
    """A total function observed input that validated constructors forbid."""
