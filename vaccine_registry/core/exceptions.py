"""
Fault taxonomy for the vaccine registry.

Domain failures (constraint violations, duplicate codes, missing codes) are
plain values carried inside a Result; only contract violations and the
boundary's final rendering step use exceptions.

Dependencies: None (pure domain layer)
System role: Typed failure kinds shared by validation, manager and API
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FaultKind(str, Enum):
    """Stable identifiers for each failure kind."""

    INVALID_ARGUMENT = "invalid_argument"
    CONSTRAINT_VIOLATION = "constraint_violation"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Fault:
    """
    Typed, non-retryable failure reported by validation or lookup logic.

    Attributes:
        message: Human-readable reason
        code: Vaccine code the failure refers to, when known
    """

    message: str
    code: str | None = None
    kind: FaultKind = field(init=False)


@dataclass(frozen=True)
class ConstraintViolation(Fault):
    """A field-length or completeness rule failed."""

    kind: FaultKind = field(default=FaultKind.CONSTRAINT_VIOLATION, init=False)


@dataclass(frozen=True)
class DuplicateKey(Fault):
    """A create collided with a code already in the registry."""

    kind: FaultKind = field(default=FaultKind.DUPLICATE_KEY, init=False)

    @classmethod
    def for_code(cls, code: str) -> "DuplicateKey":
        return cls(f"Vaccine {code} already exists", code=code)


@dataclass(frozen=True)
class NotFound(Fault):
    """An update or lookup referenced a code absent from the registry."""

    kind: FaultKind = field(default=FaultKind.NOT_FOUND, init=False)

    @classmethod
    def for_code(cls, code: str) -> "NotFound":
        return cls(f"Vaccine {code} does not exist", code=code)


class VaccineRegistryException(Exception):
    """Base exception for all vaccine registry errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidArgumentError(VaccineRegistryException, ValueError):
    """Raised when a caller passes a null or blank identifier."""

    def __init__(self, argument: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["argument"] = argument
        super().__init__(f"{argument} must be a non-empty string", details)


class VaccineFaultError(VaccineRegistryException):
    """
    Raised at the HTTP boundary when a failed Result is unwrapped.

    Carries the original Fault so the central handler can pick a status
    code and render a uniform error body.
    """

    def __init__(self, fault: Fault) -> None:
        self.fault = fault
        details = {"kind": fault.kind.value}
        if fault.code is not None:
            details["code"] = fault.code
        super().__init__(fault.message, details)
