"""
Vaccine validation engine.

Business rules checked before any mutation reaches the store. Rules run in
a fixed order (completeness, length, uniqueness/identity) and only the
first violation is reported.

Dependencies: vaccine_registry.core
System role: Vaccine field and identity validation
"""

from collections.abc import Container
from dataclasses import dataclass
from enum import Enum

from vaccine_registry.core.exceptions import (
    ConstraintViolation,
    DuplicateKey,
    Fault,
    NotFound,
)
from vaccine_registry.core.vaccine_records import MAX_CODE_LENGTH, Vaccine

TYPE_INCOMPLETE = "type incomplete"
CODE_TOO_LONG = "code too long"


class Operation(str, Enum):
    """Mutation being validated."""

    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_vaccine; violation is None when all rules pass."""

    violation: Fault | None = None

    @property
    def ok(self) -> bool:
        return self.violation is None


def _check_completeness(record: Vaccine) -> Fault | None:
    if record.vaccine_type is None or not record.vaccine_type.is_complete:
        return ConstraintViolation(TYPE_INCOMPLETE, code=record.code)
    return None


def _check_length(record: Vaccine) -> Fault | None:
    if record.code is not None and len(record.code) > MAX_CODE_LENGTH:
        return ConstraintViolation(CODE_TOO_LONG, code=record.code)
    return None


def _check_identity(
    record: Vaccine,
    existing_codes: Container[str],
    operation: Operation,
) -> Fault | None:
    present = record.code in existing_codes
    if operation is Operation.CREATE and present:
        return DuplicateKey.for_code(record.code)
    if operation is Operation.UPDATE and not present:
        return NotFound.for_code(record.code)
    return None


def validate_vaccine(
    record: Vaccine,
    existing_codes: Container[str],
    operation: Operation,
) -> ValidationResult:
    """
    Validate a vaccine record before create or update.

    Args:
        record: Candidate record
        existing_codes: Codes currently held by the store (only membership is used)
        operation: CREATE enforces uniqueness, UPDATE enforces identity

    Returns:
        ValidationResult: First violation found, or an ok result
    """
    for violation in (
        _check_completeness(record),
        _check_length(record),
        _check_identity(record, existing_codes, operation),
    ):
        if violation is not None:
            return ValidationResult(violation)
    return ValidationResult()
