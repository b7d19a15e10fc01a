"""
Core business logic module.

Contains the vaccine domain records, the fault taxonomy, the Result
contract and the validation engine. All business rules reside here.
"""

from vaccine_registry.core.exceptions import (
    ConstraintViolation,
    DuplicateKey,
    Fault,
    FaultKind,
    InvalidArgumentError,
    NotFound,
    VaccineFaultError,
    VaccineRegistryException,
)
from vaccine_registry.core.result import Result
from vaccine_registry.core.vaccine_records import MAX_CODE_LENGTH, Vaccine, VaccineType
from vaccine_registry.core.vaccine_validation import (
    Operation,
    ValidationResult,
    validate_vaccine,
)

__all__ = [
    # Faults and exceptions
    "ConstraintViolation",
    "DuplicateKey",
    "Fault",
    "FaultKind",
    "InvalidArgumentError",
    "NotFound",
    "VaccineFaultError",
    "VaccineRegistryException",
    # Records
    "MAX_CODE_LENGTH",
    "Vaccine",
    "VaccineType",
    # Validation
    "Operation",
    "Result",
    "ValidationResult",
    "validate_vaccine",
]
