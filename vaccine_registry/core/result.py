"""
Result value returned by registry operations.

Exactly one of value/fault is meaningful; ok is True iff fault is None.
Failed results are turned into HTTP errors only by unwrap() at the API boundary.

Dependencies: vaccine_registry.core.exceptions
System role: Explicit success/failure contract between manager and API
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from vaccine_registry.core.exceptions import Fault, VaccineFaultError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a registry operation.

    Attributes:
        value: Operation payload on success
        fault: Typed failure if the operation was rejected
    """

    value: T | None = None
    fault: Fault | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, fault: Fault) -> "Result[T]":
        return cls(fault=fault)

    def unwrap(self) -> T:
        """
        Return the payload or raise the carried fault.

        Raises:
            VaccineFaultError: If the result holds a fault
        """
        if self.fault is not None:
            raise VaccineFaultError(self.fault)
        return self.value  # type: ignore[return-value]
