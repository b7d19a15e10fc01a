"""
Vaccine domain records.

In-memory entities held by the registry manager and returned by the store.
Each Vaccine owns its VaccineType by value.

Dependencies: None (pure domain layer)
System role: Canonical vaccine entity
"""

from dataclasses import dataclass
from datetime import datetime

MAX_CODE_LENGTH = 10


@dataclass(frozen=True)
class VaccineType:
    """Vaccine category, identified by a short code."""

    code: str | None
    description: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.code)


@dataclass(frozen=True)
class Vaccine:
    """
    Vaccine record.

    Attributes:
        code: Registry identity, at most MAX_CODE_LENGTH characters
        description: Free-text description
        vaccine_type: Owned VaccineType value (None only for invalid input)
        image: Optional binary attachment
        created_at: Store-assigned creation timestamp
        updated_at: Store-assigned modification timestamp
    """

    code: str
    description: str
    vaccine_type: VaccineType | None
    image: bytes | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
