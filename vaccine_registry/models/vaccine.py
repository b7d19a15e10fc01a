"""
Vaccine domain models and schemas.

Wire representation of vaccines used for both requests and responses.
Field-length and completeness rules live in the validation engine and
surface as typed faults, not schema errors.

Dependencies: pydantic
System role: Vaccine API contracts
"""

import base64
import binascii
from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class VaccineTypeDTO(BaseModel):
    """Wire schema for a vaccine type."""

    code: str | None = Field(None, description="Vaccine type code")
    description: str | None = Field(None, description="Vaccine type description")


class VaccineDTO(BaseModel):
    """Wire schema for a vaccine record."""

    code: str = Field(..., min_length=1, description="Vaccine code (at most 10 characters)")
    description: str = Field(..., description="Vaccine description")
    vaccine_type: VaccineTypeDTO | None = Field(None, description="Owning vaccine type")
    image: str | None = Field(None, description="Optional base64-encoded attachment")
    created_at: datetime | None = Field(None, description="Set by the registry on create")
    updated_at: datetime | None = Field(None, description="Set by the registry on update")

    @field_validator("image")
    @classmethod
    def image_must_be_base64(cls, value: str | None) -> str | None:
        """Reject attachments that are not valid base64 text."""
        if value is None:
            return value
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("image must be base64-encoded") from e
        return value
