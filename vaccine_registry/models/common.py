"""
Common response models.

Error envelope shared by every fault rendered at the API boundary.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    """Error details."""

    kind: str = Field(description="Fault kind identifier")
    message: str = Field(description="Error message")
    code: str | None = Field(default=None, description="Vaccine code the error refers to")


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: ErrorBody
