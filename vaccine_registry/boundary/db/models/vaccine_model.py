"""
Vaccine ORM model.

Persists vaccine records keyed by their code. The vaccine type is stored
by value in two columns of the same row, so each vaccine owns its type.

Dependencies: sqlalchemy, vaccine_registry.boundary.db.base
System role: Vaccine persistence
"""

from sqlalchemy import LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from vaccine_registry.boundary.db.base import Base, TimestampMixin
from vaccine_registry.core.vaccine_records import MAX_CODE_LENGTH


class VaccineModel(Base, TimestampMixin):
    """
    Vaccine ORM model.

    Attributes:
        code: Primary key; the store rejects a second row with the same code
        description: Vaccine description
        vaccine_type_code: Code of the owned vaccine type
        vaccine_type_description: Description of the owned vaccine type
        image: Optional binary attachment (large object)
        created_at: Row creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "vaccines"

    code: Mapped[str] = mapped_column(
        String(MAX_CODE_LENGTH),
        primary_key=True,
        doc="Vaccine code",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Vaccine description",
    )

    vaccine_type_code: Mapped[str] = mapped_column(
        String,
        nullable=False,
        index=True,
        doc="Vaccine type code",
    )

    vaccine_type_description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Vaccine type description",
    )

    image: Mapped[bytes | None] = mapped_column(
        LargeBinary,
        nullable=True,
        default=None,
        doc="Optional binary attachment",
    )
