"""
Vaccine representation mapping.

Converts between VaccineDTO (wire form) and Vaccine (domain record).
Mapping is structural only: incomplete input is passed through untouched
and left for the validation engine to reject. Binary attachments travel
as base64 text on the wire and as raw bytes in the record.

Dependencies: vaccine_registry.core, vaccine_registry.models.vaccine
System role: Vaccine request/response transformation
"""

import base64
from collections.abc import Iterable

from vaccine_registry.core.vaccine_records import Vaccine, VaccineType
from vaccine_registry.models.vaccine import VaccineDTO, VaccineTypeDTO


def encode_image(image: bytes | None) -> str | None:
    """Encode raw attachment bytes as base64 text."""
    if image is None:
        return None
    return base64.b64encode(image).decode("ascii")


def decode_image(image: str | None) -> bytes | None:
    """Decode base64 attachment text into raw bytes."""
    if image is None:
        return None
    return base64.b64decode(image)


def to_record(dto: VaccineDTO) -> Vaccine:
    """
    Transform a wire representation into a domain record.

    Args:
        dto: Parsed request body

    Returns:
        Vaccine: Domain record (not validated)
    """
    vaccine_type = None
    if dto.vaccine_type is not None:
        vaccine_type = VaccineType(
            code=dto.vaccine_type.code,
            description=dto.vaccine_type.description,
        )
    return Vaccine(
        code=dto.code,
        description=dto.description,
        vaccine_type=vaccine_type,
        image=decode_image(dto.image),
        created_at=dto.created_at,
        updated_at=dto.updated_at,
    )


def to_representation(record: Vaccine) -> VaccineDTO:
    """
    Transform a domain record into its wire representation.

    Args:
        record: Domain record

    Returns:
        VaccineDTO: Response body
    """
    # model_construct skips schema checks so invalid records still map
    vaccine_type = None
    if record.vaccine_type is not None:
        vaccine_type = VaccineTypeDTO.model_construct(
            code=record.vaccine_type.code,
            description=record.vaccine_type.description,
        )
    return VaccineDTO.model_construct(
        code=record.code,
        description=record.description,
        vaccine_type=vaccine_type,
        image=encode_image(record.image),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def to_records(dtos: Iterable[VaccineDTO]) -> list[Vaccine]:
    """Map each representation to a record, preserving order."""
    return [to_record(dto) for dto in dtos]


def to_representations(records: Iterable[Vaccine]) -> list[VaccineDTO]:
    """Map each record to its representation, preserving order."""
    return [to_representation(record) for record in records]
