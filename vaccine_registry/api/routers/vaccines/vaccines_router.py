"""
Vaccine API endpoints.

Routes:
- GET /vaccines - List all vaccines (204 with [] when empty)
- GET /vaccines/check/{code} - Check whether a code is registered
- GET /vaccines/{code} - Get single vaccine
- POST /vaccines - Create new vaccine
- PUT /vaccines - Update vaccine identified by the body's code
- DELETE /vaccines/{code} - Delete vaccine

Dependencies: vaccine_registry.application.services, vaccine_registry.models
System role: Vaccine registry HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from vaccine_registry.application.services.vaccine_manager import VaccineManager
from vaccine_registry.api.deps.dependencies import get_vaccine_manager
from vaccine_registry.models.common import ErrorResponse
from vaccine_registry.models.vaccine import VaccineDTO

from .vaccine_mapper import to_record, to_representation, to_representations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vaccines", tags=["vaccines"])

EMPTY_COLLECTION = b"[]"

FAULT_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Constraint violation or invalid argument"},
    404: {"model": ErrorResponse, "description": "Vaccine not found"},
    409: {"model": ErrorResponse, "description": "Vaccine code already exists"},
    422: {"model": ErrorResponse, "description": "Request failed schema validation"},
}


@router.get(
    "",
    response_model=list[VaccineDTO],
    responses={204: {"description": "Registry is empty; body is []"}},
)
async def list_vaccines(
    type_code: str | None = None,
    manager: VaccineManager = Depends(get_vaccine_manager),
):
    """
    List all vaccines, optionally restricted to one vaccine type.

    Args:
        type_code: Vaccine type code filter (optional)
        manager: Injected VaccineManager

    Returns:
        list[VaccineDTO]: Vaccines in store order, or 204 with [] when none match
    """
    logger.info("Listing vaccines", extra={"type_code": type_code})

    vaccines = await manager.list_vaccines(type_code=type_code)

    logger.info("Vaccines retrieved", extra={"count": len(vaccines), "type_code": type_code})

    if not vaccines:
        # Explicit length; servers assume zero body bytes on a 204 otherwise
        return Response(
            content=EMPTY_COLLECTION,
            status_code=status.HTTP_204_NO_CONTENT,
            media_type="application/json",
            headers={"content-length": str(len(EMPTY_COLLECTION))},
        )
    return to_representations(vaccines)


@router.get("/check/{code}", response_model=bool)
async def check_vaccine_code(
    code: str,
    manager: VaccineManager = Depends(get_vaccine_manager),
) -> bool:
    """
    Check whether a vaccine code is already registered.

    Args:
        code: Vaccine code
        manager: Injected VaccineManager

    Returns:
        bool: True if present
    """
    present = await manager.exists(code)
    logger.info("Vaccine code checked", extra={"code": code, "present": present})
    return present


@router.get("/{code}", response_model=VaccineDTO, responses=FAULT_RESPONSES)
async def get_vaccine(
    code: str,
    manager: VaccineManager = Depends(get_vaccine_manager),
) -> VaccineDTO:
    """
    Get single vaccine by code.

    Args:
        code: Vaccine code
        manager: Injected VaccineManager

    Returns:
        VaccineDTO: Vaccine data

    Raises:
        VaccineFaultError: NotFound when the code is absent (rendered as 404)
    """
    vaccine = (await manager.find(code)).unwrap()
    return to_representation(vaccine)


@router.post(
    "",
    response_model=VaccineDTO,
    status_code=status.HTTP_201_CREATED,
    responses=FAULT_RESPONSES,
)
async def create_vaccine(
    request: VaccineDTO,
    manager: VaccineManager = Depends(get_vaccine_manager),
) -> VaccineDTO:
    """
    Create new vaccine.

    Args:
        request: Vaccine wire representation
        manager: Injected VaccineManager

    Returns:
        VaccineDTO: Created vaccine with store-assigned timestamps

    Raises:
        VaccineFaultError: ConstraintViolation (400) or DuplicateKey (409)
    """
    logger.info("Creating vaccine", extra={"code": request.code})

    created = (await manager.create(to_record(request))).unwrap()

    return to_representation(created)


@router.put("", response_model=VaccineDTO, responses=FAULT_RESPONSES)
async def update_vaccine(
    request: VaccineDTO,
    manager: VaccineManager = Depends(get_vaccine_manager),
) -> VaccineDTO:
    """
    Replace the vaccine identified by the body's code.

    Args:
        request: Vaccine wire representation
        manager: Injected VaccineManager

    Returns:
        VaccineDTO: Updated vaccine

    Raises:
        VaccineFaultError: ConstraintViolation (400) or NotFound (404)
    """
    logger.info("Updating vaccine", extra={"code": request.code})

    updated = (await manager.update(to_record(request))).unwrap()

    return to_representation(updated)


@router.delete("/{code}", response_model=bool)
async def delete_vaccine(
    code: str,
    manager: VaccineManager = Depends(get_vaccine_manager),
) -> bool:
    """
    Delete vaccine by code.

    Args:
        code: Vaccine code
        manager: Injected VaccineManager

    Returns:
        bool: True if removed, False if there was nothing to delete
    """
    return await manager.delete(code)
