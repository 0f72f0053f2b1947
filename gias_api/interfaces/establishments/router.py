"""
FastAPI router for the establishments bounded context.

All routes delegate to use cases. No business logic here.
Domain invariants are enforced by the value objects the use cases build.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from gias_api.application.establishments.dtos import (
    EstablishmentResult,
    GetEstablishmentQuery,
    ValidateEstablishmentCommand,
)
from gias_api.application.establishments.get_establishment import (
    GetEstablishmentUseCase,
)
from gias_api.application.establishments.list_establishments import (
    ListEstablishmentsUseCase,
)
from gias_api.application.establishments.validate_establishment import (
    ValidateEstablishmentUseCase,
)
from gias_api.interfaces.establishments.dependencies import (
    get_establishment_use_case,
    get_list_establishments_use_case,
    get_validate_establishment_use_case,
)
from gias_api.interfaces.establishments.schemas import (
    ErrorResponse,
    EstablishmentItem,
    EstablishmentListResponse,
    ValidateEstablishmentRequest,
)

router = APIRouter(prefix="/establishments", tags=["establishments"])


def _to_item(result: EstablishmentResult) -> EstablishmentItem:
    return EstablishmentItem(
        urn=result.urn,
        name=result.name,
        website_url=result.website_url,
        telephone_number=result.telephone_number,
    )


@router.get(
    "",
    response_model=EstablishmentListResponse,
    summary="List establishments",
    description="Return every known establishment ordered by URN.",
)
def list_establishments(
    use_case: ListEstablishmentsUseCase = Depends(get_list_establishments_use_case),
) -> EstablishmentListResponse:
    """List all establishments."""
    results = use_case.execute()
    return EstablishmentListResponse(
        establishments=[_to_item(r) for r in results]
    )


@router.get(
    "/{urn}",
    response_model=EstablishmentItem,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Get an establishment",
    description="Return the establishment with the given 6-digit URN.",
)
def get_establishment(
    urn: int,
    use_case: GetEstablishmentUseCase = Depends(get_establishment_use_case),
) -> EstablishmentItem:
    """Get a single establishment by URN."""
    result = use_case.execute(GetEstablishmentQuery(urn=urn))
    return _to_item(result)


@router.post(
    "/validation",
    response_model=EstablishmentItem,
    responses={422: {"model": ErrorResponse}},
    summary="Validate establishment data",
    description=(
        "Build an establishment from the supplied data and return it. "
        "Nothing is stored."
    ),
)
def validate_establishment(
    payload: ValidateEstablishmentRequest,
    use_case: ValidateEstablishmentUseCase = Depends(
        get_validate_establishment_use_case
    ),
) -> EstablishmentItem:
    """Validate establishment data against the domain model."""
    command = ValidateEstablishmentCommand(
        urn=payload.urn,
        name=payload.name,
        website_url=payload.website_url,
        telephone_number=payload.telephone_number,
    )
    result = use_case.execute(command)
    return _to_item(result)
