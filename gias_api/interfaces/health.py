"""
Health check router.

Liveness and readiness in one check: answering at all means the process
is up, and the establishment count shows the repository has loaded.
"""

from fastapi import APIRouter, Depends

from gias_api.core.config import settings
from gias_api.domain.establishments.ports import EstablishmentRepository
from gias_api.interfaces.establishments.dependencies import (
    get_establishment_repository,
)
from gias_api.interfaces.establishments.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns status, version and the number of establishments loaded.",
)
def health_check(
    repo: EstablishmentRepository = Depends(get_establishment_repository),
) -> HealthResponse:
    """Report application status and repository size."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        establishments=len(repo.list_all()),
    )
