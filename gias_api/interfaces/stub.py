"""
Stub data router.

Serves empty placeholder objects so prototype consumers can wire up
against the API before real data is exposed.
"""

from fastapi import APIRouter, Depends

from gias_api.application.establishments.get_stub_data import GetStubDataUseCase
from gias_api.interfaces.establishments.dependencies import get_stub_data_use_case

router = APIRouter(prefix="/stub", tags=["stub"])


@router.get(
    "",
    name="GetStubData",
    response_model=list[dict],
    summary="Get stub data",
    description="Returns a fixed number of empty placeholder objects.",
)
def get_stub_data(
    use_case: GetStubDataUseCase = Depends(get_stub_data_use_case),
) -> list[dict]:
    """Return placeholder stub objects."""
    return use_case.execute()
