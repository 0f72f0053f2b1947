"""
Dependency injection for the establishments bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the establishments context.
"""

from functools import lru_cache

from gias_api.application.establishments.get_establishment import (
    GetEstablishmentUseCase,
)
from gias_api.application.establishments.get_stub_data import GetStubDataUseCase
from gias_api.application.establishments.list_establishments import (
    ListEstablishmentsUseCase,
)
from gias_api.application.establishments.validate_establishment import (
    ValidateEstablishmentUseCase,
)
from gias_api.core.config import settings
from gias_api.domain.establishments.ports import EstablishmentRepository
from gias_api.infrastructure.establishments.in_memory_repository import (
    InMemoryEstablishmentRepository,
)


@lru_cache(maxsize=1)
def get_establishment_repository() -> EstablishmentRepository:
    """Return the process-wide read-only establishment repository."""
    return InMemoryEstablishmentRepository.with_sample_data()


def get_establishment_use_case() -> GetEstablishmentUseCase:
    """Build GetEstablishmentUseCase with its infrastructure dependencies."""
    return GetEstablishmentUseCase(
        establishment_repo=get_establishment_repository(),
    )


def get_list_establishments_use_case() -> ListEstablishmentsUseCase:
    """Build ListEstablishmentsUseCase with its infrastructure dependencies."""
    return ListEstablishmentsUseCase(
        establishment_repo=get_establishment_repository(),
    )


def get_validate_establishment_use_case() -> ValidateEstablishmentUseCase:
    """Build ValidateEstablishmentUseCase."""
    return ValidateEstablishmentUseCase()


def get_stub_data_use_case() -> GetStubDataUseCase:
    """Build GetStubDataUseCase sized from settings."""
    return GetStubDataUseCase(item_count=settings.stub_item_count)
