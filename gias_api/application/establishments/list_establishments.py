"""
Use case: List every known establishment.

Input: None
Output: list[EstablishmentResult]
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from gias_api.application.establishments.dtos import EstablishmentResult
from gias_api.domain.establishments.ports import EstablishmentRepository

logger = logging.getLogger(__name__)


class ListEstablishmentsUseCase:
    """Orchestrates listing all establishments, ordered by URN."""

    def __init__(self, establishment_repo: EstablishmentRepository) -> None:
        self._establishment_repo = establishment_repo

    def execute(self) -> list[EstablishmentResult]:
        """Run the list establishments use case."""
        establishments = self._establishment_repo.list_all()
        logger.info("Listing %d establishments", len(establishments))
        return [EstablishmentResult.from_establishment(e) for e in establishments]
