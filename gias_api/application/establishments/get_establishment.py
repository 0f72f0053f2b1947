"""
Use case: Look up one establishment by URN.

Input: GetEstablishmentQuery (urn)
Output: EstablishmentResult
Side effects: None (read-only query).
Failure cases: InvalidArgumentError, EstablishmentNotFoundError.
"""

import logging

from gias_api.application.establishments.dtos import (
    EstablishmentResult,
    GetEstablishmentQuery,
)
from gias_api.domain.establishments.errors import EstablishmentNotFoundError
from gias_api.domain.establishments.identifier import EstablishmentIdentifier
from gias_api.domain.establishments.ports import EstablishmentRepository

logger = logging.getLogger(__name__)


class GetEstablishmentUseCase:
    """Orchestrates retrieving a single establishment.

    Converts the raw URN into a typed identifier before it reaches
    the repository.
    """

    def __init__(self, establishment_repo: EstablishmentRepository) -> None:
        self._establishment_repo = establishment_repo

    def execute(self, query: GetEstablishmentQuery) -> EstablishmentResult:
        """Run the get establishment use case.

        Args:
            query: The lookup request containing the URN.

        Returns:
            The matching establishment.

        Raises:
            InvalidArgumentError: If the URN is not six digits.
            EstablishmentNotFoundError: If no establishment has this URN.
        """
        identifier = EstablishmentIdentifier.create(query.urn)

        logger.info("Retrieving establishment urn=%s", identifier)

        establishment = self._establishment_repo.get_by_identifier(identifier)
        if establishment is None:
            raise EstablishmentNotFoundError(identifier.urn)

        return EstablishmentResult.from_establishment(establishment)
