"""
Use case: Build an establishment aggregate from external data.

Input: ValidateEstablishmentCommand (urn, name, website_url, telephone_number)
Output: EstablishmentResult
Side effects: None. Nothing is stored.
Failure cases: InvalidArgumentError, EstablishmentError.
"""

import logging

from gias_api.application.establishments.dtos import (
    EstablishmentResult,
    ValidateEstablishmentCommand,
)
from gias_api.domain.establishments.details import EstablishmentDetails
from gias_api.domain.establishments.establishment import Establishment
from gias_api.domain.establishments.identifier import EstablishmentIdentifier

logger = logging.getLogger(__name__)


class ValidateEstablishmentUseCase:
    """Runs raw establishment data through the domain factories.

    Leaf value objects are built first; the aggregate then composes them.
    The first broken invariant propagates to the caller unchanged.
    """

    def execute(self, command: ValidateEstablishmentCommand) -> EstablishmentResult:
        """Run the validate establishment use case.

        Args:
            command: Unvalidated establishment data.

        Returns:
            The establishment as the domain model sees it.

        Raises:
            InvalidArgumentError: If the URN is not six digits.
            EstablishmentError: If any detail field is invalid.
        """
        identifier = EstablishmentIdentifier.create(command.urn)
        details = EstablishmentDetails.create(
            name=command.name,
            website_url=command.website_url,
            telephone_number=command.telephone_number,
        )
        establishment = Establishment.create(identifier, details)

        logger.info("Validated establishment urn=%s", identifier)

        return EstablishmentResult.from_establishment(establishment)
