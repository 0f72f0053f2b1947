"""
Establishment aggregate root.

The aggregate enforces composition only: it requires a details object to
be present but trusts that the value objects handed to it already hold
their own invariants. Once built it is a complete, read-only snapshot.
"""

from dataclasses import dataclass

from gias_api.domain.common.aggregate_root import AggregateRoot
from gias_api.domain.establishments.details import EstablishmentDetails
from gias_api.domain.establishments.errors import EstablishmentError
from gias_api.domain.establishments.identifier import EstablishmentIdentifier

MISSING_DETAILS = "An initialised 'EstablishmentDetails' object must be provided."


@dataclass(frozen=True, eq=False)
class Establishment(AggregateRoot[EstablishmentIdentifier]):
    """An establishment identified by its URN.

    Attributes:
        identifier: The establishment's URN identity.
        basic_details: Name, website and telephone number.

    Raises:
        EstablishmentError: If ``basic_details`` is None.
    """

    identifier: EstablishmentIdentifier
    basic_details: EstablishmentDetails

    def __post_init__(self) -> None:
        if self.basic_details is None:
            raise EstablishmentError(MISSING_DETAILS)

    @classmethod
    def create(
        cls,
        identifier: EstablishmentIdentifier,
        basic_details: EstablishmentDetails,
    ) -> "Establishment":
        """Compose an aggregate from already-valid value objects."""
        return cls(identifier=identifier, basic_details=basic_details)
