"""
Port interfaces (ABCs) for the establishments bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gias_api.domain.establishments.establishment import Establishment
from gias_api.domain.establishments.identifier import EstablishmentIdentifier


class EstablishmentRepository(ABC):
    """Port for read-only access to establishments."""

    @abstractmethod
    def get_by_identifier(
        self, identifier: EstablishmentIdentifier
    ) -> Optional[Establishment]:
        """Return the establishment with this identifier, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Establishment]:
        """Return every establishment, ordered by URN ascending."""
        raise NotImplementedError
