"""
Adapter: In-memory establishment store.

Implements EstablishmentRepository port.
Decodes raw records through the domain factories once, at construction,
and serves read-only lookups afterwards.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from gias_api.domain.establishments.details import EstablishmentDetails
from gias_api.domain.establishments.establishment import Establishment
from gias_api.domain.establishments.identifier import EstablishmentIdentifier
from gias_api.domain.establishments.ports import EstablishmentRepository
from gias_api.infrastructure.establishments.seed import SAMPLE_ESTABLISHMENTS

logger = logging.getLogger(__name__)


def establishment_from_record(record: Mapping[str, Any]) -> Establishment:
    """Build an Establishment aggregate from a raw record.

    Args:
        record: Mapping with urn, name, website_url and telephone_number.

    Returns:
        A valid Establishment.

    Raises:
        InvalidArgumentError: If the URN is malformed.
        EstablishmentError: If any detail field is invalid.
        KeyError: If a required key is missing.
    """
    identifier = EstablishmentIdentifier.create(record["urn"])
    details = EstablishmentDetails.create(
        name=record["name"],
        website_url=record["website_url"],
        telephone_number=record["telephone_number"],
    )
    return Establishment.create(identifier, details)


class InMemoryEstablishmentRepository(EstablishmentRepository):
    """Read-only establishment repository backed by a dict.

    Later records replace earlier ones with the same URN.
    """

    def __init__(self, establishments: Iterable[Establishment] = ()) -> None:
        self._by_identifier: dict[EstablishmentIdentifier, Establishment] = {
            e.identifier: e for e in establishments
        }

    @classmethod
    def from_records(
        cls, records: Iterable[Mapping[str, Any]]
    ) -> "InMemoryEstablishmentRepository":
        """Build a repository by decoding raw records.

        An invalid record fails the whole load.
        """
        establishments = [establishment_from_record(r) for r in records]
        logger.info("Loaded %d establishments into memory", len(establishments))
        return cls(establishments)

    @classmethod
    def with_sample_data(cls) -> "InMemoryEstablishmentRepository":
        """Build a repository holding the bundled sample establishments."""
        return cls.from_records(SAMPLE_ESTABLISHMENTS)

    def get_by_identifier(
        self, identifier: EstablishmentIdentifier
    ) -> Optional[Establishment]:
        return self._by_identifier.get(identifier)

    def list_all(self) -> list[Establishment]:
        return sorted(self._by_identifier.values(), key=lambda e: e.identifier.urn)
