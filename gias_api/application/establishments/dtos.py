"""
Data Transfer Objects for the establishments application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from gias_api.domain.establishments.establishment import Establishment


@dataclass(frozen=True)
class GetEstablishmentQuery:
    """Input DTO for looking up a single establishment.

    Attributes:
        urn: The establishment's unique reference number.
    """

    urn: int


@dataclass(frozen=True)
class ValidateEstablishmentCommand:
    """Input DTO carrying unvalidated establishment data.

    Attributes:
        urn: Raw unique reference number.
        name: Raw establishment name.
        website_url: Raw website URL.
        telephone_number: Raw telephone number.
    """

    urn: int
    name: str
    website_url: str
    telephone_number: str


@dataclass(frozen=True)
class EstablishmentResult:
    """Output DTO for a single establishment.

    Attributes:
        urn: The establishment's unique reference number.
        name: The establishment's name.
        website_url: The establishment's website URL.
        telephone_number: The establishment's telephone number.
    """

    urn: int
    name: str
    website_url: str
    telephone_number: str

    @classmethod
    def from_establishment(cls, establishment: Establishment) -> "EstablishmentResult":
        """Flatten an aggregate into a result DTO."""
        details = establishment.basic_details
        return cls(
            urn=establishment.identifier.urn,
            name=details.name,
            website_url=details.website_url,
            telephone_number=details.telephone_number,
        )
