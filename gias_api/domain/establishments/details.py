"""
Immutable descriptive details of an establishment.

All invariants are checked before an instance becomes observable, so an
aggregate holding an EstablishmentDetails can assume it is valid.
Stored values are kept exactly as supplied; trimming is only used to
decide whether a field is blank.
"""

import re
from dataclasses import dataclass

from gias_api.domain.establishments.errors import EstablishmentError

# UK mobile as +44 7xxxxxxxxx (optional space after the country code),
# or any 11-digit number starting with 0. "$" also accepts a single
# trailing newline.
TELEPHONE_NUMBER_PATTERN = re.compile(r"^(\+44\s?7\d{9}|0\d{10})$")

NAME_REQUIRED = "School name is required."
WEBSITE_URL_REQUIRED = "Website URL is required."
TELEPHONE_NUMBER_REQUIRED = "Telephone number is required."
TELEPHONE_NUMBER_INVALID = "Telephone number must be a valid UK number."


def _is_blank(value: object) -> bool:
    """Non-string values count as blank, so they fail their required rule."""
    return not isinstance(value, str) or not value.strip()


def is_valid_telephone_number(telephone_number: str) -> bool:
    """Return True when the number matches the UK telephone pattern."""
    return TELEPHONE_NUMBER_PATTERN.match(telephone_number) is not None


def _validate(name: str, website_url: str, telephone_number: str) -> None:
    """Check every rule in order, raising on the first one that fails.

    Raises:
        EstablishmentError: With the message of the first broken rule.
    """
    if _is_blank(name):
        raise EstablishmentError(NAME_REQUIRED)

    if _is_blank(website_url):
        raise EstablishmentError(WEBSITE_URL_REQUIRED)

    if _is_blank(telephone_number):
        raise EstablishmentError(TELEPHONE_NUMBER_REQUIRED)

    if not is_valid_telephone_number(telephone_number):
        raise EstablishmentError(TELEPHONE_NUMBER_INVALID)


@dataclass(frozen=True)
class EstablishmentDetails:
    """Validated name, website and telephone number of an establishment.

    Equality compares ``name``, ``website_url`` and ``telephone_number``
    in that order.

    Attributes:
        name: The establishment's name. Never blank.
        website_url: The establishment's website URL. Never blank.
        telephone_number: A valid UK telephone number.
    """

    name: str
    website_url: str
    telephone_number: str

    def __post_init__(self) -> None:
        _validate(self.name, self.website_url, self.telephone_number)

    @classmethod
    def create(
        cls, name: str, website_url: str, telephone_number: str
    ) -> "EstablishmentDetails":
        """Create a validated details value object.

        Args:
            name: The establishment's name.
            website_url: The establishment's website URL.
            telephone_number: UK mobile (+44 7...) or 11-digit number
                starting with 0.

        Returns:
            A new, valid EstablishmentDetails.

        Raises:
            EstablishmentError: If any field is blank or the telephone
                number is not a valid UK number.
        """
        return cls(
            name=name,
            website_url=website_url,
            telephone_number=telephone_number,
        )

    def __str__(self) -> str:
        return self.telephone_number
