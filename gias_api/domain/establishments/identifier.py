"""
Strongly-typed URN identifier for an establishment.

Any instance that exists is valid: construction fails fast when the URN
does not render as exactly six decimal digits. Once created the URN
cannot change.
"""

import re
from dataclasses import dataclass

from gias_api.domain.establishments.errors import InvalidArgumentError

URN_PATTERN = re.compile(r"^\d{6}$")


def _is_valid_urn(urn: object) -> bool:
    """Return True when ``urn`` is an int whose decimal form is six digits."""
    if isinstance(urn, bool) or not isinstance(urn, int):
        return False
    return URN_PATTERN.match(str(urn)) is not None


@dataclass(frozen=True)
class EstablishmentIdentifier:
    """Immutable 6-digit URN value object.

    Attributes:
        urn: The establishment's unique reference number.

    Raises:
        InvalidArgumentError: If ``urn`` is not a 6-digit non-negative int.
    """

    urn: int

    def __post_init__(self) -> None:
        if not _is_valid_urn(self.urn):
            raise InvalidArgumentError(
                "URN must be a valid 6-digit numeric value.", "urn"
            )

    @classmethod
    def create(cls, urn: int) -> "EstablishmentIdentifier":
        """Create a validated identifier from a raw URN."""
        return cls(urn)

    def __str__(self) -> str:
        return str(self.urn)
