"""
Establishments bounded context: domain layer.

- EstablishmentIdentifier: validated 6-digit URN value object
- EstablishmentDetails: validated name, website and telephone value object
- Establishment: aggregate root composing the two
"""

from gias_api.domain.establishments.details import EstablishmentDetails
from gias_api.domain.establishments.errors import (
    EstablishmentError,
    EstablishmentNotFoundError,
    InvalidArgumentError,
)
from gias_api.domain.establishments.establishment import Establishment
from gias_api.domain.establishments.identifier import EstablishmentIdentifier

__all__ = [
    "Establishment",
    "EstablishmentDetails",
    "EstablishmentError",
    "EstablishmentIdentifier",
    "EstablishmentNotFoundError",
    "InvalidArgumentError",
]
