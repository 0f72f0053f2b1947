"""
Domain-specific errors for the establishments bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class EstablishmentError(Exception):
    """Base error for all establishment domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class EstablishmentNotFoundError(EstablishmentError):
    """Raised when no establishment exists for a URN."""

    def __init__(self, urn: int) -> None:
        super().__init__(f"Establishment not found: {urn}")
        self.urn = urn


class InvalidArgumentError(ValueError):
    """Raised when an argument does not meet its format requirements.

    Attributes:
        message: Human-readable description of the problem.
        param_name: Name of the offending parameter.
    """

    def __init__(self, message: str, param_name: str) -> None:
        self.message = message
        self.param_name = param_name
        super().__init__(f"{message} (Parameter '{param_name}')")
