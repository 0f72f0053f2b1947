"""
Pydantic schemas for establishments API request/response validation.

Schemas only enforce wire types. Field-level business rules (URN format,
required fields, telephone pattern) belong to the domain value objects,
whose errors are mapped centrally to 422 responses.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class EstablishmentItem(BaseModel):
    """A single establishment in a response."""

    urn: int = Field(..., description="6-digit unique reference number")
    name: str
    website_url: str
    telephone_number: str


class EstablishmentListResponse(BaseModel):
    """Response schema for the establishment listing endpoint."""

    establishments: list[EstablishmentItem]


class ValidateEstablishmentRequest(BaseModel):
    """Request schema for the establishment validation endpoint.

    Attributes:
        urn: Unique reference number; must be six digits.
        name: Establishment name; must not be blank.
        website_url: Website URL; must not be blank.
        telephone_number: UK telephone number.
    """

    urn: int = Field(..., description="6-digit unique reference number")
    name: str = Field(..., description="Establishment name")
    website_url: str = Field(..., description="Establishment website URL")
    telephone_number: str = Field(
        ...,
        description="UK mobile (+44 7xxxxxxxxx) or 11-digit number starting with 0",
    )


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    establishments: int = Field(..., description="Establishments currently loaded")


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
