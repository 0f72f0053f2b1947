"""
Tests for the establishments domain layer.

Tests value objects, the aggregate root and error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

from gias_api.domain.common.aggregate_root import AggregateRoot
from gias_api.domain.establishments.details import EstablishmentDetails
from gias_api.domain.establishments.errors import (
    EstablishmentError,
    EstablishmentNotFoundError,
    InvalidArgumentError,
)
from gias_api.domain.establishments.establishment import Establishment
from gias_api.domain.establishments.identifier import EstablishmentIdentifier

NAME = "Hillside Primary School"
WEBSITE_URL = "http://www.hillside.sch.uk"
TELEPHONE_NUMBER = "07123456789"


def _details(
    name: str = NAME,
    website_url: str = WEBSITE_URL,
    telephone_number: str = TELEPHONE_NUMBER,
) -> EstablishmentDetails:
    return EstablishmentDetails.create(name, website_url, telephone_number)


# ══════════════════════════════════════════════════════════════════════
# EstablishmentIdentifier
# ══════════════════════════════════════════════════════════════════════


class TestEstablishmentIdentifier:
    """Tests for the EstablishmentIdentifier value object."""

    @pytest.mark.parametrize("urn", [100000, 123456, 999999])
    def test_six_digit_urn_accepted(self, urn: int) -> None:
        assert EstablishmentIdentifier.create(urn).urn == urn

    @pytest.mark.parametrize("urn", [0, 99999, 1000000, -123456, -12345])
    def test_urn_without_six_digits_rejected(self, urn: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            EstablishmentIdentifier.create(urn)
        assert exc_info.value.param_name == "urn"
        assert exc_info.value.message == "URN must be a valid 6-digit numeric value."

    @pytest.mark.parametrize("urn", ["123456", 123456.0, True, None])
    def test_non_integer_urn_rejected(self, urn) -> None:
        with pytest.raises(InvalidArgumentError):
            EstablishmentIdentifier(urn)

    def test_invalid_argument_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            EstablishmentIdentifier(12)

    def test_constructor_and_factory_agree(self) -> None:
        assert EstablishmentIdentifier(123456) == EstablishmentIdentifier.create(123456)

    def test_equality_by_urn(self) -> None:
        assert EstablishmentIdentifier(123456) == EstablishmentIdentifier(123456)
        assert EstablishmentIdentifier(123456) != EstablishmentIdentifier(654321)

    def test_hash_follows_equality(self) -> None:
        ids = {EstablishmentIdentifier(123456), EstablishmentIdentifier(123456)}
        assert len(ids) == 1

    def test_str_renders_digits(self) -> None:
        assert str(EstablishmentIdentifier(100234)) == "100234"

    def test_is_immutable(self) -> None:
        identifier = EstablishmentIdentifier(123456)
        with pytest.raises(dataclasses.FrozenInstanceError):
            identifier.urn = 654321


# ══════════════════════════════════════════════════════════════════════
# EstablishmentDetails
# ══════════════════════════════════════════════════════════════════════


class TestEstablishmentDetailsValidation:
    """Tests for EstablishmentDetails invariants and their ordering."""

    def test_valid_details_keep_values_as_supplied(self) -> None:
        details = EstablishmentDetails.create("  Hillside  ", WEBSITE_URL, TELEPHONE_NUMBER)
        assert details.name == "  Hillside  "
        assert details.website_url == WEBSITE_URL
        assert details.telephone_number == TELEPHONE_NUMBER

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_name_rejected(self, name) -> None:
        with pytest.raises(EstablishmentError, match="School name is required."):
            _details(name=name)

    @pytest.mark.parametrize("website_url", ["", "  ", None])
    def test_blank_website_url_rejected(self, website_url) -> None:
        with pytest.raises(EstablishmentError, match="Website URL is required."):
            _details(website_url=website_url)

    @pytest.mark.parametrize("telephone_number", ["", "   ", None])
    def test_blank_telephone_number_rejected(self, telephone_number) -> None:
        with pytest.raises(EstablishmentError, match="Telephone number is required."):
            _details(telephone_number=telephone_number)

    def test_name_checked_before_everything_else(self) -> None:
        with pytest.raises(EstablishmentError) as exc_info:
            EstablishmentDetails.create("", "", "")
        assert exc_info.value.message == "School name is required."

    def test_website_checked_before_telephone(self) -> None:
        with pytest.raises(EstablishmentError) as exc_info:
            EstablishmentDetails.create(NAME, " ", "not a number")
        assert exc_info.value.message == "Website URL is required."

    def test_blank_telephone_reported_before_format(self) -> None:
        with pytest.raises(EstablishmentError) as exc_info:
            EstablishmentDetails.create(NAME, WEBSITE_URL, "  ")
        assert exc_info.value.message == "Telephone number is required."

    def test_direct_construction_is_validated(self) -> None:
        with pytest.raises(EstablishmentError):
            EstablishmentDetails(name="", website_url=WEBSITE_URL, telephone_number=TELEPHONE_NUMBER)

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", 5, "School name is required."),
            ("website_url", b"http://www.hillside.sch.uk", "Website URL is required."),
            ("telephone_number", 7123456789, "Telephone number is required."),
        ],
    )
    def test_non_string_field_fails_its_required_rule(
        self, field: str, value, message: str
    ) -> None:
        with pytest.raises(EstablishmentError) as exc_info:
            _details(**{field: value})
        assert exc_info.value.message == message


class TestTelephoneNumberPattern:
    """Tests for UK telephone number acceptance."""

    @pytest.mark.parametrize(
        "telephone_number",
        ["07123456789", "02072831147", "+447123456789", "+44 7123456789"],
    )
    def test_valid_uk_numbers_accepted(self, telephone_number: str) -> None:
        assert _details(telephone_number=telephone_number).telephone_number == telephone_number

    @pytest.mark.parametrize("telephone_number", ["07123456789\n", "+44 7123456789\n"])
    def test_single_trailing_newline_accepted_and_kept(self, telephone_number: str) -> None:
        assert _details(telephone_number=telephone_number).telephone_number == telephone_number

    @pytest.mark.parametrize("telephone_number", ["07123456789\n\n", "\n07123456789"])
    def test_other_newlines_rejected(self, telephone_number: str) -> None:
        with pytest.raises(
            EstablishmentError, match="Telephone number must be a valid UK number."
        ):
            _details(telephone_number=telephone_number)

    @pytest.mark.parametrize(
        "telephone_number",
        [
            "0712345678",
            "123456789",
            "071234567890",
            "+442071234567",
            "+44  7123456789",
            "+4471234567890",
            "07123 456789",
        ],
    )
    def test_invalid_numbers_rejected(self, telephone_number: str) -> None:
        with pytest.raises(
            EstablishmentError, match="Telephone number must be a valid UK number."
        ):
            _details(telephone_number=telephone_number)


class TestEstablishmentDetailsEquality:
    """Tests for EstablishmentDetails value semantics."""

    def test_identical_fields_are_equal(self) -> None:
        assert _details() == _details()
        assert hash(_details()) == hash(_details())

    @pytest.mark.parametrize(
        "overrides",
        [
            {"name": "Other School"},
            {"website_url": "http://other.example"},
            {"telephone_number": "+447000000000"},
        ],
    )
    def test_any_differing_field_breaks_equality(self, overrides: dict) -> None:
        assert _details() != _details(**overrides)

    def test_repeated_creation_is_value_equal(self) -> None:
        first, second = _details(), _details()
        assert first is not second
        assert first == second

    def test_str_renders_telephone_number(self) -> None:
        assert str(_details()) == TELEPHONE_NUMBER

    def test_repr_renders_all_fields(self) -> None:
        text = repr(_details())
        assert NAME in text and WEBSITE_URL in text and TELEPHONE_NUMBER in text

    def test_is_immutable(self) -> None:
        details = _details()
        with pytest.raises(dataclasses.FrozenInstanceError):
            details.name = "Changed"


# ══════════════════════════════════════════════════════════════════════
# Establishment aggregate
# ══════════════════════════════════════════════════════════════════════


class TestEstablishmentAggregate:
    """Tests for the Establishment aggregate root."""

    def test_create_exposes_parts_unchanged(self) -> None:
        identifier = EstablishmentIdentifier(123456)
        details = _details()
        establishment = Establishment.create(identifier, details)
        assert establishment.identifier is identifier
        assert establishment.basic_details is details

    def test_missing_details_rejected(self) -> None:
        with pytest.raises(EstablishmentError) as exc_info:
            Establishment.create(EstablishmentIdentifier(123456), None)
        assert exc_info.value.message == (
            "An initialised 'EstablishmentDetails' object must be provided."
        )

    def test_constructor_also_rejects_missing_details(self) -> None:
        with pytest.raises(EstablishmentError):
            Establishment(identifier=EstablishmentIdentifier(123456), basic_details=None)

    def test_is_an_aggregate_root(self) -> None:
        establishment = Establishment.create(EstablishmentIdentifier(123456), _details())
        assert isinstance(establishment, AggregateRoot)

    def test_equality_by_identity(self) -> None:
        identifier = EstablishmentIdentifier(123456)
        first = Establishment.create(identifier, _details())
        renamed = Establishment.create(identifier, _details(name="Renamed School"))
        other = Establishment.create(EstablishmentIdentifier(654321), _details())
        assert first == renamed
        assert hash(first) == hash(renamed)
        assert first != other

    def test_not_equal_to_bare_identifier(self) -> None:
        identifier = EstablishmentIdentifier(123456)
        assert Establishment.create(identifier, _details()) != identifier

    def test_is_immutable(self) -> None:
        establishment = Establishment.create(EstablishmentIdentifier(123456), _details())
        with pytest.raises(dataclasses.FrozenInstanceError):
            establishment.basic_details = _details(name="Other")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_error_carries_urn(self) -> None:
        error = EstablishmentNotFoundError(123456)
        assert error.urn == 123456
        assert "123456" in error.message
        assert isinstance(error, EstablishmentError)

    def test_invalid_argument_names_parameter(self) -> None:
        error = InvalidArgumentError("Bad value.", "urn")
        assert str(error) == "Bad value. (Parameter 'urn')"
