"""Tests for the credentials document model."""

import pytest
from pydantic import ValidationError

from cli_auth.credentials import Credentials, FieldViolation


class TestCredentialsModel:
    """Test validation rules of the credentials document."""

    def test_empty_document(self):
        """Test every field is optional."""
        credentials = Credentials.model_validate({})

        assert credentials.token is None
        assert credentials.refresh_token is None
        assert credentials.expires_at is None
        assert credentials.skip_write is None
        assert credentials.to_document() == {}

    def test_full_document(self):
        """Test a document using every key."""
        document = {
            "// Note": "note",
            "// Docs": "docs",
            "token": "t",
            "refreshToken": "r",
            "expiresAt": 1700000000.5,
            "skipWrite": False,
        }

        credentials = Credentials.model_validate(document)

        assert credentials.to_document() == document

    def test_integer_expiry_kept_as_int(self):
        """Test integral expiry times are not coerced to float."""
        credentials = Credentials.model_validate({"expiresAt": 123})

        assert credentials.expires_at == 123
        assert isinstance(credentials.expires_at, int)

    @pytest.mark.parametrize(
        "document",
        [
            {"token": 1},
            {"refreshToken": ""},
            {"expiresAt": "123"},
            {"expiresAt": True},
            {"skipWrite": "true"},
            {"skipWrite": 1},
            {"// Note": ["a"]},
            {"refresh_token": "r"},
            {"unexpected": "value"},
            {"token": None},
            {"refreshToken": None},
            {"expiresAt": None},
            {"skipWrite": None},
            {"// Docs": None},
        ],
    )
    def test_rejected_documents(self, document):
        """Test strict types, constraints and unknown keys are enforced."""
        with pytest.raises(ValidationError):
            Credentials.model_validate(document)


class TestCredentialsExpiry:
    """Test the optimistic expiry check."""

    def test_no_expiry_never_expired(self):
        """Test credentials without expiresAt are treated as valid."""
        assert Credentials.model_validate({"token": "t"}).is_expired(now=10**12) is False

    def test_future_expiry(self):
        """Test a future expiry time is still valid."""
        assert Credentials.model_validate({"expiresAt": 200}).is_expired(now=100) is False

    def test_past_expiry(self):
        """Test a past expiry time is expired."""
        assert Credentials.model_validate({"expiresAt": 100}).is_expired(now=200) is True

    def test_expiry_boundary(self):
        """Test a token expiring right now counts as expired."""
        assert Credentials.model_validate({"expiresAt": 100}).is_expired(now=100) is True

    def test_defaults_to_current_time(self):
        """Test the current clock is used when no time is given."""
        assert Credentials.model_validate({"expiresAt": 0}).is_expired() is True


class TestFieldViolation:
    """Test conversion of pydantic errors into field violations."""

    def test_from_pydantic_field_error(self):
        """Test the offending field, message and input are kept."""
        with pytest.raises(ValidationError) as exc_info:
            Credentials.model_validate({"refreshToken": ""})

        violation = FieldViolation.from_pydantic(exc_info.value.errors()[0])

        assert violation.field == "refreshToken"
        assert "at least 1 character" in violation.message
        assert violation.value == ""

    def test_from_pydantic_root_error(self):
        """Test document-level errors are attributed to the root."""
        violation = FieldViolation.from_pydantic({"loc": (), "msg": "bad", "input": []})

        assert violation.field == "<root>"

    def test_from_pydantic_keeps_top_level_key(self):
        """Test union branch names are stripped from the location."""
        violation = FieldViolation.from_pydantic({"loc": ("expiresAt", "int"), "msg": "bad", "input": "1"})

        assert violation.field == "expiresAt"

    def test_union_errors_collapse_to_one_field(self):
        """Test a bad number yields a single violation for its key."""
        with pytest.raises(ValidationError) as exc_info:
            Credentials.model_validate({"expiresAt": "123"})

        violations = FieldViolation.from_validation_error(exc_info.value)

        assert [v.field for v in violations] == ["expiresAt"]
        assert violations[0].value == "123"
        assert "integer" in violations[0].message
        assert "number" in violations[0].message

    def test_null_attributed_to_field(self):
        """Test an explicit null is reported against its own key."""
        with pytest.raises(ValidationError) as exc_info:
            Credentials.model_validate({"token": "t", "refreshToken": None})

        violations = FieldViolation.from_validation_error(exc_info.value)

        assert [v.field for v in violations] == ["refreshToken"]
        assert "null" in violations[0].message

    def test_str(self):
        """Test the rendered violation names field, reason and value."""
        violation = FieldViolation(field="token", message="Input should be a valid string", value=1)

        assert str(violation) == "token: Input should be a valid string (got 1)"
