"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    BagEaseError,
    NotFoundError,
    ValidationError,
    FieldValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestBagEaseError:
    def test_message(self):
        error = BagEaseError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code_is_class_name(self):
        assert BagEaseError("Test error").code == "BagEaseError"
        assert NotFoundError("missing").code == "NotFoundError"

    def test_custom_code_and_details(self):
        error = BagEaseError("Test error", code="CUSTOM_ERROR", details={"key": "value"})
        assert error.code == "CUSTOM_ERROR"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        error = BagEaseError("Test error", code="TEST_ERROR", details={"key": "value"})
        assert error.to_dict() == {
            "error": "TEST_ERROR",
            "message": "Test error",
            "details": {"key": "value"},
        }

    @pytest.mark.parametrize(
        "error_class",
        [NotFoundError, ValidationError, AuthenticationError, AuthorizationError],
    )
    def test_subclasses_inherit_base(self, error_class):
        error = error_class("boom")
        assert isinstance(error, BagEaseError)
        with pytest.raises(BagEaseError):
            raise error


class TestFieldValidationError:
    def test_keeps_field_order(self):
        error = FieldValidationError({"phone": "bad phone", "email": "bad email"})
        assert error.first_field == "phone"
        assert error.field_errors == {"phone": "bad phone", "email": "bad email"}
        assert error.details == {"fields": {"phone": "bad phone", "email": "bad email"}}

    def test_is_validation_error(self):
        assert isinstance(FieldValidationError({"x": "y"}), ValidationError)

    def test_default_message(self):
        assert FieldValidationError({"x": "y"}).message == "Please correct the highlighted fields."

    def test_empty_has_no_first_field(self):
        assert FieldValidationError({}).first_field is None

    def test_field_errors_are_copied(self):
        source = {"x": "y"}
        error = FieldValidationError(source)
        source["z"] = "w"
        assert "z" not in error.field_errors


class TestExternalServiceError:
    def test_service_in_details(self):
        error = ExternalServiceError("Supabase down", service="supabase", code="SUPABASE_ERROR")
        assert error.service == "supabase"
        assert error.code == "SUPABASE_ERROR"
        assert error.to_dict()["details"] == {"service": "supabase"}

    def test_keeps_extra_details(self):
        error = ExternalServiceError("x", service="supabase", details={"reason": "unexpected"})
        assert error.details == {"reason": "unexpected", "service": "supabase"}
