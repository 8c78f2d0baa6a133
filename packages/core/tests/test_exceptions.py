"""Tests for the exception hierarchy."""

import pytest

from freshstart_core.exceptions import (
    ConfigurationError,
    DocumentRenderError,
    FreshStartError,
    NotFoundError,
    OfficialFormError,
    OwnershipError,
    PackagingError,
    ValidationError,
)


class TestFreshStartError:
    """Test suite for the base exception."""

    def test_defaults(self):
        error = FreshStartError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.details == {}
        assert error.recoverable is False

    def test_repr(self):
        error = FreshStartError("boom", details={"code": 500}, recoverable=True)
        assert repr(error) == "FreshStartError(message='boom', details={'code': 500}, recoverable=True)"

    @pytest.mark.parametrize(
        "error_class",
        [
            ValidationError,
            NotFoundError,
            OwnershipError,
            DocumentRenderError,
            OfficialFormError,
            PackagingError,
            ConfigurationError,
        ],
    )
    def test_hierarchy(self, error_class):
        """Every application error can be caught as FreshStartError."""
        with pytest.raises(FreshStartError):
            raise error_class("failed")


class TestSubclasses:
    """Test suite for subclass details and recoverability."""

    def test_validation_error_details(self):
        error = ValidationError(
            "Questionnaire must be completed before generating documents",
            field="status",
            value="in_progress",
            constraint="status == completed",
        )
        assert error.details == {
            "field": "status",
            "value": "in_progress",
            "constraint": "status == completed",
        }
        assert error.recoverable is False

    def test_ownership_default_message(self):
        error = OwnershipError(resource="document", identifier="doc-1", user_id="user-2")
        assert str(error) == "Forbidden"
        assert error.details["user_id"] == "user-2"

    def test_render_and_form_errors_are_recoverable(self):
        """Errors with a fallback path default to recoverable."""
        assert DocumentRenderError("x", document_type="petition").recoverable is True
        assert OfficialFormError("x", form_type="parenting-plan").details == {"form_type": "parenting-plan"}
        assert OfficialFormError("x").recoverable is True

    def test_packaging_error_is_fatal(self):
        error = PackagingError("No documents found.", user_id="user-1")
        assert error.recoverable is False
        assert error.details == {"user_id": "user-1"}

    def test_configuration_error(self):
        error = ConfigurationError("bad", config_key="FRESHSTART_ENV", expected="production", actual="prod")
        assert error.details == {"config_key": "FRESHSTART_ENV", "expected": "production", "actual": "prod"}
