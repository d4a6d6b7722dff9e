"""
Tests for translink exceptions and settings defaults
"""

from fastapi import status

from translink.exceptions import (
    InvalidOperationError,
    InvalidStatusTransitionError,
    LanguageValidationError,
    StorageError,
    TranslinkException,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_all_derive_from_base(self):
        for exc_class in (
            InvalidOperationError,
            InvalidStatusTransitionError,
            LanguageValidationError,
            StorageError,
            ValidationError,
        ):
            assert issubclass(exc_class, TranslinkException)

    def test_language_validation_error(self):
        exc = LanguageValidationError(["xx", "yy"], field="target_languages")

        assert exc.status_code == status.HTTP_400_BAD_REQUEST
        assert "'xx'" in exc.message and "'yy'" in exc.message
        assert exc.details == {"invalid_codes": ["xx", "yy"], "field": "target_languages"}
        assert isinstance(exc, ValidationError)

    def test_invalid_status_transition_message(self):
        exc = InvalidStatusTransitionError("outdated", "completed")
        assert exc.message == "Cannot transition Translation from 'outdated' to 'completed'"
        assert exc.details["target_status"] == "completed"

    def test_storage_error_defaults(self):
        exc = StorageError()
        assert exc.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert exc.details == {}
        assert str(exc) == "A storage error occurred"


class TestSettings:
    def test_canonical_source_default(self):
        from translink.config import Settings

        assert Settings.model_fields["default_source_language"].default == "fr"

    def test_target_default(self, test_settings):
        assert test_settings.default_target_languages == ["en"]

    def test_env_prefix(self, monkeypatch):
        from translink.config import Settings

        monkeypatch.setenv("TRANSLINK_DEFAULT_SOURCE_LANGUAGE", "de")
        assert Settings(_env_file=None).default_source_language == "de"
