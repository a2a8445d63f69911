"""Report Validation — tests for the pure create/null validators."""

from types import SimpleNamespace

from reportdesk.core.errors import ErrorCode, ErrorMessage
from reportdesk.core.validate_report import ReportValidator

validator = ReportValidator()
USER = SimpleNamespace(id=1)
REPORT = SimpleNamespace(id=7, name="Existing")


def test_validate_on_null_fails_for_missing_report():
    result = validator.validate_on_null(None)
    assert not result.is_success
    assert result.error_code == ErrorCode.REPORT_NOT_FOUND
    assert result.error_message == ErrorMessage.REPORT_NOT_FOUND.value


def test_validate_on_null_passes_for_existing_report():
    assert validator.validate_on_null(REPORT).is_success


def test_create_validator_fails_without_user():
    result = validator.create_validator(None, None)
    assert result.error_code == ErrorCode.USER_NOT_FOUND


def test_create_validator_user_checked_before_duplicate():
    result = validator.create_validator(REPORT, None)
    assert result.error_code == ErrorCode.USER_NOT_FOUND


def test_create_validator_fails_on_duplicate_name():
    result = validator.create_validator(REPORT, USER)
    assert result.error_code == ErrorCode.REPORT_ALREADY_EXISTS
    assert result.error_message == ErrorMessage.REPORT_ALREADY_EXISTS.value


def test_create_validator_passes_for_new_report_and_existing_user():
    result = validator.create_validator(None, USER)
    assert result.is_success
    assert result.error_message is None
