"""Report Validation — pure checks over entity snapshots, returning result envelopes.

Invariants:
    - Validators are PURE: no IO, no mutation of the inspected entities
    - Success is BaseResult() with no error_code
    - create_validator checks the user before the duplicate name
"""

from reportdesk.core.errors import ErrorCode
from reportdesk.schemas.result import BaseResult


class ReportValidator:
    """Validation rules applied by the report service before mutations."""

    def validate_on_null(self, report) -> BaseResult:
        """Fail with REPORT_NOT_FOUND when the report is absent."""
        if report is None:
            return BaseResult.failure(ErrorCode.REPORT_NOT_FOUND)
        return BaseResult()

    def create_validator(self, report, user) -> BaseResult:
        """Fail when the owner is missing or a report with the same name exists."""
        if user is None:
            return BaseResult.failure(ErrorCode.USER_NOT_FOUND)
        if report is not None:
            return BaseResult.failure(ErrorCode.REPORT_ALREADY_EXISTS)
        return BaseResult()
