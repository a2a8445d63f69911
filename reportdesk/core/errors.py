"""Error Taxonomy — result codes for expected failures, exceptions for faults.

Invariants:
    - Every expected failure has a fixed ErrorCode and a fixed ErrorMessage
    - ErrorCode values are stable integers shared with API clients
    - ReportDeskError subclasses are raised only for unexpected faults
      (database, broker); expected failures travel inside BaseResult
    - No internal details leaked in user-facing messages

Design Decisions:
    - IntEnum for codes: serializes to a plain int in the result envelope
    - Single exception hierarchy with ReportDeskError base: the global handler catches all
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Numeric codes carried by failed results."""
    REPORTS_NOT_FOUND = 0
    REPORT_NOT_FOUND = 1
    REPORT_ALREADY_EXISTS = 2
    INTERNAL_SERVER_ERROR = 10
    USER_NOT_FOUND = 11


class ErrorMessage(str, Enum):
    """Human-readable text paired with each ErrorCode."""
    REPORTS_NOT_FOUND = "Reports not found"
    REPORT_NOT_FOUND = "Report not found"
    REPORT_ALREADY_EXISTS = "Report with this name already exists"
    INTERNAL_SERVER_ERROR = "Internal server error"
    USER_NOT_FOUND = "User not found"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    MESSAGE_BROKER = "message_broker"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to a fault for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    report_id: int | None = None
    user_id: int | None = None


class ReportDeskError(Exception):
    """Base exception for all reportdesk faults."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "report_id": self.context.report_id,
                    "user_id": self.context.user_id,
                },
            }
        }


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ReportDeskError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class MessagePublishError(ReportDeskError):
    """Publishing to the message broker failed."""
    def __init__(
        self, exchange_name: str, routing_key: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Failed to publish message to '{exchange_name}' with routing key '{routing_key}'",
            "MESSAGE_PUBLISH_ERROR", ErrorCategory.MESSAGE_BROKER,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.exchange_name = exchange_name
        self.routing_key = routing_key
