"""Request-scoped wiring of the report service.

Invariants:
    - One ReportService per request, bound to that request's AsyncSession
    - Both repositories share the session, so they share its transaction
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from reportdesk.config import get_settings
from reportdesk.core.validate_report import ReportValidator
from reportdesk.infrastructure.database import get_db
from reportdesk.infrastructure.message_producer import get_message_producer
from reportdesk.infrastructure.repository import SqlAlchemyRepository
from reportdesk.models.report import Report
from reportdesk.models.user import User
from reportdesk.services.report_service import ReportService


def get_report_service(
    db: AsyncSession = Depends(get_db),
    producer=Depends(get_message_producer),
) -> ReportService:
    return ReportService(
        report_repository=SqlAlchemyRepository(db, Report),
        user_repository=SqlAlchemyRepository(db, User),
        report_validator=ReportValidator(),
        message_producer=producer,
        rabbitmq_settings=get_settings().rabbitmq,
    )
