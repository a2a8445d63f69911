"""Report Service — list, fetch, create, update and delete reports; announce creations.

Invariants:
    - Every operation returns a result envelope; expected failures never raise
    - Read paths (get_reports, get_report_by_id) catch SQLAlchemyError, log it with
      traceback, and return INTERNAL_SERVER_ERROR
    - Write paths (create/update/delete) do NOT catch persistence errors: they
      propagate to the session manager, which maps them to DatabaseError
    - create_report: one insert, one commit, then one publish; nothing is
      published when validation fails
    - A publish failure after commit raises MessagePublishError; the report stays
      committed (no retry, no outbox)

Design Decisions:
    - Collaborators injected through the constructor; one service per request session
    - The two lookups in create_report are awaited sequentially
"""

import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from reportdesk.config import RabbitMqSettings
from reportdesk.core.errors import ErrorCode, ErrorMessage, MessagePublishError
from reportdesk.core.repository_protocols import MessageProducer, Repository
from reportdesk.core.validate_report import ReportValidator
from reportdesk.models.report import Report
from reportdesk.models.user import User
from reportdesk.schemas.report import (
    CreateReportDto, ReportDto, UpdateReportDto, to_report_dto,
)
from reportdesk.schemas.result import BaseResult, CollectionResult

logger = logging.getLogger(__name__)


class ReportService:
    """Orchestrates report persistence, validation, mapping and event publishing."""

    def __init__(
        self,
        report_repository: Repository[Report],
        user_repository: Repository[User],
        report_validator: ReportValidator,
        message_producer: MessageProducer,
        rabbitmq_settings: RabbitMqSettings,
        mapper: Callable[[Report], ReportDto] = to_report_dto,
    ):
        self.report_repository = report_repository
        self.user_repository = user_repository
        self.report_validator = report_validator
        self.message_producer = message_producer
        self.rabbitmq_settings = rabbitmq_settings
        self.mapper = mapper

    async def get_reports(self, user_id: int) -> CollectionResult[ReportDto]:
        """All reports owned by user_id; an empty set is REPORTS_NOT_FOUND."""
        try:
            query = self.report_repository.get_all().where(Report.user_id == user_id)
            reports = [
                self.mapper(r)
                for r in await self.report_repository.fetch_all(query)
            ]
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to load reports: {e}",
                exc_info=True, extra={"user_id": user_id},
            )
            return CollectionResult[ReportDto].failure(ErrorCode.INTERNAL_SERVER_ERROR)

        if not reports:
            logger.warning(
                ErrorMessage.REPORTS_NOT_FOUND.value,
                extra={"user_id": user_id, "count": len(reports)},
            )
            return CollectionResult[ReportDto].failure(ErrorCode.REPORTS_NOT_FOUND)

        return CollectionResult[ReportDto](data=reports, count=len(reports))

    async def get_report_by_id(self, report_id: int) -> BaseResult[ReportDto]:
        try:
            query = self.report_repository.get_all().where(Report.id == report_id)
            report = await self.report_repository.fetch_first(query)
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to load report {report_id}: {e}",
                exc_info=True, extra={"report_id": report_id},
            )
            return BaseResult[ReportDto].failure(ErrorCode.INTERNAL_SERVER_ERROR)

        if report is None:
            logger.warning(
                f"Report {report_id} not found", extra={"report_id": report_id},
            )
            return BaseResult[ReportDto].failure(ErrorCode.REPORT_NOT_FOUND)

        return BaseResult[ReportDto](data=self.mapper(report))

    async def create_report(self, dto: CreateReportDto) -> BaseResult[ReportDto]:
        """Persist a new report for an existing user, then publish it."""
        user = await self.user_repository.fetch_first(
            self.user_repository.get_all().where(User.id == dto.user_id),
        )
        report = await self.report_repository.fetch_first(
            self.report_repository.get_all().where(Report.name == dto.name),
        )
        result = self.report_validator.create_validator(report, user)
        if not result.is_success:
            return BaseResult[ReportDto](
                error_message=result.error_message, error_code=result.error_code,
            )

        report = Report(
            name=dto.name, description=dto.description, user_id=user.id,
        )
        await self.report_repository.create(report)
        await self.report_repository.save_changes()
        logger.info(
            f"Report '{report.name}' created",
            extra={"report_id": report.id, "user_id": user.id},
        )

        try:
            await self.message_producer.send_message(
                report,
                self.rabbitmq_settings.routing_key,
                self.rabbitmq_settings.exchange_name,
            )
        except MessagePublishError as e:
            e.context.report_id = report.id
            e.context.user_id = user.id
            raise

        return BaseResult[ReportDto](data=self.mapper(report))

    async def delete_report(self, report_id: int) -> BaseResult[ReportDto]:
        """Remove a report; the returned data holds its pre-deletion values."""
        report = await self.report_repository.fetch_first(
            self.report_repository.get_all().where(Report.id == report_id),
        )
        result = self.report_validator.validate_on_null(report)
        if not result.is_success:
            return BaseResult[ReportDto](
                error_message=result.error_message, error_code=result.error_code,
            )

        deleted = self.mapper(report)
        await self.report_repository.remove(report)
        await self.report_repository.save_changes()
        logger.info(
            f"Report {report_id} deleted", extra={"report_id": report_id},
        )
        return BaseResult[ReportDto](data=deleted)

    async def update_report(self, dto: UpdateReportDto) -> BaseResult[ReportDto]:
        report = await self.report_repository.fetch_first(
            self.report_repository.get_all().where(Report.id == dto.id),
        )
        result = self.report_validator.validate_on_null(report)
        if not result.is_success:
            return BaseResult[ReportDto](
                error_message=result.error_message, error_code=result.error_code,
            )

        report.name = dto.name
        report.description = dto.description

        updated = await self.report_repository.update(report)
        await self.report_repository.save_changes()
        return BaseResult[ReportDto](data=self.mapper(updated))
