"""Report Routes — HTTP surface over ReportService.

Invariants:
    - Every endpoint returns the result envelope unchanged
    - 200 when the result is successful, 400 otherwise
    - Request bodies are validated by Pydantic before reaching the service
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from reportdesk.api.dependencies import get_report_service
from reportdesk.schemas.report import CreateReportDto, ReportDto, UpdateReportDto
from reportdesk.schemas.result import BaseResult, CollectionResult
from reportdesk.services.report_service import ReportService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


def _respond(result: BaseResult, response: Response) -> BaseResult:
    if not result.is_success:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


@router.get("/users/{user_id}", response_model=CollectionResult[ReportDto])
async def get_user_reports(
    user_id: int,
    response: Response,
    service: ReportService = Depends(get_report_service),
):
    """List reports owned by a user."""
    return _respond(await service.get_reports(user_id), response)


@router.get("/{report_id}", response_model=BaseResult[ReportDto])
async def get_report(
    report_id: int,
    response: Response,
    service: ReportService = Depends(get_report_service),
):
    return _respond(await service.get_report_by_id(report_id), response)


@router.post("", response_model=BaseResult[ReportDto])
async def create_report(
    body: CreateReportDto,
    response: Response,
    service: ReportService = Depends(get_report_service),
):
    """Create a report and publish a creation event."""
    return _respond(await service.create_report(body), response)


@router.put("", response_model=BaseResult[ReportDto])
async def update_report(
    body: UpdateReportDto,
    response: Response,
    service: ReportService = Depends(get_report_service),
):
    return _respond(await service.update_report(body), response)


@router.delete("/{report_id}", response_model=BaseResult[ReportDto])
async def delete_report(
    report_id: int,
    response: Response,
    service: ReportService = Depends(get_report_service),
):
    return _respond(await service.delete_report(report_id), response)
