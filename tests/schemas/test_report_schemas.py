"""Report schemas — payload validation and entity projection."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from reportdesk.schemas.report import (
    CreateReportDto, UpdateReportDto, format_long_date, to_report_dto,
)


def test_format_long_date():
    assert format_long_date(datetime(2009, 6, 15)) == "Monday, 15 June 2009"


def test_to_report_dto_maps_fields():
    entity = SimpleNamespace(
        id=3, name="Ops", description="Uptime", user_id=9,
        created_at=datetime(2024, 2, 29, 8, 30, tzinfo=timezone.utc),
    )
    dto = to_report_dto(entity)
    assert dto.id == 3
    assert dto.name == "Ops"
    assert dto.description == "Uptime"
    assert dto.created_at == "Thursday, 29 February 2024"


def test_create_payload_strips_whitespace():
    dto = CreateReportDto(user_id=1, name="  Weekly  ", description=" notes ")
    assert dto.name == "Weekly"
    assert dto.description == "notes"


@pytest.mark.parametrize("name", ["", "   ", "x" * 201])
def test_create_payload_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        CreateReportDto(user_id=1, name=name, description="ok")


def test_create_payload_requires_positive_user_id():
    with pytest.raises(ValidationError):
        CreateReportDto(user_id=0, name="ok", description="ok")


def test_update_payload_rejects_long_description():
    with pytest.raises(ValidationError):
        UpdateReportDto(id=1, name="ok", description="d" * 1001)
