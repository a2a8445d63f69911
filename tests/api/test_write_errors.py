"""Write-path persistence failures through the real session manager.

Invariants:
    - A write that violates a constraint → 503 DATABASE_ERROR, nothing committed
    - Broker failure after commit → 503 with the new report's ids in the context
"""

from sqlalchemy import select

from reportdesk.core.errors import MessagePublishError
from reportdesk.models.report import Report


async def test_rename_to_existing_name_is_503(
    managed_client, seed_user, make_report, test_session_factory,
):
    await make_report(seed_user, "Taken")
    other = await make_report(seed_user, "Free")
    other_id = other.id

    res = await managed_client.put(
        "/api/v1/reports",
        json={"id": other_id, "name": "Taken", "description": "clash"},
    )

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["category"] == "database"

    async with test_session_factory() as db:
        stored = (
            await db.execute(select(Report).where(Report.id == other_id))
        ).scalar_one()
    assert stored.name == "Free"


async def test_rename_through_manager_commits(managed_client, seed_user, make_report):
    report = await make_report(seed_user, "Before")

    res = await managed_client.put(
        "/api/v1/reports",
        json={"id": report.id, "name": "After", "description": "ok"},
    )

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "After"


async def test_publish_failure_context_names_report_and_user(
    managed_client, seed_user, fake_producer,
):
    fake_producer.error = MessagePublishError("reports.exchange", "reports.created")
    user_id = seed_user.id

    res = await managed_client.post(
        "/api/v1/reports",
        json={"user_id": user_id, "name": "Unsent", "description": "x"},
    )

    assert res.status_code == 503
    context = res.json()["error"]["context"]
    assert context["user_id"] == user_id
    assert context["report_id"] is not None

    listed = await managed_client.get(f"/api/v1/reports/users/{user_id}")
    assert listed.json()["data"][0]["id"] == context["report_id"]
