"""SqlAlchemyRepository — staging, flushing and committing through one session."""

from sqlalchemy import select

from reportdesk.infrastructure.repository import SqlAlchemyRepository
from reportdesk.models.report import Report


async def test_create_flushes_identity_and_created_at(test_db, seed_user):
    repo = SqlAlchemyRepository(test_db, Report)

    report = await repo.create(
        Report(name="New", description="d", user_id=seed_user.id),
    )

    assert report.id is not None
    assert report.created_at is not None


async def test_fetch_first_returns_none_when_no_match(test_db):
    repo = SqlAlchemyRepository(test_db, Report)
    assert await repo.fetch_first(repo.get_all().where(Report.id == 1)) is None


async def test_fetch_all_composes_filters(test_db, seed_user, make_report):
    await make_report(seed_user, "One")
    await make_report(seed_user, "Two")
    repo = SqlAlchemyRepository(test_db, Report)

    rows = await repo.fetch_all(repo.get_all().where(Report.name == "Two"))

    assert [r.name for r in rows] == ["Two"]


async def test_remove_takes_effect_after_save_changes(
    test_db, test_session_factory, seed_user, make_report,
):
    report = await make_report(seed_user, "Temp")
    repo = SqlAlchemyRepository(test_db, Report)

    await repo.remove(report)
    await repo.save_changes()

    async with test_session_factory() as other:
        result = await other.execute(select(Report).where(Report.name == "Temp"))
        assert result.scalar_one_or_none() is None
