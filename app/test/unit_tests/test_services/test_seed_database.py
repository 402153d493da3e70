"""
Service tests for the demo data seeder.
"""

from datetime import datetime

import pytest

from app.services.activity_store import ActivityStore
from app.services.seed_database import DatabaseSeeder
from app.test.factory.activity import OWNER_A, OWNER_B, ActivityFactory

NOW = datetime(2026, 3, 15, 12, 0, 0)


@pytest.mark.asyncio
async def test_seed_bundled_data(test_db_session):
    seeder = DatabaseSeeder(owner_id=OWNER_A, session=test_db_session, now=NOW)

    stats = await seeder.seed_all()

    assert stats["created"] == 12
    assert stats["errors"] == []
    assert set(stats["by_type"]) == {"transportation", "food", "electricity", "waste", "water"}

    activities = await ActivityStore(test_db_session).list(OWNER_A)
    assert len(activities) == 12
    assert activities[0].date == NOW
    assert stats["total_footprint"] == pytest.approx(
        sum(activity.carbon_footprint for activity in activities)
    )


@pytest.mark.asyncio
async def test_seed_skips_invalid_rows(test_db_session, tmp_path):
    data_file = tmp_path / "activities.csv"
    data_file.write_text(
        "activity_type,category,amount,unit,days_ago,description\n"
        "transportation,car,10,km,1,Commute\n"
        "transportation,car,-4,km,1,Negative\n"
        "spaceflight,rocket,1,km,1,Unknown type\n"
        "food,meat,0.3,kg,,\n",
        encoding="utf-8",
    )

    seeder = DatabaseSeeder(
        owner_id=OWNER_A, session=test_db_session, data_file=data_file, now=NOW
    )
    stats = await seeder.seed_all()

    assert stats["created"] == 2
    assert len(stats["errors"]) == 2
    assert stats["errors"][0].startswith("Line 3:")
    assert stats["total_footprint"] == pytest.approx(2.1 + 1.983)


@pytest.mark.asyncio
async def test_seed_clear_existing_only_touches_owner(test_db_session, tmp_path):
    await ActivityFactory(owner_id=OWNER_A)
    await ActivityFactory(owner_id=OWNER_A)
    await ActivityFactory(owner_id=OWNER_B)

    data_file = tmp_path / "activities.csv"
    data_file.write_text(
        "activity_type,category,amount,unit,days_ago,description\n"
        "water,liter,100,liter,0,Showers\n",
        encoding="utf-8",
    )

    seeder = DatabaseSeeder(
        owner_id=OWNER_A, session=test_db_session, data_file=data_file, now=NOW
    )
    stats = await seeder.seed_all(clear_existing=True)

    assert stats["deleted"] == 2
    assert stats["created"] == 1

    store = ActivityStore(test_db_session)
    assert [activity.activity_type for activity in await store.list(OWNER_A)] == ["water"]
    assert len(await store.list(OWNER_B)) == 1


def test_seed_missing_data_file(tmp_path):
    with pytest.raises(ValueError):
        DatabaseSeeder(owner_id=OWNER_A, data_file=tmp_path / "missing.csv")
