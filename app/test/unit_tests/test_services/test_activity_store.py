"""
Service tests for the owner-scoped activity store.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import ActivityNotFoundError
from app.pydantic_models.activity import ActivityCreate, ActivityUpdate
from app.services.activity_store import ActivityStore
from app.test.factory.activity import (
    OWNER_A,
    OWNER_B,
    ActivityFactory,
    MeatActivityFactory,
)


@pytest.mark.asyncio
async def test_create_computes_footprint(test_db_session):
    store = ActivityStore(test_db_session)

    activity = await store.create(
        OWNER_A,
        ActivityCreate(activity_type="transportation", category="car", amount=10, unit="km"),
    )

    assert activity.id is not None
    assert activity.owner_id == OWNER_A
    assert activity.carbon_footprint == pytest.approx(2.1)
    assert activity.date is not None
    assert activity.description is None


@pytest.mark.asyncio
async def test_create_unknown_category_records_zero(test_db_session, caplog):
    store = ActivityStore(test_db_session)

    with caplog.at_level("WARNING"):
        activity = await store.create(
            OWNER_A,
            ActivityCreate(activity_type="food", category="meats", amount=1, unit="kg"),
        )

    assert activity.carbon_footprint == 0.0
    assert "Closest known category is 'meat'" in caplog.text


@pytest.mark.asyncio
async def test_create_normalizes_aware_date(test_db_session):
    store = ActivityStore(test_db_session)
    aware = datetime(2026, 1, 10, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    activity = await store.create(
        OWNER_A,
        ActivityCreate(
            activity_type="water", category="liter", amount=100, unit="liter", date=aware
        ),
    )

    assert activity.date == datetime(2026, 1, 10, 12, 0)
    assert activity.carbon_footprint == pytest.approx(0.03)


@pytest.mark.asyncio
async def test_list_is_owner_scoped_and_newest_first(test_db_session):
    now = datetime.utcnow()
    oldest = await ActivityFactory(owner_id=OWNER_A, date=now - timedelta(days=3))
    newest = await ActivityFactory(owner_id=OWNER_A, date=now - timedelta(hours=1))
    middle = await MeatActivityFactory(owner_id=OWNER_A, date=now - timedelta(days=1))
    await ActivityFactory(owner_id=OWNER_B, date=now)

    store = ActivityStore(test_db_session)
    activities = await store.list(OWNER_A)

    assert [activity.id for activity in activities] == [newest.id, middle.id, oldest.id]
    assert [activity.id for activity in await store.list(OWNER_A, limit=2)] == [
        newest.id,
        middle.id,
    ]
    assert len(await store.list(OWNER_B)) == 1
    assert await store.list("nobody") == []


@pytest.mark.asyncio
async def test_get_rejects_other_owner(test_db_session):
    activity = await ActivityFactory(owner_id=OWNER_A)
    store = ActivityStore(test_db_session)

    assert (await store.get(OWNER_A, activity.id)).id == activity.id
    with pytest.raises(ActivityNotFoundError):
        await store.get(OWNER_B, activity.id)


@pytest.mark.asyncio
async def test_get_with_malformed_id_is_not_found(test_db_session):
    store = ActivityStore(test_db_session)

    with pytest.raises(ActivityNotFoundError):
        await store.get(OWNER_A, "not-a-uuid")


@pytest.mark.asyncio
async def test_update_recomputes_footprint_and_keeps_date(test_db_session):
    original_date = datetime(2026, 2, 1, 8, 30)
    activity = await ActivityFactory(owner_id=OWNER_A, date=original_date)
    store = ActivityStore(test_db_session)

    updated = await store.update(
        OWNER_A,
        str(activity.id),
        ActivityUpdate(
            activity_type="food",
            category="meat",
            amount=0.3,
            unit="kg",
            description="Burger",
        ),
    )

    assert updated.id == activity.id
    assert updated.activity_type == "food"
    assert updated.carbon_footprint == pytest.approx(1.983)
    assert updated.description == "Burger"
    assert updated.date == original_date


@pytest.mark.asyncio
async def test_update_by_other_owner_changes_nothing(test_db_session):
    activity = await ActivityFactory(owner_id=OWNER_A)
    store = ActivityStore(test_db_session)

    with pytest.raises(ActivityNotFoundError):
        await store.update(
            OWNER_B,
            activity.id,
            ActivityUpdate(activity_type="transportation", category="car", amount=99, unit="km"),
        )

    unchanged = await store.get(OWNER_A, activity.id)
    assert unchanged.amount == activity.amount
    assert unchanged.carbon_footprint == pytest.approx(activity.carbon_footprint)


@pytest.mark.asyncio
async def test_delete(test_db_session):
    activity = await ActivityFactory(owner_id=OWNER_A)
    store = ActivityStore(test_db_session)

    with pytest.raises(ActivityNotFoundError):
        await store.delete(OWNER_B, activity.id)

    await store.delete(OWNER_A, activity.id)

    with pytest.raises(ActivityNotFoundError):
        await store.get(OWNER_A, activity.id)
    with pytest.raises(ActivityNotFoundError):
        await store.delete(OWNER_A, uuid.uuid4())


@pytest.mark.asyncio
async def test_clear_only_removes_owner_activities(test_db_session):
    await ActivityFactory(owner_id=OWNER_A)
    await MeatActivityFactory(owner_id=OWNER_A)
    kept = await ActivityFactory(owner_id=OWNER_B)
    store = ActivityStore(test_db_session)

    assert await store.clear(OWNER_A) == 2

    assert await store.list(OWNER_A) == []
    assert [activity.id for activity in await store.list(OWNER_B)] == [kept.id]
    assert await store.clear(OWNER_A) == 0
