"""
Database seeding service for loading demo activities from a CSV file.

Usage:
    from app.services.seed_database import DatabaseSeeder

    async with DatabaseSeeder(owner_id="demo-user") as seeder:
        await seeder.seed_all(clear_existing=True)
"""

import csv
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.session_manager.db_session import Database
from app.pydantic_models.activity import ActivityCreate
from app.services.activity_store import ActivityStore

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "test" / "test_data" / "activities.csv"


class DatabaseSeeder:
    """Service for seeding an owner's activities from a CSV file."""

    def __init__(
        self,
        owner_id: str,
        session: AsyncSession | None = None,
        data_file: str | Path = DEFAULT_DATA_FILE,
        now: datetime | None = None,
    ):
        """
        Initialize the database seeder.

        Args:
            owner_id: Owner the activities are created for
            session: Optional async database session. If not provided, will create one.
            data_file: CSV with columns activity_type, category, amount, unit, days_ago, description
            now: Reference time that ``days_ago`` counts back from
        """
        self.owner_id = owner_id
        self._session = session
        self._external_session = session is not None
        self.data_file = Path(data_file)
        self.now = now or datetime.utcnow()

        if not self.data_file.exists():
            raise ValueError(f"Data file not found: {self.data_file}")

    async def __aenter__(self):
        """Context manager entry."""
        if not self._external_session:
            db = Database()
            self._session = await db.__aenter__()
            self._db_context = db
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if not self._external_session and hasattr(self, "_db_context"):
            await self._db_context.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def session(self) -> AsyncSession:
        """Get the database session."""
        if not self._session:
            raise RuntimeError("Session not initialized. Use as context manager.")
        return self._session

    def _read_rows(self) -> list[dict[str, str]]:
        with self.data_file.open(newline="", encoding="utf-8") as f:
            return list(csv.DictReader(f))

    def _row_to_activity(self, row: dict[str, str]) -> ActivityCreate:
        days_ago = float(row.get("days_ago") or 0)
        return ActivityCreate(
            activity_type=row["activity_type"].strip(),
            category=row["category"].strip(),
            amount=row["amount"],
            unit=row["unit"].strip(),
            description=(row.get("description") or "").strip() or None,
            date=self.now - timedelta(days=days_ago),
        )

    async def seed_all(self, clear_existing: bool = False) -> dict[str, Any]:
        """
        Load every CSV row as an activity of the owner.

        Args:
            clear_existing: Delete the owner's existing activities first

        Returns:
            Seeding statistics: counts, footprint per type, total and errors
        """
        store = ActivityStore(self.session)
        stats: dict[str, Any] = {
            "deleted": 0,
            "created": 0,
            "by_type": {},
            "total_footprint": 0.0,
            "errors": [],
        }

        if clear_existing:
            stats["deleted"] = await store.clear(self.owner_id)

        for line_number, row in enumerate(self._read_rows(), start=2):
            try:
                activity_in = self._row_to_activity(row)
            except (KeyError, ValueError, ValidationError) as e:
                stats["errors"].append(f"Line {line_number}: {e}")
                logger.warning(f"Skipping line {line_number} of {self.data_file.name}: {e}")
                continue

            activity = await store.create(self.owner_id, activity_in)
            stats["created"] += 1
            stats["by_type"][activity.activity_type] = (
                stats["by_type"].get(activity.activity_type, 0.0) + activity.carbon_footprint
            )
            stats["total_footprint"] += activity.carbon_footprint

        logger.info(
            f"Seeded {stats['created']} activities for owner {self.owner_id} "
            f"({len(stats['errors'])} errors)"
        )
        return stats
