"""
Activity factories and the owner ids shared by the tests.
"""
import uuid
from datetime import datetime

import factory

from app.database.schemas import ActivityDBModel
from app.services.calculators.footprint_calculator import compute_footprint
from app.test.factory.base_factory import AsyncSQLAlchemyFactory, factory_session
from app.utils.constants import ActivityType

OWNER_A = "owner-a"
OWNER_B = "owner-b"


class ActivityFactory(AsyncSQLAlchemyFactory):
    """Factory for creating Activity test instances."""

    class Meta:
        model = ActivityDBModel
        sqlalchemy_session = factory_session
        sqlalchemy_session_persistence = "commit"

    id = factory.LazyFunction(uuid.uuid4)
    owner_id = OWNER_A
    activity_type = ActivityType.TRANSPORTATION
    category = "car"
    amount = 10.0
    unit = "km"
    carbon_footprint = factory.LazyAttribute(
        lambda obj: compute_footprint(obj.activity_type, obj.category, obj.amount)
    )
    date = factory.LazyFunction(datetime.utcnow)
    description = factory.Sequence(lambda n: f"Test activity {n}")
    created_at = factory.LazyFunction(datetime.utcnow)
    updated_at = factory.LazyFunction(datetime.utcnow)


class ElectricityActivityFactory(ActivityFactory):
    """Factory for electricity usage."""

    activity_type = ActivityType.ELECTRICITY
    category = "kwh"
    amount = 50.0
    unit = "kwh"


class MeatActivityFactory(ActivityFactory):
    """Factory for meat consumption."""

    activity_type = ActivityType.FOOD
    category = "meat"
    amount = 0.5
    unit = "kg"


class FlightActivityFactory(ActivityFactory):
    """Factory for air travel."""

    category = "flight"
    amount = 500.0
