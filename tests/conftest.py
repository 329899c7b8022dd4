"""Shared fixtures: a log store on a controllable clock and sample workout input."""

from datetime import date

import pytest

from fitlog.schemas.workout import GymDetails, OutdoorDetails, WorkoutFields
from fitlog.services.log_store import LogStore

TODAY = date(2026, 3, 2)


class FakeClock:
    """Callable clock; tests move `current` to simulate records from earlier days."""

    def __init__(self, current: date):
        self.current = current

    def __call__(self) -> date:
        return self.current


@pytest.fixture
def clock():
    return FakeClock(TODAY)


@pytest.fixture
def store(clock):
    return LogStore(clock=clock)


@pytest.fixture
def run_fields():
    return WorkoutFields(activity_name="Morning Run", category="Running", duration=30, calories=200)


@pytest.fixture
def lift_fields():
    return WorkoutFields(activity_name="Leg Day", category="Strength", duration=45, calories=300)


@pytest.fixture
def sunny():
    return OutdoorDetails(weather_condition="Sunny")


@pytest.fixture
def barbell():
    return GymDetails(equipment_used="Barbell")


@pytest.fixture
def today():
    return TODAY
