"""Pydantic schemas for workout records: shared fields plus an outdoor/gym variant payload."""

from datetime import date as Date
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class WorkoutKind(str, Enum):
    OUTDOOR = "outdoor"
    GYM = "gym"


class WorkoutFields(BaseModel):
    """Descriptive fields entered for every workout (add and full update)."""

    activity_name: str
    category: str  # advisory, see settings.fitness_categories
    duration: int  # minutes
    calories: int  # kcal


class OutdoorDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["outdoor"] = "outdoor"
    weather_condition: str


class GymDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["gym"] = "gym"
    equipment_used: str


WorkoutDetails = Annotated[Union[OutdoorDetails, GymDetails], Field(discriminator="kind")]


class WorkoutRecord(BaseModel):
    """One logged activity. Exactly one variant payload; id and kind never change."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    activity_name: str
    category: str
    duration: int
    calories: int
    date: Date
    details: WorkoutDetails

    @property
    def kind(self) -> WorkoutKind:
        return WorkoutKind(self.details.kind)

    @classmethod
    def build(cls, record_id: int, fields: WorkoutFields, details: OutdoorDetails | GymDetails, on: Date) -> "WorkoutRecord":
        return cls(id=record_id, date=on, details=details, **fields.model_dump())


def details_for(kind: WorkoutKind, detail: str) -> OutdoorDetails | GymDetails:
    """Build the variant payload of the given kind from its single free-text field."""
    if kind == WorkoutKind.OUTDOOR:
        return OutdoorDetails(weather_condition=detail)
    return GymDetails(equipment_used=detail)
