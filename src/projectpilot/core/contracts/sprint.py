"""Sprint contracts.

A sprint is not a native GitHub resource; it is a planning record composed
over existing issues of the target repository.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import Field, PositiveInt, field_validator, model_validator

from projectpilot.core.contracts.entities import WireModel


class SprintStatus(StrEnum):
    PLANNED = "planned"
    ACTIVE = "active"
    COMPLETED = "completed"

    def can_transition_to(self, other: SprintStatus) -> bool:
        order = list(SprintStatus)
        return order.index(other) == order.index(self) + 1


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SprintSpec(WireModel):
    id: str | None = None
    title: str = Field(min_length=1)
    start_date: datetime
    end_date: datetime
    goals: list[str] = Field(default_factory=list)
    issues: list[PositiveInt] = Field(default_factory=list)
    project_id: str | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class Sprint(WireModel):
    id: str
    title: str
    start_date: datetime
    end_date: datetime
    status: SprintStatus = SprintStatus.PLANNED
    goals: list[str] = Field(default_factory=list)
    issues: list[int] = Field(default_factory=list)
    project_id: str | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @model_validator(mode="after")
    def validate_window(self) -> Sprint:
        if self.start_date >= self.end_date:
            raise ValueError("start_date must be before end_date")
        return self
