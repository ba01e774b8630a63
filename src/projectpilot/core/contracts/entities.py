"""Snapshots of remote GitHub entities.

These are value objects built from API responses. They are never cached
across tool invocations.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model serialized with camelCase keys; accepts either casing on input."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class State(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


class Project(WireModel):
    id: str
    number: int | None = None
    title: str
    description: str | None = None
    url: str | None = None


class Milestone(WireModel):
    id: int
    number: int
    title: str
    description: str | None = None
    due_on: datetime | None = None
    state: State = State.OPEN
    url: str | None = None


class Issue(WireModel):
    id: int
    node_id: str
    number: int
    title: str
    body: str | None = None
    state: State = State.OPEN
    milestone_number: int | None = None
    url: str | None = None
    labels: list[str] = Field(default_factory=list)
    assignees: list[str] = Field(default_factory=list)
    project_item_id: str | None = None
