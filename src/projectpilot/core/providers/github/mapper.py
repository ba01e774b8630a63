"""Mapping functions between GitHub API payloads and entity snapshots."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from projectpilot.core.contracts.entities import Issue, Milestone, Project


def format_due_on(value: datetime) -> str:
    """Render a due date the way the milestones API expects (``YYYY-MM-DDTHH:MM:SSZ``)."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def project_from_node(node: dict[str, Any]) -> Project:
    return Project(
        id=node["id"],
        number=node.get("number"),
        title=node.get("title") or "",
        description=node.get("shortDescription"),
        url=node.get("url"),
    )


def milestone_from_payload(payload: dict[str, Any]) -> Milestone:
    return Milestone(
        id=payload["id"],
        number=payload["number"],
        title=payload.get("title") or "",
        description=payload.get("description"),
        due_on=payload.get("due_on"),
        state=payload.get("state") or "open",
        url=payload.get("html_url"),
    )


def issue_from_payload(payload: dict[str, Any]) -> Issue:
    milestone = payload.get("milestone") or {}
    return Issue(
        id=payload["id"],
        node_id=payload["node_id"],
        number=payload["number"],
        title=payload.get("title") or "",
        body=payload.get("body"),
        state=payload.get("state") or "open",
        milestone_number=milestone.get("number"),
        url=payload.get("html_url"),
        labels=[label["name"] if isinstance(label, dict) else str(label) for label in payload.get("labels") or []],
        assignees=[user["login"] for user in payload.get("assignees") or [] if isinstance(user, dict)],
    )
