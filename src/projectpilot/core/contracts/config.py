"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ProjectPilotConfig(BaseModel):
    token: str = Field(min_length=1, repr=False)
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    api_url: str = "https://api.github.com"
    graphql_url: str | None = None
    max_concurrent: int = Field(default=4, ge=1, le=10)
    add_issues_to_project: bool = True
    timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_target(self) -> ProjectPilotConfig:
        if "/" in self.owner or "/" in self.repo:
            raise ValueError("owner and repo must not contain '/'")
        if not self.token.strip():
            raise ValueError("token must not be blank")
        return self

    @property
    def target(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def resolved_graphql_url(self) -> str:
        return self.graphql_url or f"{self.api_url.rstrip('/')}/graphql"
