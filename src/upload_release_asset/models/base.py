"""Base model for GitHub API responses."""

from __future__ import annotations

from pydantic import BaseModel


class GitHubModel(BaseModel):
    """Base model with common behavior for all GitHub API models."""

    model_config = {"extra": "ignore", "populate_by_name": True}
