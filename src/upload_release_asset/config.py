"""Action configuration, loaded from the workflow environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigurationError
from .models.releases import RepoRef

DEFAULT_API_URL = "https://api.github.com"

_TRUE_VALUES = ("true", "1", "yes", "on")


def parse_bool(value: str | None) -> bool:
    """Interpret an action input string as a boolean; anything unrecognised is false."""
    return (value or "").strip().lower() in _TRUE_VALUES


def get_input(name: str) -> str:
    """Return the action input ``name`` as exported by the runner (``INPUT_<NAME>``)."""
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return os.getenv(key, "").strip()


@dataclass
class ActionConfig:
    """Configuration for one upload run, loaded from action inputs and ``GITHUB_*`` variables."""

    repo_token: str = ""
    file: str = ""
    asset_name: str = ""
    release_id: str = ""
    file_glob: bool = False
    overwrite: bool = False
    repo_name: str = ""
    github_repository: str = ""
    api_url: str = DEFAULT_API_URL
    output_file: str = ""
    timeout: int = 30
    debug: bool = False

    @classmethod
    def from_env(cls) -> ActionConfig:
        api_url = (os.getenv("GITHUB_API_URL") or DEFAULT_API_URL).rstrip("/")
        raw_timeout = get_input("timeout") or "30"
        try:
            timeout = int(raw_timeout)
        except ValueError as e:
            msg = f"timeout must be an integer number of seconds, got {raw_timeout!r}"
            raise ConfigurationError(msg) from e

        return cls(
            repo_token=get_input("repo_token"),
            file=get_input("file"),
            asset_name=get_input("asset_name"),
            release_id=get_input("release_id"),
            file_glob=parse_bool(get_input("file_glob")),
            overwrite=parse_bool(get_input("overwrite")),
            repo_name=get_input("repo_name"),
            github_repository=os.getenv("GITHUB_REPOSITORY", ""),
            api_url=api_url,
            output_file=os.getenv("GITHUB_OUTPUT", ""),
            timeout=timeout,
            debug=os.getenv("RUNNER_DEBUG", "") == "1",
        )

    @property
    def repository(self) -> RepoRef:
        """The repository the workflow runs in."""
        return self.parse_repository()

    def parse_repository(self) -> RepoRef:
        """Parse ``GITHUB_REPOSITORY``, raising :class:`ConfigurationError` when unusable."""
        try:
            return RepoRef.from_slug(self.github_repository)
        except ValueError as e:
            msg = (
                "GITHUB_REPOSITORY must be set to 'owner/repo', "
                f"got {self.github_repository!r}"
            )
            raise ConfigurationError(msg) from e

    @property
    def output_path(self) -> Path | None:
        return Path(self.output_file) if self.output_file else None

    def validate(self) -> None:
        missing = [
            name
            for name, value in (
                ("repo_token", self.repo_token),
                ("file", self.file),
                ("asset_name", self.asset_name),
                ("release_id", self.release_id),
            )
            if not value
        ]
        if missing:
            msg = f"Input required and not supplied: {', '.join(missing)}"
            raise ConfigurationError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be a positive number of seconds, got {self.timeout}"
            raise ConfigurationError(msg)
        self.parse_repository()
