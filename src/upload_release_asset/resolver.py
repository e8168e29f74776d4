"""Resolve which repository the release API calls address."""

from __future__ import annotations

from .exceptions import ConfigurationError
from .models.releases import RepoRef


def resolve_repo(repo_name: str | None, ambient: RepoRef) -> RepoRef:
    """Return the repository targeted by ``repo_name``, or ``ambient`` when it is empty.

    ``repo_name`` is split on its first ``/``; anything after that, further
    slashes included, is taken as the repository name. A value without any
    slash has no owner part.
    """
    if not repo_name:
        return ambient

    owner, sep, repo = repo_name.partition("/")
    if not sep:
        owner = ""
    if not owner:
        msg = f"Could not extract 'owner' from 'repo_name': {repo_name}."
        raise ConfigurationError(msg)
    if not repo:
        msg = f"Could not extract 'repo' from 'repo_name': {repo_name}."
        raise ConfigurationError(msg)
    return RepoRef(owner=owner, repo=repo)
