"""Publish a single file as a release asset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .client import GitHubClient
from .models.releases import RepoRef, UploadRequest

logger = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    SKIPPED = "skipped"
    CONFLICT = "conflict"
    UPLOADED = "uploaded"


@dataclass(frozen=True)
class PublishOutcome:
    """Result of publishing one file.

    ``CONFLICT`` is a failure that still carries the existing asset's URL.
    """

    status: OutcomeStatus
    url: str | None = None
    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status is OutcomeStatus.CONFLICT


async def publish(
    release_id: str,
    file_path: str | Path,
    asset_name: str,
    overwrite: bool,
    client: GitHubClient,
    repo_ref: RepoRef,
    *,
    release_repo: RepoRef | None = None,
) -> PublishOutcome:
    """Upload ``file_path`` to release ``release_id`` as ``asset_name``.

    Parameters
    ----------
    release_id:
        Numeric ID of the target release.
    file_path:
        Local file to upload. Paths that are not regular files are skipped.
    asset_name:
        Name the asset gets in the release.
    overwrite:
        Delete an existing asset with the same name instead of failing.
    client:
        Authenticated API client.
    repo_ref:
        Repository used to list and delete assets.
    release_repo:
        Repository used to look up the release's upload endpoint. Defaults to
        ``repo_ref``.

    Returns
    -------
    PublishOutcome
        ``SKIPPED`` without a URL, ``CONFLICT`` with the existing asset's URL,
        or ``UPLOADED`` with the new asset's URL.

    Raises
    ------
    GitHubApiError
        If listing, deleting, the release lookup or the upload fails.
    """
    path = Path(file_path)
    if not path.is_file():
        logger.debug("Skipping %s, since it's not a file", path)
        return PublishOutcome(OutcomeStatus.SKIPPED)

    file_bytes = path.read_bytes()

    assets = await client.list_release_assets(repo_ref, release_id)
    duplicate = next((a for a in assets if a.name == asset_name), None)
    if duplicate is not None:
        if overwrite:
            logger.debug(
                "An asset called %s already exists in release so we'll overwrite it.",
                asset_name,
            )
            await client.delete_release_asset(repo_ref, duplicate.id)
        else:
            return PublishOutcome(
                OutcomeStatus.CONFLICT,
                url=duplicate.browser_download_url,
                message=f"An asset called {asset_name} already exists.",
            )
    else:
        logger.debug("No pre-existing asset called %s found in release. All good.", asset_name)

    release = await client.get_release(release_repo or repo_ref, release_id)

    logger.debug("Uploading %s to %s in release.", path, asset_name)
    request = UploadRequest.for_file(release.upload_endpoint, asset_name, file_bytes)
    uploaded = await client.upload_release_asset(request)
    return PublishOutcome(OutcomeStatus.UPLOADED, url=uploaded.browser_download_url)
