"""Drive a full upload run: resolve targets, publish each file, collect outputs."""

from __future__ import annotations

import glob
import logging
from dataclasses import dataclass, field

from .client import GitHubClient
from .config import ActionConfig
from .exceptions import NoMatchingFilesError
from .publisher import OutcomeStatus, PublishOutcome, publish
from .resolver import resolve_repo

logger = logging.getLogger(__name__)

OUTPUT_DOWNLOAD_URL = "browser_download_url"


def expand_files(pattern: str, file_glob: bool) -> list[str]:
    """Return the paths to publish for ``pattern``.

    Raises
    ------
    NoMatchingFilesError
        If ``file_glob`` is set and the pattern matches nothing.
    """
    if not file_glob:
        return [pattern]
    files = sorted(glob.glob(pattern, recursive=True))
    if not files:
        raise NoMatchingFilesError(pattern)
    return files


class OutputRegister:
    """Holds the download URL reported for the most recently published file."""

    def __init__(self) -> None:
        self.browser_download_url: str | None = None

    def record(self, outcome: PublishOutcome) -> None:
        if outcome.status is OutcomeStatus.SKIPPED:
            return
        self.browser_download_url = outcome.url

    def outputs(self) -> dict[str, str]:
        if self.browser_download_url is None:
            return {}
        return {OUTPUT_DOWNLOAD_URL: self.browser_download_url}


@dataclass
class RunResult:
    outputs: dict[str, str] = field(default_factory=dict)
    failures: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


async def run_action(
    config: ActionConfig,
    client: GitHubClient,
    register: OutputRegister | None = None,
) -> RunResult:
    """Publish every file selected by ``config`` to its release, one at a time.

    A name conflict fails the run but the remaining files are still
    processed. Any API error aborts the batch; ``register`` keeps the URL of
    the last file handled before that.
    """
    register = register if register is not None else OutputRegister()
    ambient = config.repository
    repo_ref = resolve_repo(config.repo_name, ambient)
    files = expand_files(config.file, config.file_glob)
    logger.debug(
        "Publishing %d file(s) to release %s in %s", len(files), config.release_id, repo_ref
    )

    result = RunResult()
    for file in files:
        outcome = await publish(
            config.release_id,
            file,
            config.asset_name,
            config.overwrite,
            client,
            repo_ref,
            release_repo=ambient,
        )
        register.record(outcome)
        if outcome.failed:
            result.failures.append(outcome.message)
    result.outputs = register.outputs()
    return result
