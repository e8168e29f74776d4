"""Shared test fixtures for upload-release-asset."""

from __future__ import annotations

import logging

import pytest
import respx

from upload_release_asset.client import GitHubClient
from upload_release_asset.config import ActionConfig
from upload_release_asset.models.releases import RepoRef

API_URL = "https://api.github.example.com"
UPLOADS_URL = "https://uploads.github.example.com"
TEST_TOKEN = "test-token"
REPOSITORY = "octo/workflow-repo"

_INPUT_VARS = (
    "INPUT_REPO_TOKEN",
    "INPUT_FILE",
    "INPUT_ASSET_NAME",
    "INPUT_RELEASE_ID",
    "INPUT_FILE_GLOB",
    "INPUT_OVERWRITE",
    "INPUT_REPO_NAME",
    "INPUT_TIMEOUT",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "GITHUB_OUTPUT",
    "RUNNER_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _INPUT_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    yield
    logger = logging.getLogger("upload_release_asset")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config() -> ActionConfig:
    return ActionConfig(
        repo_token=TEST_TOKEN,
        file="dist/app.bin",
        asset_name="app.bin",
        release_id="42",
        github_repository=REPOSITORY,
        api_url=API_URL,
    )


@pytest.fixture
def repo() -> RepoRef:
    return RepoRef(owner="octo", repo="workflow-repo")


@pytest.fixture
async def client(config: ActionConfig) -> GitHubClient:
    client = GitHubClient(config)
    yield client
    await client.close()


@pytest.fixture
def mock_api() -> respx.MockRouter:
    with respx.mock(assert_all_called=False) as router:
        yield router
