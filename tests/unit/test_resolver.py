"""Tests for repository resolution."""

from __future__ import annotations

import pytest

from upload_release_asset.exceptions import ConfigurationError
from upload_release_asset.models.releases import RepoRef
from upload_release_asset.resolver import resolve_repo

AMBIENT = RepoRef(owner="octo", repo="workflow-repo")


class _UnparsableName(str):
    def partition(self, sep):
        raise AssertionError("repo_name should not be parsed")

    def split(self, *args, **kwargs):
        raise AssertionError("repo_name should not be parsed")


@pytest.mark.parametrize("repo_name", ["", None])
def test_empty_override_returns_ambient(repo_name):
    assert resolve_repo(repo_name, AMBIENT) is AMBIENT


def test_empty_override_is_not_parsed():
    assert resolve_repo(_UnparsableName(""), AMBIENT) is AMBIENT


def test_owner_and_repo():
    assert resolve_repo("other/project", AMBIENT) == RepoRef(owner="other", repo="project")


def test_extra_slashes_stay_in_repo():
    resolved = resolve_repo("other/project/extra", AMBIENT)
    assert resolved.owner == "other"
    assert resolved.repo == "project/extra"


@pytest.mark.parametrize("repo_name", ["project", "other-project", "a.b"])
def test_without_slash_has_no_owner(repo_name):
    with pytest.raises(ConfigurationError, match="Could not extract 'owner'"):
        resolve_repo(repo_name, AMBIENT)


def test_leading_slash_has_no_owner():
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_repo("/project", AMBIENT)
    assert str(exc_info.value) == "Could not extract 'owner' from 'repo_name': /project."


def test_trailing_slash_has_no_repo():
    with pytest.raises(ConfigurationError) as exc_info:
        resolve_repo("other/", AMBIENT)
    assert str(exc_info.value) == "Could not extract 'repo' from 'repo_name': other/."
