"""Tests for release models."""

from __future__ import annotations

import pydantic
import pytest

from upload_release_asset.models.releases import Release, ReleaseAsset, RepoRef, UploadRequest


class TestRepoRef:
    def test_from_slug(self):
        assert RepoRef.from_slug("octo/hello") == RepoRef(owner="octo", repo="hello")

    def test_str(self):
        assert str(RepoRef(owner="octo", repo="hello")) == "octo/hello"

    def test_frozen(self):
        ref = RepoRef(owner="octo", repo="hello")
        with pytest.raises(pydantic.ValidationError):
            ref.owner = "other"

    @pytest.mark.parametrize(
        ("owner", "repo"),
        [("", "hello"), ("octo", ""), ("oc/to", "hello")],
    )
    def test_invalid(self, owner, repo):
        with pytest.raises(ValueError):
            RepoRef(owner=owner, repo=repo)


def test_release_upload_endpoint_strips_template():
    release = Release(
        id=1,
        upload_url="https://uploads.github.com/repos/octo/hello/releases/1/assets{?name,label}",
    )
    assert release.upload_endpoint == "https://uploads.github.com/repos/octo/hello/releases/1/assets"


def test_release_asset_ignores_unknown_fields():
    asset = ReleaseAsset.model_validate(
        {
            "id": 5,
            "name": "app.zip",
            "browser_download_url": "https://dl/app.zip",
            "uploader": {"login": "octocat"},
            "download_count": 12,
        }
    )
    assert asset.name == "app.zip"
    assert not hasattr(asset, "uploader")


@pytest.mark.parametrize(
    "data",
    [
        {"id": 5, "name": "app.zip"},
        {"id": 5, "name": "app.zip", "browser_download_url": ""},
        {"id": 5, "browser_download_url": "https://dl/app.zip"},
    ],
)
def test_release_asset_requires_name_and_url(data):
    with pytest.raises(pydantic.ValidationError):
        ReleaseAsset.model_validate(data)


@pytest.mark.parametrize("data", [{"id": 1}, {"id": 1, "upload_url": ""}])
def test_release_requires_upload_url(data):
    with pytest.raises(pydantic.ValidationError):
        Release.model_validate(data)


class TestUploadRequest:
    def test_headers(self):
        request = UploadRequest.for_file("https://uploads/x", "app.zip", b"abc")
        assert request.content_length == 3
        assert request.headers == {
            "Content-Type": "binary/octet-stream",
            "Content-Length": "3",
        }

    def test_zero_bytes(self):
        request = UploadRequest.for_file("https://uploads/x", "empty.txt", b"")
        assert request.content_length == 0
        assert request.headers["Content-Length"] == "0"
