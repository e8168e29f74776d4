"""Release models: repositories, releases, assets, upload requests."""

from __future__ import annotations

from pydantic import Field, computed_field, field_validator

from .base import GitHubModel

UPLOAD_CONTENT_TYPE = "binary/octet-stream"


class RepoRef(GitHubModel):
    """An ``owner/repo`` pair addressed by every repository-scoped API call."""

    model_config = {"frozen": True}

    owner: str
    repo: str

    @field_validator("owner")
    @classmethod
    def _check_owner(cls, value: str) -> str:
        if not value:
            raise ValueError("owner must not be empty")
        if "/" in value:
            raise ValueError(f"owner must not contain '/': {value!r}")
        return value

    @field_validator("repo")
    @classmethod
    def _check_repo(cls, value: str) -> str:
        if not value:
            raise ValueError("repo must not be empty")
        return value

    @classmethod
    def from_slug(cls, slug: str) -> RepoRef:
        """Build a reference from a ``GITHUB_REPOSITORY`` style ``owner/repo`` string."""
        owner, sep, repo = slug.partition("/")
        if not sep:
            raise ValueError(f"expected 'owner/repo', got {slug!r}")
        return cls(owner=owner, repo=repo)

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


class ReleaseAsset(GitHubModel):
    id: int
    name: str
    browser_download_url: str = Field(min_length=1)
    label: str | None = None
    state: str = ""
    content_type: str = ""
    size: int = 0


class Release(GitHubModel):
    id: int
    upload_url: str = Field(min_length=1)
    tag_name: str = ""
    name: str | None = None
    url: str = ""
    html_url: str = ""
    draft: bool = False
    prerelease: bool = False

    @property
    def upload_endpoint(self) -> str:
        """``upload_url`` with its URI template suffix (``{?name,label}``) removed."""
        return self.upload_url.split("{", 1)[0]


class UploadRequest(GitHubModel):
    """A single binary asset upload, built immediately before it is sent."""

    release_upload_endpoint: str
    asset_name: str
    content_bytes: bytes
    content_type: str = UPLOAD_CONTENT_TYPE

    @classmethod
    def for_file(cls, endpoint: str, asset_name: str, data: bytes) -> UploadRequest:
        return cls(release_upload_endpoint=endpoint, asset_name=asset_name, content_bytes=data)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def content_length(self) -> int:
        return len(self.content_bytes)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Length": str(self.content_length),
        }
