"""Release upload exceptions."""

from __future__ import annotations


class ReleaseUploadError(Exception):
    """Base exception for release upload operations."""


class ConfigurationError(ReleaseUploadError, ValueError):
    """Raised when action inputs or the workflow environment are unusable."""


class NoMatchingFilesError(ReleaseUploadError):
    """Raised when a glob pattern matches no files."""

    def __init__(self, pattern: str = "") -> None:
        self.pattern = pattern
        super().__init__("No files matching the glob pattern found.")


class GitHubApiError(ReleaseUploadError):
    """Raised when the GitHub API returns a non-success response."""

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"GitHub API Error {status_code} {status_text}: {body}")


class GitHubAuthError(GitHubApiError):
    """Raised on 401/403 authentication failures."""

    def __init__(self, status_code: int, body: str = "") -> None:
        status_text = "Unauthorized" if status_code == 401 else "Forbidden"
        super().__init__(status_code, status_text, body)


class GitHubNotFoundError(GitHubApiError):
    """Raised on 404 responses."""

    def __init__(self, body: str = "") -> None:
        super().__init__(404, "Not Found", body)
