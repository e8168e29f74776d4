"""GitHub REST API client using httpx."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import ActionConfig
from .exceptions import GitHubApiError, GitHubAuthError, GitHubNotFoundError
from .models.releases import Release, ReleaseAsset, RepoRef, UploadRequest

API_VERSION = "2022-11-28"

M = TypeVar("M", bound=BaseModel)


class GitHubClient:
    """Async HTTP client for the release endpoints of the GitHub REST API."""

    def __init__(self, config: ActionConfig) -> None:
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=self.config.api_url,
            headers={
                "Authorization": f"Bearer {self.config.repo_token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
            },
            timeout=self.config.timeout,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ── HTTP helpers ──────────────────────────────────────────────

    @staticmethod
    def _repo_path(repo: RepoRef) -> str:
        return f"/repos/{repo.owner}/{repo.repo}"

    @staticmethod
    def _check(resp: httpx.Response) -> None:
        if resp.status_code in (401, 403):
            raise GitHubAuthError(resp.status_code, resp.text)
        if resp.status_code == 404:
            raise GitHubNotFoundError(resp.text)
        if not resp.is_success:
            raise GitHubApiError(resp.status_code, resp.reason_phrase or "", resp.text)

    @staticmethod
    def _parse(resp: httpx.Response) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None

        content_type = resp.headers.get("content-type", "")
        if "text/html" in content_type:
            msg = "Unexpected HTML response, check the API URL and token"
            raise GitHubApiError(resp.status_code, msg, resp.text[:500])

        try:
            return resp.json()
        except json.JSONDecodeError as e:
            raise GitHubApiError(
                resp.status_code,
                f"JSON parse error: {e}",
                resp.text[:500],
            ) from e

    @staticmethod
    def _model(model: type[M], data: Any, status_code: int) -> M:
        """Validate a parsed response body, reporting a malformed one as an API error."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GitHubApiError(
                status_code,
                f"Unexpected {model.__name__} response: {e.error_count()} invalid field(s)",
                json.dumps(data)[:500],
            ) from e

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        content: bytes | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        headers = {}
        if extra_headers:
            headers.update(extra_headers)

        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if content is not None:
            kwargs["content"] = content

        resp = await self._client.request(method, path, **kwargs)
        self._check(resp)
        return resp

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Make an API request and return parsed JSON."""
        resp = await self._send(method, path, **kwargs)
        return self._parse(resp)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self._request("DELETE", path, **kwargs)

    async def paginate(self, path: str, params: dict[str, Any] | None = None) -> list[Any]:
        """GET every page of a list endpoint, following ``Link: rel="next"``.

        Items are returned in the order the API lists them.
        """
        items: list[Any] = []
        url: str | None = path
        page_params: dict[str, Any] | None = {"per_page": 100, **(params or {})}
        while url is not None:
            resp = await self._send("GET", url, params=page_params)
            page = self._parse(resp)
            if page:
                items.extend(page)
            url = resp.links.get("next", {}).get("url")
            # The next link already carries the query string.
            page_params = None
        return items

    # ── Releases ──────────────────────────────────────────────────

    async def get_release(self, repo: RepoRef, release_id: str | int) -> Release:
        data = await self.get(f"{self._repo_path(repo)}/releases/{release_id}")
        return self._model(Release, data, 200)

    # ── Release assets ────────────────────────────────────────────

    async def list_release_assets(
        self, repo: RepoRef, release_id: str | int
    ) -> list[ReleaseAsset]:
        data = await self.paginate(f"{self._repo_path(repo)}/releases/{release_id}/assets")
        return [self._model(ReleaseAsset, item, 200) for item in data]

    async def delete_release_asset(self, repo: RepoRef, asset_id: int) -> None:
        await self.delete(f"{self._repo_path(repo)}/releases/assets/{asset_id}")

    async def upload_release_asset(self, request: UploadRequest) -> ReleaseAsset:
        """POST the raw bytes of ``request`` to its release upload endpoint.

        The endpoint lives on a different host (``uploads.github.com``) than
        the API base URL, so it is passed through as an absolute URL.
        """
        resp = await self._send(
            "POST",
            request.release_upload_endpoint,
            params={"name": request.asset_name},
            content=request.content_bytes,
            extra_headers=request.headers,
        )
        return self._model(ReleaseAsset, self._parse(resp), resp.status_code)
