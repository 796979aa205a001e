"""Async GitHub REST client.

Thin wrapper over httpx with token auth. Only the endpoints the
contributor workflow needs are exposed: contents, commits, git data
(trees, commits, refs) and pull requests.
"""

from __future__ import annotations

import base64
import logging
from typing import Any
from urllib.parse import quote

import httpx

from codecommunity.config import DEFAULT_API_URL
from codecommunity.exceptions import GitHubAPIError

logger = logging.getLogger("codecommunity.github")

FILE_MODE = "100644"


class GitHubClient:
    """Minimal async client scoped to one repository."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str | None = None,
        base_url: str = DEFAULT_API_URL,
        user_agent: str = "code-community/0.1",
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": user_agent,
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            r = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"{method} {path} failed: {e}", url=path) from e

        logger.debug("%s %s -> %d", method, path, r.status_code)
        if r.status_code >= 400:
            raise GitHubAPIError(
                f"GitHub API error {r.status_code} for {method} {path}: {r.text[:200]}",
                status_code=r.status_code,
                url=str(r.url),
            )
        try:
            return r.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"Non-JSON response for {method} {path}", status_code=r.status_code
            ) from e

    # -- contents ---------------------------------------------------------

    async def get_contents(self, path: str, ref: str | None = None) -> dict:
        params = {"ref": ref} if ref else None
        return await self._request(
            "GET", f"{self.repo_path}/contents/{quote(path, safe='/')}", params=params
        )

    async def get_file_text(self, path: str, ref: str | None = None) -> str:
        """Fetch a file and return its decoded UTF-8 text."""
        data = await self.get_contents(path, ref)
        if not isinstance(data, dict) or "content" not in data:
            raise GitHubAPIError(f"{path} is not a file", url=path)
        raw = data["content"].replace("\r", "").replace("\n", "")
        return base64.b64decode(raw).decode("utf-8")

    # -- repository / commits ---------------------------------------------

    async def get_repository(self) -> dict:
        return await self._request("GET", self.repo_path)

    async def list_commits(self, sha: str, per_page: int = 1) -> list[dict]:
        return await self._request(
            "GET", f"{self.repo_path}/commits", params={"sha": sha, "per_page": per_page}
        )

    # -- git data ---------------------------------------------------------

    async def create_tree(self, base_tree: str, files: dict[str, str]) -> dict:
        """Create a tree on top of `base_tree` with `files` (path -> text)."""
        tree = [
            {"path": path, "mode": FILE_MODE, "type": "blob", "content": content}
            for path, content in files.items()
        ]
        return await self._request(
            "POST", f"{self.repo_path}/git/trees", json={"base_tree": base_tree, "tree": tree}
        )

    async def create_commit(self, message: str, tree: str, parents: list[str]) -> dict:
        return await self._request(
            "POST",
            f"{self.repo_path}/git/commits",
            json={"message": message, "tree": tree, "parents": parents},
        )

    async def create_ref(self, ref: str, sha: str) -> dict:
        return await self._request(
            "POST", f"{self.repo_path}/git/refs", json={"ref": ref, "sha": sha}
        )

    # -- pull requests ----------------------------------------------------

    async def create_pull_request(self, title: str, body: str, head: str, base: str) -> dict:
        return await self._request(
            "POST",
            f"{self.repo_path}/pulls",
            json={"title": title, "body": body, "head": head, "base": base},
        )
