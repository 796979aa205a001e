"""Shared test fixtures for code-community."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
import respx

from codecommunity.github.client import GitHubClient
from codecommunity.models import Contributor, ContributorRC

OWNER = "acme"
REPO = "widgets"
API = "https://api.github.com"
REPO_PATH = f"/repos/{OWNER}/{REPO}"


def contents_response(text: str) -> httpx.Response:
    """A GitHub contents API response, base64 wrapped at 60 chars like GitHub does."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60))
    return httpx.Response(200, json={"content": wrapped + "\n", "encoding": "base64"})


def request_json(route: respx.Route) -> dict:
    return json.loads(route.calls.last.request.content)


@pytest.fixture
def alice() -> Contributor:
    return Contributor(
        login="alice",
        avatar_url="https://avatars.githubusercontent.com/u/1",
        contributions=["code"],
    )


@pytest.fixture
def bob() -> Contributor:
    return Contributor(
        login="bob",
        avatar_url="https://avatars.githubusercontent.com/u/2",
        contributions=["bug", "documentation"],
    )


@pytest.fixture
def sample_rc(alice: Contributor, bob: Contributor) -> ContributorRC:
    return ContributorRC(contributors=[alice, bob])


@pytest.fixture
def make_contributors():
    def _make(n: int) -> list[Contributor]:
        return [
            Contributor(
                login=f"user{i}",
                avatar_url=f"https://avatars.example/{i}",
                contributions=["code"],
            )
            for i in range(n)
        ]

    return _make


@pytest.fixture
def github_api():
    """Mocked GitHub API; routes are relative to the API root."""
    with respx.mock(base_url=API, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client() -> GitHubClient:
    return GitHubClient(OWNER, REPO, token="test-token")


@pytest.fixture
def happy_pipeline(github_api: respx.MockRouter) -> dict[str, respx.Route]:
    """Routes for a commit pipeline run where every call succeeds."""
    return {
        "repo": github_api.get(REPO_PATH).mock(
            return_value=httpx.Response(200, json={"default_branch": "main"})
        ),
        "commits": github_api.get(f"{REPO_PATH}/commits").mock(
            return_value=httpx.Response(
                200, json=[{"sha": "parent-sha", "commit": {"tree": {"sha": "base-tree"}}}]
            )
        ),
        "tree": github_api.post(f"{REPO_PATH}/git/trees").mock(
            return_value=httpx.Response(201, json={"sha": "new-tree"})
        ),
        "commit": github_api.post(f"{REPO_PATH}/git/commits").mock(
            return_value=httpx.Response(201, json={"sha": "new-commit"})
        ),
        "ref": github_api.post(f"{REPO_PATH}/git/refs").mock(
            return_value=httpx.Response(201, json={"ref": "refs/heads/x"})
        ),
        "pull": github_api.post(f"{REPO_PATH}/pulls").mock(
            return_value=httpx.Response(
                201,
                json={"number": 42, "html_url": "https://github.com/acme/widgets/pull/42"},
            )
        ),
    }
