"""Commit the rendered files and open a pull request.

The remote work is an ordered pipeline of steps:

1. Resolve the repository's default (base) branch
2. Resolve the latest commit on it, and that commit's tree
3. Create a tree holding every tracked file plus the contributor config
4. Create a commit for that tree on top of the latest commit
5. Create a branch pointing at the new commit
6. Open a pull request from the branch into the base branch

Each step reports a StepResult. The first failure stops the pipeline;
objects already created on GitHub are left in place.
"""

from __future__ import annotations

import logging
import secrets
import string
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from codecommunity.exceptions import GitHubAPIError
from codecommunity.github.client import GitHubClient
from codecommunity.models import TrackedFile

logger = logging.getLogger("codecommunity.github")

_BRANCH_ALPHABET = string.ascii_lowercase + string.digits


def random_branch_name(length: int = 11) -> str:
    """Random lowercase base-36 branch name."""
    return "".join(secrets.choice(_BRANCH_ALPHABET) for _ in range(length))


def commit_message(login: str) -> str:
    return f"Updating contributions for {login}"


@dataclass
class StepResult:
    """Outcome of one pipeline step."""

    name: str
    success: bool = True
    error: str = ""


@dataclass
class CommitResult:
    """Final result of the commit pipeline."""

    steps: list[StepResult] = field(default_factory=list)
    base_branch: str = ""
    branch: str = ""
    commit_sha: str = ""
    pull_request_url: str = ""
    pull_request_number: int | None = None
    success: bool = True
    error: str = ""

    @property
    def failed_step(self) -> str:
        for step in self.steps:
            if not step.success:
                return step.name
        return ""


@dataclass
class _PipelineState:
    base_branch: str = ""
    parent_sha: str = ""
    base_tree_sha: str = ""
    tree_sha: str = ""
    commit_sha: str = ""
    pull_request: dict = field(default_factory=dict)


class CommitPipeline:
    """Sequences the GitHub calls that turn rendered files into a PR."""

    def __init__(
        self,
        client: GitHubClient,
        login: str,
        files: list[TrackedFile],
        rc_path: str,
        rc_content: str,
        branch: str | None = None,
    ) -> None:
        self.client = client
        self.login = login
        self.files = files
        self.rc_path = rc_path
        self.rc_content = rc_content
        self.branch = branch or random_branch_name()
        self._state = _PipelineState()

    @property
    def steps(self) -> list[tuple[str, Callable[[], Awaitable[None]]]]:
        return [
            ("resolve_base_branch", self._resolve_base_branch),
            ("resolve_latest_commit", self._resolve_latest_commit),
            ("create_tree", self._create_tree),
            ("create_commit", self._create_commit),
            ("create_branch", self._create_branch),
            ("open_pull_request", self._open_pull_request),
        ]

    async def run(self) -> CommitResult:
        result = CommitResult(branch=self.branch)

        for name, step in self.steps:
            try:
                await step()
            except (GitHubAPIError, KeyError, IndexError, TypeError) as e:
                # KeyError/IndexError/TypeError: GitHub answered with an unexpected shape
                logger.error("Step %s failed: %s", name, e)
                result.steps.append(StepResult(name=name, success=False, error=str(e)))
                result.success = False
                result.error = f"{name} failed: {e}"
                break
            logger.info("Step %s done", name)
            result.steps.append(StepResult(name=name))

        state = self._state
        result.base_branch = state.base_branch
        result.commit_sha = state.commit_sha
        if state.pull_request:
            result.pull_request_url = state.pull_request.get("html_url", "")
            result.pull_request_number = state.pull_request.get("number")
        return result

    async def _resolve_base_branch(self) -> None:
        repository = await self.client.get_repository()
        self._state.base_branch = repository["default_branch"]

    async def _resolve_latest_commit(self) -> None:
        commits = await self.client.list_commits(self._state.base_branch, per_page=1)
        latest = commits[0]
        self._state.parent_sha = latest["sha"]
        self._state.base_tree_sha = latest["commit"]["tree"]["sha"]

    async def _create_tree(self) -> None:
        contents = {f.path: f.content for f in self.files}
        contents[self.rc_path] = self.rc_content
        tree = await self.client.create_tree(self._state.base_tree_sha, contents)
        self._state.tree_sha = tree["sha"]

    async def _create_commit(self) -> None:
        commit = await self.client.create_commit(
            commit_message(self.login),
            tree=self._state.tree_sha,
            parents=[self._state.parent_sha],
        )
        self._state.commit_sha = commit["sha"]

    async def _create_branch(self) -> None:
        await self.client.create_ref(f"refs/heads/{self.branch}", self._state.commit_sha)

    async def _open_pull_request(self) -> None:
        message = commit_message(self.login)
        self._state.pull_request = await self.client.create_pull_request(
            title=message,
            body=message,
            head=self.branch,
            base=self._state.base_branch,
        )
