"""Add a contributor to a repository — the main entry point for the Action.

This is what runs on every triggering event. It:
1. Loads the repository's .code-communityrc (or starts an empty one)
2. Merges the incoming contributor into it
3. Stops early if nothing changed
4. Fetches the tracked markdown files and re-renders badge and table
5. Commits everything on a new branch and opens a pull request

Usage:
    # As a CLI command
    code-community add --login alice --contribution code

    # In a GitHub Action (contributor taken from the event payload)
    code-community add --event "$GITHUB_EVENT_PATH"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from codecommunity.config import ActionConfig
from codecommunity.github.client import GitHubClient
from codecommunity.github.commit import CommitPipeline, CommitResult
from codecommunity.merge import merge_contributor
from codecommunity.models import Contributor, ContributorRC, TrackedFile
from codecommunity.rc import dump_rc, load_rc, load_tracked_files
from codecommunity.render import render_tracked_files

logger = logging.getLogger("codecommunity.action")


@dataclass
class RunResult:
    """What one add-contributor run did."""

    login: str
    changed: bool
    rc: ContributorRC
    files: list[TrackedFile] = field(default_factory=list)
    commit: CommitResult | None = None

    @property
    def success(self) -> bool:
        return self.commit is None or self.commit.success


async def add_contributor(
    client: GitHubClient,
    config: ActionConfig,
    incoming: Contributor,
    dry_run: bool = False,
) -> RunResult:
    """Run the full add-contributor workflow against `client`'s repository."""
    rc = await load_rc(client, config.rc_path)
    rc, changed = merge_contributor(rc, incoming)

    if not changed:
        return RunResult(login=incoming.login, changed=False, rc=rc)

    files = await load_tracked_files(client, config.files)
    files = render_tracked_files(
        files, rc, client.owner, client.repo, config.contributors_per_row
    )
    result = RunResult(login=incoming.login, changed=True, rc=rc, files=files)

    if dry_run:
        logger.info("Dry run: skipping commit for %s", incoming.login)
        return result

    pipeline = CommitPipeline(
        client,
        login=incoming.login,
        files=files,
        rc_path=config.rc_path,
        rc_content=dump_rc(rc),
        branch=config.branch,
    )
    result.commit = await pipeline.run()
    return result
