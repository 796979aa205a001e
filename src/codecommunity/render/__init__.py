"""Render the contributor badge and table into markdown documents."""

from __future__ import annotations

from codecommunity.models import ContributorRC, TrackedFile
from codecommunity.render.markers import BADGE_REGION, TABLE_REGION, replace_region
from codecommunity.render.table import (
    DEFAULT_CONTRIBUTORS_PER_ROW,
    render_badge,
    render_table,
)


def render_content(
    content: str,
    rc: ContributorRC,
    owner: str,
    repo: str,
    contributors_per_row: int = DEFAULT_CONTRIBUTORS_PER_ROW,
) -> str:
    """Return `content` with the badge and table regions regenerated from `rc`."""
    content = replace_region(content, BADGE_REGION, render_badge(rc.count))
    table = render_table(rc.contributors, owner, repo, contributors_per_row)
    return replace_region(content, TABLE_REGION, table)


def render_tracked_files(
    files: list[TrackedFile],
    rc: ContributorRC,
    owner: str,
    repo: str,
    contributors_per_row: int = DEFAULT_CONTRIBUTORS_PER_ROW,
) -> list[TrackedFile]:
    """Render every tracked file, returning new TrackedFile objects."""
    return [
        TrackedFile(
            path=f.path,
            content=render_content(f.content, rc, owner, repo, contributors_per_row),
        )
        for f in files
    ]


__all__ = [
    "BADGE_REGION",
    "TABLE_REGION",
    "render_badge",
    "render_content",
    "render_table",
    "render_tracked_files",
    "replace_region",
]
