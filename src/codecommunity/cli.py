"""Command-line interface for code-community."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from codecommunity import __version__
from codecommunity.config import RC_FILE, ActionConfig, load_local_rc
from codecommunity.exceptions import ConfigError
from codecommunity.models import ContributionKind, Contributor
from codecommunity.ui.console import Console

console = Console()


def _build_config(**overrides: object) -> ActionConfig:
    try:
        return ActionConfig.from_env(**overrides)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="code-community")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def main(verbose: bool):
    """code-community - keep a contributor badge and table in your docs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =========================================================================
# Add a contributor (the GitHub Action entry point)
# =========================================================================

@main.command()
@click.option("--login", default=None, help="GitHub login of the contributor.")
@click.option("--avatar-url", default="", help="Avatar image URL.")
@click.option(
    "--contribution", "-c", "contributions",
    multiple=True,
    type=click.Choice(ContributionKind.values()),
    help="Contribution type (repeatable).",
)
@click.option(
    "--event", "event_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the contributor from a GitHub event payload.",
)
@click.option("--repo", "-r", default=None, help="Repository as owner/repo.")
@click.option("--file", "-f", "files", multiple=True, help="Markdown file to update (repeatable).")
@click.option("--per-row", type=int, default=None, help="Contributors per table row.")
@click.option("--branch", default=None, help="Branch name for the PR (random by default).")
@click.option("--rc-path", default=None, help=f"Config path in the repo (default {RC_FILE}).")
@click.option("--dry-run", is_flag=True, help="Render but don't commit or open a PR.")
def add(
    login: str | None,
    avatar_url: str,
    contributions: tuple[str, ...],
    event_path: Path | None,
    repo: str | None,
    files: tuple[str, ...],
    per_row: int | None,
    branch: str | None,
    rc_path: str | None,
    dry_run: bool,
):
    """Record a contribution and open a PR updating the contributor table.

    Usage in CI:

        code-community add --event "$GITHUB_EVENT_PATH"

    Local usage:

        code-community add --repo me/project --login alice -c code -c tests
    """
    from codecommunity.action import add_contributor
    from codecommunity.github.client import GitHubClient
    from codecommunity.github.event import contributor_from_event, load_event

    config = _build_config(
        repository=repo,
        files=list(files) or None,
        contributors_per_row=per_row,
        branch=branch,
        rc_path=rc_path,
    )

    if event_path is not None:
        incoming = contributor_from_event(load_event(event_path))
        if incoming is None:
            console.error(f"No pull request or issue author found in {event_path}")
            sys.exit(1)
    else:
        if not login or not contributions:
            console.error("Provide --login and at least one --contribution, or --event.")
            sys.exit(1)
        incoming = Contributor(
            login=login, avatar_url=avatar_url, contributions=list(contributions)
        )

    try:
        config.require_remote()
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    async def _run():
        async with GitHubClient(
            config.owner,
            config.repo,
            token=config.github_token,
            base_url=config.api_url,
        ) as client:
            return await add_contributor(client, config, incoming, dry_run=dry_run)

    console.info(
        f"Adding {incoming.login} ({', '.join(incoming.contributions)}) "
        f"to {config.repository}"
    )
    result = asyncio.run(_run())

    if not result.changed:
        console.success(f"No new contributions for {incoming.login}; nothing to do")
        return

    if dry_run:
        for f in result.files:
            console.info(f"Rendered {f.path}")
            click.echo(f.content)
        console.info(f"Would write {config.rc_path}")
        click.echo(result.rc.to_json())
        return

    console.show_commit_result(result.commit)
    if not result.success:
        console.error(result.commit.error)
        sys.exit(1)
    console.success(f"Opened {result.commit.pull_request_url}")


# =========================================================================
# Local rendering
# =========================================================================

@main.command()
@click.argument(
    "files", nargs=-1, required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--rc", "rc_file", default=RC_FILE, type=click.Path(path_type=Path),
              help="Local contributor config.")
@click.option("--repo", "-r", default=None, help="Repository as owner/repo (for icon links).")
@click.option("--per-row", type=int, default=None, help="Contributors per table row.")
@click.option("--check", is_flag=True, help="Don't write; exit 1 if any file is out of date.")
def render(files: tuple[Path, ...], rc_file: Path, repo: str | None,
           per_row: int | None, check: bool):
    """Render the badge and table into local markdown FILES."""
    from codecommunity.render import render_content

    config = _build_config(repository=repo, contributors_per_row=per_row)
    if not config.repository:
        console.error("No repository configured. Pass --repo owner/repo.")
        sys.exit(1)

    try:
        rc = load_local_rc(rc_file)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    stale: list[Path] = []
    for path in files:
        original = path.read_text()
        rendered = render_content(
            original, rc, config.owner, config.repo, config.contributors_per_row
        )
        if rendered == original:
            console.success(f"{path} is up to date")
            continue
        stale.append(path)
        if check:
            console.warning(f"{path} is out of date")
        else:
            path.write_text(rendered)
            console.success(f"Updated {path}")

    if check and stale:
        sys.exit(1)


@main.command()
@click.option("--rc", "rc_file", default=RC_FILE, type=click.Path(path_type=Path),
              help="Local contributor config.")
def show(rc_file: Path):
    """Show the contributors recorded in a local config."""
    try:
        rc = load_local_rc(rc_file)
    except ConfigError as e:
        console.error(str(e))
        sys.exit(1)

    if not rc.contributors:
        console.info(f"No contributors recorded in {rc_file}")
        return
    console.show_contributors(rc)


if __name__ == "__main__":
    main()
