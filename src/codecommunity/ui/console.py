"""Rich-powered console output for code-community."""

from __future__ import annotations

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from codecommunity.github.commit import CommitResult
from codecommunity.models import ContributorRC
from codecommunity.render.table import CONTRIBUTION_ICONS


class Console:
    """Terminal output for code-community using Rich."""

    def __init__(self) -> None:
        self.console = RichConsole()

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_contributors(self, rc: ContributorRC) -> None:
        """Display the contributor config as a table."""
        table = Table(title=f"Contributors ({rc.count})", border_style="cyan")
        table.add_column("Login", style="bold")
        table.add_column("Contributions")
        table.add_column("Avatar", style="dim")

        for c in rc.contributors:
            tags = ", ".join(
                f"{CONTRIBUTION_ICONS[t].emoji} {t}" if t in CONTRIBUTION_ICONS else f"[dim]{escape(t)}[/dim]"
                for t in c.contributions
            )
            table.add_row(escape(c.login), tags, escape(c.avatar_url))

        self.console.print(table)

    def show_commit_result(self, result: CommitResult) -> None:
        """Display the outcome of the commit pipeline, step by step."""
        for step in result.steps:
            if step.success:
                self.console.print(f"  [green]→[/green] {step.name}")
            else:
                self.console.print(f"  [red]→[/red] {step.name}: [red]{escape(step.error)}[/red]")

        if result.success:
            self.console.print(
                Panel(
                    f"[bold]Branch:[/bold] {result.branch}\n"
                    f"[bold]Base:[/bold] {result.base_branch}\n"
                    f"[bold]Commit:[/bold] {result.commit_sha}\n"
                    f"[bold]Pull request:[/bold] {result.pull_request_url}",
                    title="[bold green]Pull request opened[/bold green]",
                    border_style="green",
                )
            )
