"""HTML/markdown generation for the contributor badge and table."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from codecommunity.models import ContributionKind, Contributor

DEFAULT_CONTRIBUTORS_PER_ROW = 7

BADGE_TEMPLATE = (
    "[![All Contributors](https://img.shields.io/badge/code_community-{count}"
    "-orange.svg?style=flat-square)](#contributors)"
)

_ISSUES_BY_AUTHOR = "https://github.com/{owner}/{repo}/issues?q=author%3A{login}"
_COMMITS_BY_AUTHOR = "https://github.com/{owner}/{repo}/commits?author={login}"


@dataclass(frozen=True)
class IconRule:
    """How one contribution tag is drawn inside a contributor cell."""

    emoji: str
    title: str
    href: str

    def render(self, login: str, owner: str, repo: str) -> str:
        url = self.href.format(owner=owner, repo=repo, login=login)
        return f'<a href="{escape(url)}" title="{self.title}">{self.emoji}</a> '


CONTRIBUTION_ICONS: dict[str, IconRule] = {
    ContributionKind.BUG.value: IconRule("🐛", "Bug reports", _ISSUES_BY_AUTHOR),
    ContributionKind.ENHANCEMENT.value: IconRule(
        "🤔", "Ideas, Planning, & Feedback", _ISSUES_BY_AUTHOR
    ),
    ContributionKind.DOCUMENTATION.value: IconRule(
        "📖", "Documentation", _COMMITS_BY_AUTHOR
    ),
    ContributionKind.CODE.value: IconRule("💻", "Code", _COMMITS_BY_AUTHOR),
    ContributionKind.TESTS.value: IconRule("⚠️", "Tests", _COMMITS_BY_AUTHOR),
    ContributionKind.CONTENT.value: IconRule("🖋", "Content", "#content-{login}"),
}


def render_badge(count: int) -> str:
    """Single badge line showing the number of contributors."""
    return BADGE_TEMPLATE.format(count=count)


def render_contribution(contributor: Contributor, tag: str, owner: str, repo: str) -> str:
    """Icon link for one tag, or an empty string for tags we don't know."""
    rule = CONTRIBUTION_ICONS.get(tag)
    if rule is None:
        return ""
    return rule.render(contributor.login, owner, repo)


def render_cell(contributor: Contributor, owner: str, repo: str) -> str:
    login = escape(contributor.login)
    icons = "".join(
        render_contribution(contributor, tag, owner, repo)
        for tag in contributor.contributions
    )
    return (
        '<td align="center">\n'
        f'  <a href="https://github.com/{login}">\n'
        f'    <img src="{escape(contributor.avatar_url)}" width="100px;" alt=""/><br />\n'
        f"    <sub><b>{login}</b></sub></a><br />\n"
        f"  {icons}\n"
        "</td>"
    )


def chunk_rows(
    contributors: list[Contributor], per_row: int = DEFAULT_CONTRIBUTORS_PER_ROW
) -> list[list[Contributor]]:
    """Split contributors into rows of at most `per_row` entries."""
    if per_row < 1:
        raise ValueError(f"contributors per row must be at least 1, got {per_row}")
    return [contributors[i:i + per_row] for i in range(0, len(contributors), per_row)]


def render_table(
    contributors: list[Contributor],
    owner: str,
    repo: str,
    per_row: int = DEFAULT_CONTRIBUTORS_PER_ROW,
) -> str:
    """Render contributors as an HTML table, `per_row` cells per row."""
    lines = ["<table>"]
    for row in chunk_rows(contributors, per_row):
        lines.append("<tr>")
        lines.extend(render_cell(c, owner, repo) for c in row)
        lines.append("</tr>")
    lines.append("</table>")
    return "\n".join(lines)
