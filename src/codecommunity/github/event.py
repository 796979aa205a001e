"""Build a contributor record from a GitHub Actions event payload."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from codecommunity.models import ContributionKind, Contributor

logger = logging.getLogger("codecommunity.github")

# Used when the item carries no label from the contribution vocabulary
_DEFAULT_CONTRIBUTION = {
    "pull_request": ContributionKind.CODE.value,
    "issue": ContributionKind.BUG.value,
}


def load_event(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)


def contributor_from_event(event: dict) -> Contributor | None:
    """Pick the author and contribution tags out of a pull_request or issues event.

    Label names that match a known contribution tag become contributions.
    Returns None when the payload has no pull request or issue author.
    """
    for key in ("pull_request", "issue"):
        item = event.get(key)
        if not isinstance(item, dict):
            continue
        user = item.get("user") or {}
        login = user.get("login")
        if not login:
            continue

        known = set(ContributionKind.values())
        labels = [
            str(label.get("name") or "").strip().lower()
            for label in item.get("labels") or []
            if isinstance(label, dict)
        ]
        contributions = [name for name in labels if name in known]
        if not contributions:
            contributions = [_DEFAULT_CONTRIBUTION[key]]

        logger.debug("Event %s by %s -> %s", key, login, contributions)
        return Contributor(
            login=login,
            avatar_url=user.get("avatar_url") or "",
            contributions=contributions,
        )

    return None
