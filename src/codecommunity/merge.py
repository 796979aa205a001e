"""Merge an incoming contributor record into the repository configuration."""

from __future__ import annotations

import logging

from codecommunity.models import Contributor, ContributorRC

logger = logging.getLogger("codecommunity.merge")


def merge_contributor(
    rc: ContributorRC, incoming: Contributor
) -> tuple[ContributorRC, bool]:
    """Add `incoming` to `rc` or extend an existing record's contributions.

    Returns the updated configuration and whether anything changed. When
    nothing changed the original `rc` object is returned as-is. The input
    configuration is never mutated.

    The existing record keeps its position and its avatar_url; only the
    contribution list grows, with new tags appended in the order they
    appear on `incoming`.
    """
    existing = rc.find(incoming.login)

    if existing is None:
        logger.info("Adding new contributor %s", incoming.login)
        updated = rc.model_copy(deep=True)
        updated.contributors.append(incoming.model_copy(deep=True))
        return updated, True

    new_contributions = incoming.missing_from(existing)
    logger.debug(
        "Contributions for %s: incoming=%s existing=%s new=%s",
        incoming.login,
        incoming.contributions,
        existing.contributions,
        new_contributions,
    )

    if not new_contributions:
        logger.info("No new contributions identified for %s", incoming.login)
        return rc, False

    logger.info(
        "Identified new contributions for %s: %s",
        incoming.login,
        ", ".join(new_contributions),
    )

    merged = existing.model_copy(
        update={"contributions": [*existing.contributions, *new_contributions]}
    )
    updated = rc.model_copy(deep=True)
    updated.contributors = [
        merged if c.login == incoming.login else c for c in updated.contributors
    ]
    return updated, True
