"""Marker comments and region replacement for generated markdown sections."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("codecommunity.render")


class Placement(str, Enum):
    """Where a region goes when a document has no markers yet."""

    PREPEND = "prepend"
    APPEND = "append"


@dataclass(frozen=True)
class Region:
    """A named pair of literal start/end marker comments."""

    name: str
    start: str
    end: str
    placement: Placement

    def wrap(self, body: str) -> str:
        """Surround generated `body` with this region's markers."""
        return f"{self.start}\n{body}\n{self.end}"


BADGE_REGION = Region(
    name="badge",
    start="<!-- CODE-COMMUNITY-BADGE:START - Do not remove or modify this section -->",
    end="<!-- CODE-COMMUNITY-BADGE:END -->",
    placement=Placement.PREPEND,
)

TABLE_REGION = Region(
    name="table",
    start="<!-- CODE-COMMUNITY-LIST:START - Do not remove or modify this section -->",
    end="<!-- CODE-COMMUNITY-LIST:END -->",
    placement=Placement.APPEND,
)


def replace_region(content: str, region: Region, body: str) -> str:
    """Replace (or insert) `region` in `content` with freshly generated `body`.

    - No markers at all: the wrapped region is inserted at the region's
      default placement.
    - Both markers, end after start: everything from the first start
      marker through the first end marker is replaced.
    - Anything else (a lone marker, or end before start) leaves the
      content untouched.
    """
    block = region.wrap(body)
    start = content.find(region.start)
    end = content.find(region.end)

    if start == -1 and end == -1:
        if region.placement is Placement.PREPEND:
            return f"{block}\n{content}"
        return f"{content}\n{block}"

    if start >= 0 and end > start:
        return content[:start] + block + content[end + len(region.end):]

    logger.warning(
        "Skipping %s region: markers are incomplete or out of order "
        "(start=%d, end=%d)",
        region.name,
        start,
        end,
    )
    return content
