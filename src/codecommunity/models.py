"""Data models for contributors and the persisted .code-communityrc document."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger("codecommunity.models")


class ContributionKind(str, Enum):
    """Contribution tags that render an icon in the contributor table."""

    BUG = "bug"
    CODE = "code"
    DOCUMENTATION = "documentation"
    TESTS = "tests"
    ENHANCEMENT = "enhancement"
    CONTENT = "content"

    @classmethod
    def values(cls) -> list[str]:
        return [kind.value for kind in cls]


class Contributor(BaseModel):
    """A single contributor record, keyed by GitHub login.

    Parsing is lenient so hand-edited records survive a load/save
    round-trip: null fields fall back to their defaults, scalars become
    strings, and keys other tools wrote are kept.
    """

    model_config = ConfigDict(extra="allow")

    login: str
    avatar_url: str = ""
    contributions: list[str] = Field(default_factory=list)

    @field_validator("login", mode="before")
    @classmethod
    def _coerce_login(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("avatar_url", mode="before")
    @classmethod
    def _coerce_avatar_url(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("contributions", mode="before")
    @classmethod
    def _coerce_contributions(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, (str, int, float)):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        tags = [str(tag) for tag in value if isinstance(tag, (str, int, float))]
        # First-seen order wins
        return list(dict.fromkeys(tags))

    def missing_from(self, other: Contributor) -> list[str]:
        """Tags this record carries that `other` does not, in this record's order."""
        return [c for c in self.contributions if c not in other.contributions]


def _has_login(record: dict) -> bool:
    login = record.get("login")
    return isinstance(login, (str, int, float)) and str(login) != ""


class ContributorRC(BaseModel):
    """The repository configuration stored in .code-communityrc.

    Unknown top-level keys are kept so that a round-trip through this
    model does not drop settings written by other tools.
    """

    model_config = ConfigDict(extra="allow")

    contributors: list[Contributor] = Field(default_factory=list)

    @field_validator("contributors", mode="before")
    @classmethod
    def _drop_unkeyed_records(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        kept = []
        for record in value:
            if isinstance(record, Contributor):
                kept.append(record)
            elif isinstance(record, dict) and _has_login(record):
                kept.append(record)
            else:
                logger.warning("Ignoring contributor record without a login: %r", record)
        return kept

    def find(self, login: str) -> Contributor | None:
        for contributor in self.contributors:
            if contributor.login == login:
                return contributor
        return None

    @property
    def count(self) -> int:
        return len(self.contributors)

    def to_json(self) -> str:
        """Serialized form written back to the repository."""
        return json.dumps(self.model_dump(), indent=2) + "\n"


class TrackedFile(BaseModel):
    """In-memory copy of a markdown document that may be rewritten and committed."""

    path: str
    content: str
