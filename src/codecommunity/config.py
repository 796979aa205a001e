"""Run configuration for code-community."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from codecommunity.exceptions import ConfigError
from codecommunity.models import ContributorRC

RC_FILE = ".code-communityrc"
DEFAULT_FILES = ["README.md"]
DEFAULT_API_URL = "https://api.github.com"


class ActionConfig(BaseModel):
    """Everything one run needs to know about the target repository."""

    github_token: str = ""
    repository: str = ""  # "owner/repo"
    files: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES))
    contributors_per_row: int = Field(default=7, ge=1)
    rc_path: str = RC_FILE
    api_url: str = DEFAULT_API_URL
    branch: str | None = None

    @field_validator("files")
    @classmethod
    def _clean_files(cls, value: list[str]) -> list[str]:
        cleaned = [f.strip() for f in value if f.strip()]
        return cleaned or list(DEFAULT_FILES)

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, value: str) -> str:
        value = value.strip()
        if not value:
            return value
        owner, _, name = value.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(f"repository must look like 'owner/repo', got '{value}'")
        return value

    @property
    def owner(self) -> str:
        return self.repository.split("/", 1)[0] if self.repository else ""

    @property
    def repo(self) -> str:
        return self.repository.split("/", 1)[1] if self.repository else ""

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, **overrides: object
    ) -> ActionConfig:
        """Build a config from GitHub Actions inputs and workflow variables.

        Keyword overrides that are not None take precedence over the
        environment (used for CLI flags).
        """
        env = os.environ if env is None else env
        data: dict[str, object] = {}

        token = (
            env.get("INPUT_GITHUBTOKEN")
            or env.get("GITHUB_TOKEN")
            or env.get("GH_TOKEN")
            or ""
        )
        data["github_token"] = token.strip()

        if env.get("GITHUB_REPOSITORY"):
            data["repository"] = env["GITHUB_REPOSITORY"]
        if env.get("GITHUB_API_URL"):
            data["api_url"] = env["GITHUB_API_URL"]

        files = env.get("INPUT_FILES", "")
        if files.strip():
            data["files"] = files.split(",")

        per_row = env.get("INPUT_CONTRIBUTORSPERROW", "").strip()
        if per_row:
            data["contributors_per_row"] = per_row

        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def require_remote(self) -> None:
        """Make sure the settings needed to talk to GitHub are present."""
        if not self.repository:
            raise ConfigError(
                "No repository configured. Set GITHUB_REPOSITORY or pass --repo owner/repo."
            )
        if not self.github_token:
            raise ConfigError(
                "No GitHub token found. Set INPUT_GITHUBTOKEN or GITHUB_TOKEN."
            )


def load_local_rc(path: Path) -> ContributorRC:
    """Load a .code-communityrc from disk, or an empty one if it doesn't exist."""
    if not path.exists():
        return ContributorRC()
    try:
        return ContributorRC.model_validate(json.loads(path.read_text()))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Could not read {path}: {e}") from e


def save_local_rc(path: Path, rc: ContributorRC) -> None:
    """Write a .code-communityrc to disk."""
    path.write_text(rc.to_json())
