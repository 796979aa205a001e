"""Tests for configuration management."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from codecommunity.config import (
    RC_FILE,
    ActionConfig,
    load_local_rc,
    save_local_rc,
)
from codecommunity.exceptions import ConfigError
from codecommunity.models import ContributorRC


class TestActionConfig:
    def test_defaults(self):
        config = ActionConfig()
        assert config.files == ["README.md"]
        assert config.contributors_per_row == 7
        assert config.rc_path == RC_FILE == ".code-communityrc"
        assert config.api_url == "https://api.github.com"
        assert config.branch is None

    def test_owner_and_repo(self):
        config = ActionConfig(repository="acme/widgets")
        assert config.owner == "acme"
        assert config.repo == "widgets"

    def test_bad_repository(self):
        with pytest.raises(ValueError):
            ActionConfig(repository="no-slash")

    @pytest.mark.parametrize("repository", ["acme/", "/widgets", "/", "acme/widgets/extra"])
    def test_repository_needs_owner_and_name(self, repository: str):
        with pytest.raises(ValueError):
            ActionConfig(repository=repository)

    def test_trailing_slash_from_env(self):
        with pytest.raises(ConfigError):
            ActionConfig.from_env({"GITHUB_REPOSITORY": "acme/"})

    def test_from_env_action_inputs(self):
        env = {
            "INPUT_GITHUBTOKEN": "abc",
            "INPUT_FILES": "README.md, docs/CONTRIBUTORS.md",
            "INPUT_CONTRIBUTORSPERROW": "4",
            "GITHUB_REPOSITORY": "acme/widgets",
        }
        config = ActionConfig.from_env(env)
        assert config.github_token == "abc"
        assert config.files == ["README.md", "docs/CONTRIBUTORS.md"]
        assert config.contributors_per_row == 4
        assert config.repository == "acme/widgets"

    def test_from_env_empty_inputs_use_defaults(self):
        env = {"INPUT_FILES": "", "INPUT_CONTRIBUTORSPERROW": ""}
        config = ActionConfig.from_env(env)
        assert config.files == ["README.md"]
        assert config.contributors_per_row == 7

    def test_token_fallbacks(self):
        assert ActionConfig.from_env({"GITHUB_TOKEN": "g"}).github_token == "g"
        assert ActionConfig.from_env({"GH_TOKEN": "h"}).github_token == "h"
        assert ActionConfig.from_env({}).github_token == ""

    def test_overrides_win(self):
        env = {"GITHUB_REPOSITORY": "acme/widgets", "INPUT_CONTRIBUTORSPERROW": "4"}
        config = ActionConfig.from_env(
            env, repository="other/thing", contributors_per_row=2, files=None
        )
        assert config.repository == "other/thing"
        assert config.contributors_per_row == 2
        assert config.files == ["README.md"]

    def test_invalid_per_row(self):
        with pytest.raises(ConfigError):
            ActionConfig.from_env({"INPUT_CONTRIBUTORSPERROW": "0"})
        with pytest.raises(ConfigError):
            ActionConfig.from_env({"INPUT_CONTRIBUTORSPERROW": "seven"})

    def test_require_remote(self):
        with pytest.raises(ConfigError):
            ActionConfig(github_token="t").require_remote()
        with pytest.raises(ConfigError):
            ActionConfig(repository="acme/widgets").require_remote()
        ActionConfig(repository="acme/widgets", github_token="t").require_remote()


class TestLocalRC:
    def test_missing_file_is_empty(self, tmp_path: Path):
        rc = load_local_rc(tmp_path / RC_FILE)
        assert rc.contributors == []

    def test_save_and_load(self, tmp_path: Path, sample_rc: ContributorRC):
        path = tmp_path / RC_FILE
        save_local_rc(path, sample_rc)
        loaded = load_local_rc(path)
        assert [c.login for c in loaded.contributors] == ["alice", "bob"]
        assert json.loads(path.read_text())["contributors"][1]["contributions"] == [
            "bug", "documentation",
        ]

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / RC_FILE
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            load_local_rc(path)
