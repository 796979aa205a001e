"""Tests for the contributor data models."""

from __future__ import annotations

import json

from codecommunity.models import ContributionKind, Contributor, ContributorRC


class TestContributor:
    def test_duplicate_contributions_collapsed(self):
        c = Contributor(login="alice", contributions=["code", "bug", "code", "bug"])
        assert c.contributions == ["code", "bug"]

    def test_unknown_tags_are_kept(self):
        c = Contributor(login="alice", contributions=["code", "design"])
        assert c.contributions == ["code", "design"]

    def test_missing_from(self):
        incoming = Contributor(login="alice", contributions=["a", "b"])
        existing = Contributor(login="alice", contributions=["b", "c"])
        assert incoming.missing_from(existing) == ["a"]

    def test_vocabulary(self):
        assert set(ContributionKind.values()) == {
            "bug", "code", "documentation", "tests", "enhancement", "content",
        }


class TestContributorRC:
    def test_default_is_empty(self):
        rc = ContributorRC()
        assert rc.contributors == []
        assert rc.count == 0

    def test_find(self, sample_rc: ContributorRC):
        assert sample_rc.find("bob").login == "bob"
        assert sample_rc.find("carol") is None

    def test_parse_document(self):
        rc = ContributorRC.model_validate({
            "contributors": [
                {"login": "alice", "avatar_url": "u", "contributions": ["code"]},
            ],
        })
        assert rc.count == 1
        assert rc.contributors[0].avatar_url == "u"

    def test_extra_keys_survive_round_trip(self):
        rc = ContributorRC.model_validate({
            "projectName": "widgets",
            "contributors": [
                {
                    "login": "alice",
                    "name": "Alice Liddell",
                    "profile": "https://alice.dev",
                    "avatar_url": "u",
                    "contributions": ["code"],
                },
            ],
        })
        data = json.loads(rc.to_json())
        assert data["projectName"] == "widgets"
        record = data["contributors"][0]
        assert record["name"] == "Alice Liddell"
        assert record["profile"] == "https://alice.dev"

    def test_null_fields_fall_back_to_defaults(self):
        rc = ContributorRC.model_validate({
            "contributors": [
                {"login": "bob", "avatar_url": None, "contributions": None},
                {"login": "carol"},
            ],
        })
        assert [c.login for c in rc.contributors] == ["bob", "carol"]
        assert rc.find("bob").avatar_url == ""
        assert rc.find("bob").contributions == []
        assert rc.find("carol").contributions == []

    def test_odd_tags_are_coerced(self):
        c = Contributor.model_validate(
            {"login": 42, "avatar_url": 7, "contributions": ["code", 3, None, {"x": 1}, "code"]}
        )
        assert c.login == "42"
        assert c.avatar_url == "7"
        assert c.contributions == ["code", "3"]

    def test_single_tag_string_becomes_list(self):
        c = Contributor.model_validate({"login": "alice", "contributions": "code"})
        assert c.contributions == ["code"]

    def test_records_without_login_are_dropped(self, caplog):
        rc = ContributorRC.model_validate({
            "contributors": [
                {"avatar_url": "u", "contributions": ["code"]},
                {"login": "", "contributions": ["bug"]},
                "alice",
                {"login": "bob", "contributions": ["bug"]},
            ],
        })
        assert [c.login for c in rc.contributors] == ["bob"]
        assert "without a login" in caplog.text

    def test_null_contributors_is_empty(self):
        assert ContributorRC.model_validate({"contributors": None}).contributors == []

    def test_to_json_shape(self, sample_rc: ContributorRC):
        data = json.loads(sample_rc.to_json())
        assert [c["login"] for c in data["contributors"]] == ["alice", "bob"]
        assert set(data["contributors"][0]) == {"login", "avatar_url", "contributions"}
