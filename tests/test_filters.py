"""Tests for the filtering logic."""

from issue_report.filters import (
    first_matching_label,
    parse_repo_url,
    reaction_total,
    unique_sorted,
)
from issue_report.types import RepoRef

LABELS = ("focus-area-proposal", "investigation-effort-proposal")


class TestParseRepoUrl:
    def test_valid_repository(self):
        ref = parse_repo_url("https://github.com/acme/widgets")
        assert ref == RepoRef(owner="acme", name="widgets")
        assert ref.full_name == "acme/widgets"

    def test_trailing_and_double_slashes_are_ignored(self):
        assert parse_repo_url("https://github.com//acme/widgets/") == RepoRef("acme", "widgets")

    def test_other_host(self):
        assert parse_repo_url("https://gitlab.com/acme/widgets") is None

    def test_subdomain_is_not_github(self):
        assert parse_repo_url("https://www.github.com/acme/widgets") is None

    def test_owner_only(self):
        assert parse_repo_url("https://github.com/acme") is None

    def test_too_many_segments(self):
        assert parse_repo_url("https://github.com/acme/widgets/issues") is None

    def test_not_a_url(self):
        assert parse_repo_url("acme/widgets") is None


class TestFirstMatchingLabel:
    def test_first_match_in_label_order(self):
        issue = {"labels": [
            {"name": "bug"},
            {"name": "focus-area-proposal"},
            {"name": "investigation-effort-proposal"},
        ]}
        assert first_matching_label(issue, LABELS) == "focus-area-proposal"

    def test_label_order_wins_over_filter_order(self):
        issue = {"labels": [
            {"name": "investigation-effort-proposal"},
            {"name": "focus-area-proposal"},
        ]}
        assert first_matching_label(issue, LABELS) == "investigation-effort-proposal"

    def test_no_matching_label(self):
        issue = {"labels": [{"name": "bug"}, {"name": "enhancement"}]}
        assert first_matching_label(issue, LABELS) is None

    def test_no_labels(self):
        assert first_matching_label({"labels": []}, LABELS) is None
        assert first_matching_label({}, LABELS) is None

    def test_string_labels(self):
        assert first_matching_label({"labels": ["bug", "focus-area-proposal"]}, LABELS) == "focus-area-proposal"


def test_unique_sorted_collapses_duplicates():
    urls = ["https://github.com/b/x", "https://github.com/a/x", "https://github.com/b/x"]
    assert unique_sorted(urls) == ["https://github.com/a/x", "https://github.com/b/x"]


def test_reaction_total_defaults_to_zero():
    assert reaction_total({"reactions": {"total_count": 7}}) == 7
    assert reaction_total({}) == 0
