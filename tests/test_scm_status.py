"""Tests for the ScmStatus change aggregate."""

import pytest

from scm_prompt.models.status import GitStatus, ScmStatus


class TestScmStatusChanged:
    """Test the changed flag."""

    def test_no_changes(self):
        assert ScmStatus().changed is False

    @pytest.mark.parametrize(
        "category", ["untracked", "added", "moved", "modified", "deleted", "unmerged", "conflicted"]
    )
    def test_single_category_changed(self, category):
        status = ScmStatus(**{category: 1})
        assert status.changed is True

    def test_formats_alone_do_not_count_as_changes(self):
        status = ScmStatus(formats={"Added": "Added: %d"})
        assert status.changed is False


class TestScmStatusString:
    """Test the compact summary string."""

    def test_unmerged(self):
        assert str(ScmStatus(unmerged=1)) == "x1"

    def test_unmerged_and_modified(self):
        assert str(ScmStatus(unmerged=1, modified=3)) == "~3 x1"

    def test_empty(self):
        assert str(ScmStatus()) == ""

    def test_format_override(self):
        status = ScmStatus(added=1, formats={"Added": "Added: %d"})
        assert str(status) == "Added: 1"

    def test_format_override_key_is_case_insensitive(self):
        status = ScmStatus(added=2, formats={"added": "A%d"})
        assert str(status) == "A2"

    def test_format_override_for_zero_category_is_suppressed(self):
        status = ScmStatus(modified=2, formats={"Added": "Added: %d"})
        assert str(status) == "~2"

    def test_override_mixed_with_defaults(self):
        status = ScmStatus(added=1, modified=2, deleted=3, formats={"Modified": "M%d"})
        assert str(status) == "+1 M2 -3"

    def test_all_categories_in_canonical_order(self):
        status = ScmStatus(
            untracked=1, added=2, modified=3, deleted=4, moved=5, unmerged=6, conflicted=7
        )
        assert str(status) == "?1 +2 ~3 -4 >5 x6 !7"

    def test_invalid_override_falls_back_to_symbol(self):
        status = ScmStatus(added=1, formats={"Added": "no placeholder"})
        assert str(status) == "+1"

    def test_negative_counters_are_omitted(self):
        assert str(ScmStatus(added=-1)) == ""


class TestScmStatusAdd:
    """Test counting porcelain status letters."""

    @pytest.mark.parametrize(
        "code,category",
        [
            ("A", "added"),
            ("M", "modified"),
            ("T", "modified"),
            ("D", "deleted"),
            ("R", "moved"),
            ("C", "added"),
            ("U", "unmerged"),
            ("?", "untracked"),
        ],
    )
    def test_known_codes(self, code, category):
        status = ScmStatus()
        status.add(code)
        assert getattr(status, category) == 1

    @pytest.mark.parametrize("code", [".", " ", "Z"])
    def test_unchanged_codes_are_ignored(self, code):
        status = ScmStatus()
        status.add(code)
        assert status.changed is False


class TestGitStatusBranchStatus:
    """Test upstream tracking summaries."""

    def test_no_upstream(self):
        assert GitStatus(head="main").branch_status() == ""

    def test_in_sync(self):
        assert GitStatus(head="main", upstream="origin/main").branch_status() == "≡"

    def test_ahead(self):
        status = GitStatus(head="main", upstream="origin/main", ahead=2)
        assert status.branch_status() == "↑2"

    def test_behind(self):
        status = GitStatus(head="main", upstream="origin/main", behind=3)
        assert status.branch_status() == "↓3"

    def test_diverged(self):
        status = GitStatus(head="main", upstream="origin/main", ahead=1, behind=4)
        assert status.branch_status() == "↑1 ↓4"

    def test_gone(self):
        status = GitStatus(head="main", upstream="origin/main", upstream_gone=True)
        assert status.branch_status() == "≢"

    def test_custom_icons(self):
        status = GitStatus(head="main", upstream="origin/main", ahead=1, behind=1)
        assert status.branch_status(ahead_icon="+", behind_icon="-") == "+1 -1"
