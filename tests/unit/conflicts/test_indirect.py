"""Unit tests for the indirect-effect heuristic."""

import pytest

from expguard.conflicts.indirect import might_indirectly_affect, parent_selector


class TestParentSelector:
    """Tests for parent_selector."""

    def test_strips_last_token(self):
        """Test the last whitespace-delimited token is removed."""
        assert parent_selector(".card .title") == ".card"
        assert parent_selector("main  .card   .title") == "main .card"

    def test_single_token(self):
        """Test a single token has no parent."""
        assert parent_selector(".a") == ""


class TestMightIndirectlyAffect:
    """Tests for might_indirectly_affect."""

    @pytest.mark.parametrize("proposal,reserved", [
        (None, ".a"),
        (".a", None),
        ("", ".a"),
        (None, None),
    ])
    def test_missing_selector(self, proposal, reserved):
        """Test absent selectors never flag."""
        assert might_indirectly_affect(proposal, reserved) is False

    def test_global_scope(self):
        """Test document-wide proposals affect everything."""
        assert might_indirectly_affect("body", ".card .price") is True
        assert might_indirectly_affect("html", "#cart") is True
        assert might_indirectly_affect(":root", "h1") is True
        assert might_indirectly_affect("BODY.dark", "h1") is True

    def test_shared_parent(self):
        """Test siblings under the same parent flag."""
        assert might_indirectly_affect(".card .title", ".card .price") is True

    def test_ancestor_descendant(self):
        """Test substring containment flags, case-insensitively."""
        assert might_indirectly_affect(".Card", ".card .price") is True
        assert might_indirectly_affect("#hero .cta", "#hero") is True

    def test_unrelated(self):
        """Test unrelated selectors do not flag."""
        assert might_indirectly_affect(".a", ".b") is False
        assert might_indirectly_affect("#header .logo", "#footer .links") is False

    def test_global_reserved_does_not_flag_by_itself(self):
        """Test only the proposal's scope is checked for document-wide rules."""
        assert might_indirectly_affect(".a", "body .b") is False
