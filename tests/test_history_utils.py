"""Tests for the recent-password history."""

from __future__ import annotations

import pytest

from core.history_utils import PasswordHistory


class TestAdd:
    def test_most_recent_first(self):
        h = PasswordHistory()
        h.add("one")
        h.add("two")
        assert h.items() == ("two", "one")

    def test_duplicate_is_noop(self):
        h = PasswordHistory()
        assert h.add("same")
        h.add("other")
        assert not h.add("same")
        assert h.items() == ("other", "same")

    def test_capacity_drops_oldest(self):
        h = PasswordHistory(capacity=10)
        for i in range(11):
            h.add(f"pw{i}")
        assert len(h) == 10
        assert h.items()[0] == "pw10"
        assert "pw0" not in h
        assert h.items()[-1] == "pw1"

    def test_bad_capacity(self):
        with pytest.raises(ValueError):
            PasswordHistory(capacity=0)


class TestRemove:
    def test_remove_at(self):
        h = PasswordHistory()
        for pw in ("a", "b", "c"):
            h.add(pw)
        h.remove_at(1)
        assert h.items() == ("c", "a")

    @pytest.mark.parametrize("index", [3, 100, -1])
    def test_out_of_range_is_ignored(self, index):
        h = PasswordHistory()
        for pw in ("a", "b", "c"):
            h.add(pw)
        h.remove_at(index)
        assert h.items() == ("c", "b", "a")

    def test_removed_password_can_be_added_again(self):
        h = PasswordHistory()
        h.add("x")
        h.remove_at(0)
        assert h.add("x")
        assert list(h) == ["x"]

    def test_clear(self):
        h = PasswordHistory()
        h.add("x")
        h.clear()
        assert len(h) == 0
