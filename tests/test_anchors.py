"""Tests for anchor lookup and splicing."""

from repair.anchors import AnchorSplit, insert_after, split_at_anchor


class TestSplitAtAnchor:
    def test_first_anchor_in_chain_wins(self):
        split = split_at_anchor("a X b Y c", ("Y", "X"))
        assert split == AnchorSplit("a X b ", "Y", " c")

    def test_falls_back_to_next_anchor(self):
        split = split_at_anchor("a X b", ("Z", "X"))
        assert split.anchor == "X"
        assert split.before == "a "
        assert split.after == " b"

    def test_no_anchor_returns_none(self):
        assert split_at_anchor("nothing here", ("X", "Y")) is None

    def test_repeated_anchor_splits_at_first_occurrence(self):
        split = split_at_anchor("X1X2X3", ("X",))
        assert split.before == ""
        assert split.after == "1X2X3"

    def test_parts_rebuild_input(self):
        text = "precision mediump float;\nvarying vec2 fragCoord;\nvoid main(){}"
        split = split_at_anchor(text, ("varying vec2 fragCoord;",))
        assert split.before + split.anchor + split.after == text


class TestInsertAfter:
    def test_inserts_after_first_occurrence_only(self):
        assert insert_after("aXbXc", "X", "!") == "aX!bXc"

    def test_missing_anchor(self):
        assert insert_after("abc", "X", "!") is None
