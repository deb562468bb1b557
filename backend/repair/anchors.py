"""Anchor lookup for splicing new text into shader source."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnchorSplit:
    before: str
    anchor: str
    after: str


def split_at_anchor(text: str, chain: tuple[str, ...]) -> AnchorSplit | None:
    """Split *text* around the first anchor in *chain* that occurs in it.

    Anchors are tried in order; the split is made at the first occurrence
    of the winning anchor even if it appears several times.
    Returns None when no anchor of the chain is present.
    """
    for anchor in chain:
        idx = text.find(anchor)
        if idx != -1:
            end = idx + len(anchor)
            return AnchorSplit(text[:idx], anchor, text[end:])
    return None


def insert_after(text: str, anchor: str, addition: str) -> str | None:
    """Insert *addition* right after the first occurrence of *anchor*."""
    split = split_at_anchor(text, (anchor,))
    if split is None:
        return None
    return split.before + split.anchor + addition + split.after
