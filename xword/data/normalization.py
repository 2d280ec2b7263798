"""Shared helpers for grapheme segmentation and word normalization."""

from __future__ import annotations

from typing import List, Optional

import regex

from ..core.constants import Alphabet

GRAPHEME_RE = regex.compile(r"\X")


def split_graphemes(text: str) -> List[str]:
    """Split ``text`` into extended grapheme clusters."""

    return GRAPHEME_RE.findall(text)


def is_single_codepoint(cluster: str) -> bool:
    return len(cluster) == 1


def normalize_word(text: str, alphabet: Alphabet = Alphabet.ASCII) -> Optional[str]:
    """Return the uppercase form of ``text`` or ``None`` if it is unsupported.

    ASCII words are uppercased with ASCII rules only. Unicode words are
    accepted when every grapheme cluster of the uppercased form is a single
    codepoint, which keeps word lengths comparable with grid slot lengths.
    """

    if alphabet == Alphabet.ASCII:
        if not text.isascii():
            return None
        return text.upper()

    upper = text.upper()
    if not all(is_single_codepoint(cluster) for cluster in split_graphemes(upper)):
        return None
    return upper


__all__ = ["GRAPHEME_RE", "is_single_codepoint", "normalize_word", "split_graphemes"]
