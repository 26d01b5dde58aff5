"""Whitespace tokenizer with edge-trimming and lowercase normalization."""

from __future__ import annotations

import regex

# Alphabetic covers combining vowel signs (Devanagari, Thai, ...) that
# str.isalnum() rejects.
_EDGE_RE = regex.compile(r"\A[^\p{Alphabetic}\p{N}]+|[^\p{Alphabetic}\p{N}]+\Z")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Pieces are separated by runs of whitespace. Characters that are neither
    alphabetic nor numeric are trimmed from both ends of each piece
    (interior punctuation such as the apostrophe in "don't" is kept) and
    pieces that end up empty are dropped. Token order follows the input.
    """
    tokens: list[str] = []
    for piece in text.split():
        word = _EDGE_RE.sub("", piece).lower()
        if word:
            tokens.append(word)
    return tokens
