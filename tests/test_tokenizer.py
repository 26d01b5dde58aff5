"""Tests for the whitespace tokenizer."""

from wordtally._tokenizer import tokenize


def test_reference_sentence():
    """Edge punctuation goes, interior apostrophes stay."""
    assert tokenize("Hello, world! Don't stop.") == ["hello", "world", "don't", "stop"]


def test_empty():
    """Empty or whitespace-only input yields no tokens."""
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_punctuation_only_pieces_dropped():
    """Pieces with no letters or digits disappear entirely."""
    assert tokenize("-- ... !!! word ?") == ["word"]


def test_interior_punctuation_kept():
    """Only the edges are trimmed."""
    assert tokenize("'well-known' (e.g.) \"rock'n'roll\"") == [
        "well-known", "e.g", "rock'n'roll",
    ]


def test_lowercase():
    """Tokens are lowercased."""
    assert tokenize("CORTEX Cortex cortex") == ["cortex", "cortex", "cortex"]


def test_order_preserved():
    """Token order follows the input."""
    assert tokenize("b a c a") == ["b", "a", "c", "a"]


def test_digits_are_alphanumeric():
    """Digits are kept at the edges."""
    assert tokenize("(2024) 3.14,") == ["2024", "3.14"]


def test_unicode_letters():
    """Accented Latin letters are kept, guillemets and dashes trimmed."""
    assert tokenize("«Café» naïve—") == ["café", "naïve"]


def test_combining_vowel_signs_kept():
    """Trailing Devanagari and Thai vowel signs belong to the word."""
    assert tokenize("हिंदी नमस्ते") == ["हिंदी", "नमस्ते"]
    assert tokenize("(ดี)") == ["ดี"]


def test_non_latin_numerals():
    """Numeric characters from other scripts count as alphanumeric."""
    assert tokenize("«٣٤» Ⅻ.") == ["٣٤", "ⅻ"]


def test_whitespace_runs():
    """Any run of whitespace separates tokens."""
    assert tokenize("one\n\ntwo\t\tthree   four") == ["one", "two", "three", "four"]
