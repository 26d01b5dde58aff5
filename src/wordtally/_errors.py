"""Wordtally error types."""


class WordtallyError(Exception):
    """Base error for all wordtally failures."""


class WordtallyReadError(WordtallyError):
    """Input document could not be read."""
