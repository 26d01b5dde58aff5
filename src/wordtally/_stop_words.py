"""Hard-coded English stop words for the stopword filter."""

STOP_WORDS: frozenset[str] = frozenset({
    # Articles and conjunctions
    "a", "an", "and", "but", "if", "or", "then",
    # Prepositions
    "as", "at", "by", "for", "in", "into", "of", "on", "to", "with",
    # Be forms and modals
    "are", "be", "is", "was", "will",
    # Pronouns and determiners
    "it", "such", "that", "the", "their", "there", "these", "they", "this",
    # Negation
    "no", "not",
})
