"""Constants shared across Laddr."""


class Constants:
    """Project-wide constants."""

    # Lines starting with this are ignored in word list and exclusion files
    COMMENT_PREFIX = "#"

    # Wildcard marker in exclusion patterns
    WILDCARD = "*"

    # english-words sources used for the default corpus
    ENGLISH_WORDS_SOURCES = ("web2", "gcide")

    # Language passed to wordfreq
    WORDFREQ_LANG = "en"

    # Separator used when rendering a ladder
    PATH_SEPARATOR = " -> "
