"""Word tokenization for verse texts."""

import re


# Latin letters plus apostrophe and right single quote. Tokens directly
# preceded by the markup escape character are control words, not text.
WORD_PATTERN = re.compile(r"(?<!\\)\b[a-z'’]+\b", re.IGNORECASE | re.ASCII)


def tokenize(verse_text: str) -> list[str]:
    """
    Extract word tokens from a verse, skipping markup control words.

    Args:
        verse_text: Text of a single verse

    Returns:
        Tokens in original casing, left to right (may be empty)
    """
    return WORD_PATTERN.findall(verse_text)


def normalize_word(token: str) -> str:
    """Word identity used for aggregation."""
    return token.lower()
