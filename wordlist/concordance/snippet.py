"""Context snippet extraction around a single word occurrence."""

import re


# Characters of context on each side of the match before boundary expansion
DEFAULT_CONTEXT = 40


def word_pattern(word: str) -> re.Pattern[str]:
    """Case-insensitive whole-word pattern for ``word``."""
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE | re.ASCII)


def find_occurrence(text: str, word: str, occurrence: int = 1) -> re.Match[str] | None:
    """
    Find the Nth whole-word match of ``word`` in ``text``.

    Args:
        text: Text to scan
        word: Word to look for (case-insensitive)
        occurrence: 1-based ordinal of the wanted match

    Returns:
        The match, or None if there are fewer than ``occurrence`` matches
    """
    if occurrence < 1:
        return None

    for count, match in enumerate(word_pattern(word).finditer(text), start=1):
        if count == occurrence:
            return match
    return None


def _expand_window(text: str, start: int, end: int) -> tuple[int, int]:
    # Widen until the characters just outside the window are whitespace
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    while end < len(text) and not text[end].isspace():
        end += 1
    return start, end


def extract_snippet(
    verse_text: str,
    word: str,
    occurrence: int = 1,
    context: int = DEFAULT_CONTEXT,
) -> str:
    """
    Extract the context around one occurrence of a word, emphasizing it.

    The window spans ``context`` characters on each side of the match,
    clamped to the verse and widened so it never cuts a word in half.
    The matched text is uppercased; everything else keeps its casing.

    Args:
        verse_text: Full text of the verse
        word: Word to highlight
        occurrence: Which match of the word in the verse (1-based)
        context: Characters of context on each side

    Returns:
        The snippet, or "" if the verse has fewer than ``occurrence`` matches

    Raises:
        ValueError: If verse_text is empty
    """
    if not verse_text:
        raise ValueError("Cannot extract a snippet from empty verse text")

    match = find_occurrence(verse_text, word, occurrence)
    if match is None:
        return ""

    start, end = _expand_window(
        verse_text,
        max(0, match.start() - context),
        min(len(verse_text), match.end() + context),
    )

    return (
        verse_text[start : match.start()]
        + match.group(0).upper()
        + verse_text[match.end() : end]
    )
