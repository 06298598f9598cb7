"""Chapter and verse segmentation of marked-up Scripture text.

Chapters and verses are numbered by position: the Nth segment returned is
chapter (or verse) N, whatever numeral its marker carries. Markup that skips
or reorders numbers is therefore misnumbered without any error being raised.
"""

import re
from collections.abc import Iterator


# "\c 12 " and "\v 3 ": marker, one or more digits, a single separator
CHAPTER_MARKER = re.compile(r"\\c\s\d+\s")
VERSE_MARKER = re.compile(r"\\v\s\d+\s")


def _split_on_marker(text: str, marker: re.Pattern[str]) -> list[str]:
    # Whatever precedes the first marker is front matter and is dropped
    parts = marker.split(text)
    return parts[1:]


def segment_into_chapters(text: str) -> list[str]:
    """
    Split book text into chapter texts.

    Args:
        text: Raw marked-up book (or chapter) text

    Returns:
        Chapter texts in document order; index 0 is chapter 1
    """
    return _split_on_marker(text, CHAPTER_MARKER)


def segment_into_verses(chapter_text: str) -> list[str]:
    """
    Split a chapter text into verse texts.

    Args:
        chapter_text: Text of a single chapter

    Returns:
        Verse texts in document order; index 0 is verse 1
    """
    return _split_on_marker(chapter_text, VERSE_MARKER)


def iter_chapters(text: str) -> Iterator[tuple[int, str]]:
    """Yield (chapter_num, chapter_text) pairs, numbered from 1."""
    yield from enumerate(segment_into_chapters(text), start=1)


def iter_verses(chapter_text: str) -> Iterator[tuple[int, str]]:
    """Yield (verse_num, verse_text) pairs, numbered from 1."""
    yield from enumerate(segment_into_verses(chapter_text), start=1)
