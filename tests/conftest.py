"""Pytest fixtures for word list tests."""

import tempfile
from pathlib import Path

import pytest

from wordlist.models import ScriptureReference


SAMPLE_BOOK = (
    "\\id GEN Sample text\n"
    "\\h Genesis\n"
    "\\mt1 Genesis\n"
    "\\c 1\n"
    "\\p\n"
    "\\v 1 In the beginning God created the heavens and the earth.\n"
    "\\v 2 The earth was formless and empty.\n"
    "\\c 2\n"
    "\\p\n"
    "\\v 1 Thus the heavens and the earth were finished.\n"
    "\\v 2 On the seventh day God rested.\n"
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_book_text():
    """Two chapters of marked-up text with front matter."""
    return SAMPLE_BOOK


@pytest.fixture
def sample_verse_text():
    """A verse with a repeated word."""
    return "the cat sat on the mat near the door"


@pytest.fixture
def reference():
    """Reference point at the start of book 1."""
    return ScriptureReference(book_num=1, chapter_num=1, verse_num=1)


@pytest.fixture
def schema_dir():
    """Path to schemas directory."""
    return Path(__file__).parent.parent / "etc" / "schemas"
