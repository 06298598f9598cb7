"""Data models for word list concordances."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


SCHEMA_VERSION = 1


class Scope(str, Enum):
    """Granularity at which a concordance is computed."""

    BOOK = "Book"
    CHAPTER = "Chapter"
    VERSE = "Verse"

    @classmethod
    def parse(cls, value: "str | Scope") -> "Scope":
        """
        Parse a scope name case-insensitively.

        Args:
            value: Scope name ("book", "Chapter", ...) or Scope member

        Returns:
            Matching Scope member

        Raises:
            ValueError: If the name is not a known scope
        """
        if isinstance(value, cls):
            return value

        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member

        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown scope {value!r} (expected one of: {choices})")


@dataclass(frozen=True)
class ScriptureReference:
    """
    A (book, chapter, verse) location.

    All three numbers are 1-based. Equality is structural.
    """

    book_num: int
    chapter_num: int
    verse_num: int

    def __post_init__(self) -> None:
        for name in ("book_num", "chapter_num", "verse_num"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be an integer >= 1, got {value!r}")

    @classmethod
    def default(cls) -> "ScriptureReference":
        """Reference point used when the caller supplies none (1:1:1)."""
        return cls(book_num=1, chapter_num=1, verse_num=1)

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for JSON serialization."""
        return {
            "book_num": self.book_num,
            "chapter_num": self.chapter_num,
            "verse_num": self.verse_num,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScriptureReference":
        return cls(
            book_num=int(data["book_num"]),
            chapter_num=int(data["chapter_num"]),
            verse_num=int(data["verse_num"]),
        )

    def __str__(self) -> str:
        return f"{self.book_num}:{self.chapter_num}:{self.verse_num}"


@dataclass(frozen=True)
class ConcordanceEntry:
    """
    Every location and snippet recorded for one lowercased word.

    ``snippets[i]`` is the context extracted for the occurrence recorded
    at ``locations[i]``.
    """

    word: str
    locations: tuple[ScriptureReference, ...]
    snippets: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.locations) != len(self.snippets):
            raise ValueError(
                f"Entry {self.word!r} has {len(self.locations)} locations "
                f"but {len(self.snippets)} snippets"
            )

    @property
    def count(self) -> int:
        """Number of recorded occurrences."""
        return len(self.locations)

    def occurrences(self) -> Iterator[tuple[ScriptureReference, str]]:
        """Iterate (location, snippet) pairs in recording order."""
        return zip(self.locations, self.snippets)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "word": self.word,
            "locations": [ref.to_dict() for ref in self.locations],
            "snippets": list(self.snippets),
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConcordanceEntry":
        return cls(
            word=data["word"],
            locations=tuple(ScriptureReference.from_dict(r) for r in data["locations"]),
            snippets=tuple(data["snippets"]),
        )


@dataclass(frozen=True)
class Concordance:
    """
    Ordered collection of entries, in first-appearance order of each word.

    Built once per run and never mutated afterwards; ``filter`` returns
    a new instance.
    """

    entries: tuple[ConcordanceEntry, ...]
    scope: Scope = Scope.BOOK
    reference: ScriptureReference = field(default_factory=ScriptureReference.default)
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for position, entry in enumerate(self.entries):
            if entry.word in index:
                raise ValueError(f"Duplicate concordance entry for word {entry.word!r}")
            index[entry.word] = position
        object.__setattr__(self, "_index", index)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ConcordanceEntry]:
        return iter(self.entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._index

    @property
    def words(self) -> list[str]:
        """Distinct words in first-appearance order."""
        return [entry.word for entry in self.entries]

    @property
    def total_occurrences(self) -> int:
        return sum(entry.count for entry in self.entries)

    def get(self, word: str) -> ConcordanceEntry | None:
        """Look up the entry for a word (case-insensitive)."""
        position = self._index.get(word.lower())
        return None if position is None else self.entries[position]

    def filter(self, substring: str) -> "Concordance":
        """
        Keep entries whose word contains ``substring`` (case-insensitive).

        An empty filter keeps every entry.
        """
        needle = substring.lower()
        if not needle:
            return self

        return Concordance(
            entries=tuple(e for e in self.entries if needle in e.word.lower()),
            scope=self.scope,
            reference=self.reference,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "version": SCHEMA_VERSION,
            "scope": self.scope.value,
            "reference": self.reference.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Concordance":
        return cls(
            entries=tuple(ConcordanceEntry.from_dict(e) for e in data.get("entries", [])),
            scope=Scope.parse(data.get("scope", Scope.BOOK)),
            reference=ScriptureReference.from_dict(data["reference"])
            if "reference" in data
            else ScriptureReference.default(),
        )
