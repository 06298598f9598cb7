"""Concordance builder - assembles a word list from marked-up text."""

import logging

from wordlist.concordance.scope import should_process_chapter, should_process_verse
from wordlist.concordance.snippet import DEFAULT_CONTEXT, extract_snippet
from wordlist.concordance.tracker import track_reference
from wordlist.models import Concordance, ConcordanceEntry, Scope, ScriptureReference
from wordlist.normalize.segmentation import iter_chapters, iter_verses
from wordlist.normalize.tokenize import normalize_word, tokenize
from wordlist.utils.log import log_with_context


# word -> (locations, snippets); dict order is first-appearance order
Accumulator = dict[str, tuple[tuple[ScriptureReference, ...], tuple[str, ...]]]


class ConcordanceBuilder:
    """
    Builds a concordance from one book (or chapter) of marked-up text.

    Each call to ``build`` starts from an empty accumulator, so a builder
    can be reused and shared between threads.
    """

    def __init__(
        self,
        context: int = DEFAULT_CONTEXT,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize concordance builder.

        Args:
            context: Snippet context width on each side of a match
            logger: Logger instance
        """
        self.context = context
        self.logger = logger or logging.getLogger(__name__)

    def build(
        self,
        text: str,
        reference: ScriptureReference,
        scope: Scope | str = Scope.BOOK,
    ) -> Concordance:
        """
        Build the concordance for the part of ``text`` selected by ``scope``.

        Args:
            text: Raw marked-up text
            reference: Reference point; its book number labels every location
            scope: Book, Chapter or Verse

        Returns:
            Concordance with entries in first-appearance order
        """
        scope = Scope.parse(scope)
        accumulator: Accumulator = {}
        chapters_seen = 0

        for chapter_num, chapter_text in iter_chapters(text):
            if not should_process_chapter(scope, chapter_num, reference):
                continue

            chapters_seen += 1
            before = len(accumulator)
            for verse_num, verse_text in iter_verses(chapter_text):
                if not should_process_verse(scope, verse_num, reference):
                    continue

                location = ScriptureReference(reference.book_num, chapter_num, verse_num)
                accumulator = self._add_verse(accumulator, verse_text, location)

            self.logger.debug(
                f"Chapter {chapter_num}: {len(accumulator) - before} new words "
                f"({len(accumulator)} total)"
            )

        if chapters_seen == 0:
            self.logger.warning(f"No chapters in {scope.value} scope at {reference}")

        concordance = Concordance(
            entries=tuple(
                ConcordanceEntry(word=word, locations=locations, snippets=snippets)
                for word, (locations, snippets) in accumulator.items()
            ),
            scope=scope,
            reference=reference,
        )

        log_with_context(
            self.logger,
            "info",
            f"Built {scope.value} concordance at {reference}: "
            f"{len(concordance)} words, {concordance.total_occurrences} occurrences",
            scope=scope,
            reference=reference,
            words=len(concordance),
            occurrences=concordance.total_occurrences,
        )
        return concordance

    def _add_verse(
        self,
        accumulator: Accumulator,
        verse_text: str,
        location: ScriptureReference,
    ) -> Accumulator:
        """Record every token of one verse, left to right."""
        for token in tokenize(verse_text):
            word = normalize_word(token)
            locations, snippets = accumulator.get(word, ((), ()))

            locations, occurrence = track_reference(locations, location)
            snippet = extract_snippet(verse_text, word, occurrence, self.context)
            if not snippet:
                self.logger.debug(f"No snippet for {word!r} occurrence {occurrence} at {location}")

            accumulator[word] = (locations, snippets + (snippet,))

        return accumulator


def build_concordance(
    text: str,
    reference: ScriptureReference | None = None,
    scope: Scope | str = Scope.BOOK,
    logger: logging.Logger | None = None,
) -> Concordance:
    """
    Build a concordance with default settings.

    Args:
        text: Raw marked-up text
        reference: Reference point (default 1:1:1)
        scope: Book, Chapter or Verse
        logger: Optional logger

    Returns:
        Concordance
    """
    builder = ConcordanceBuilder(logger=logger)
    return builder.build(text, reference or ScriptureReference.default(), scope)
