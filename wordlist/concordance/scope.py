"""Scope predicates deciding which chapters and verses are processed."""

from wordlist.models import Scope, ScriptureReference


def should_process_chapter(
    scope: Scope,
    chapter_num: int,
    reference: ScriptureReference,
) -> bool:
    """Book scope keeps every chapter; narrower scopes keep the reference chapter."""
    if scope is Scope.BOOK:
        return True
    return chapter_num == reference.chapter_num


def should_process_verse(
    scope: Scope,
    verse_num: int,
    reference: ScriptureReference,
) -> bool:
    """Only verse scope restricts verses, to the reference verse."""
    if scope is Scope.VERSE:
        return verse_num == reference.verse_num
    return True
