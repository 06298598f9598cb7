"""Location tracking for repeated words."""

from wordlist.models import ScriptureReference


def track_reference(
    locations: tuple[ScriptureReference, ...] | None,
    reference: ScriptureReference,
) -> tuple[tuple[ScriptureReference, ...], int]:
    """
    Record a new occurrence of a word.

    The occurrence index tells repeated words in one verse apart: the Kth
    time a word is seen at a location is its Kth match in that verse.

    Args:
        locations: Locations already recorded for the word (None if unseen)
        reference: Location of the new occurrence

    Returns:
        Tuple of (updated locations, 1-based occurrence index at reference)
    """
    previous = locations or ()
    occurrence = previous.count(reference) + 1
    return previous + (reference,), occurrence
