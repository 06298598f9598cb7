"""Word list concordance engine for marked-up Scripture text."""

from wordlist.concordance.builder import ConcordanceBuilder, build_concordance
from wordlist.concordance.snippet import extract_snippet
from wordlist.models import Concordance, ConcordanceEntry, Scope, ScriptureReference


__version__ = "0.1.0"

__all__ = [
    "Concordance",
    "ConcordanceBuilder",
    "ConcordanceEntry",
    "Scope",
    "ScriptureReference",
    "build_concordance",
    "extract_snippet",
]
