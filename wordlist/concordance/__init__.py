"""Concordance building: scope filtering, reference tracking, snippets."""

from wordlist.concordance.builder import ConcordanceBuilder, build_concordance


__all__ = ['ConcordanceBuilder', 'build_concordance']
