"""Tabular exports of concordances."""
