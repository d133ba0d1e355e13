"""Stem table construction over normalized entries."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

import snowballstemmer

from sitedex.config import NO_STEMMING
from sitedex.models import NormalizedEntry


@lru_cache(maxsize=None)
def _get_stemmer(language: str):
    return snowballstemmer.stemmer(language)


def stem_word(surface_form: str, language: str) -> str:
    """Reduce a lowercased word to its Snowball stem for ``language``."""

    if language == NO_STEMMING:
        return surface_form
    return _get_stemmer(language).stemWord(surface_form)


def build_stem_table(entries: Iterable[NormalizedEntry]) -> dict[str, frozenset[str]]:
    """Map every stem seen in ``entries`` to the surface forms reducing to it.

    Title words and body words share the table. The result only depends
    on the multiset of (word, language) pairs, so entry order never
    changes it; keys come back sorted.
    """

    forms: dict[str, set[str]] = {}
    for entry in entries:
        for word in (*entry.title_words, *entry.words):
            surface = word.surface_form
            forms.setdefault(stem_word(surface, entry.stemming), set()).add(surface)
    return {stem: frozenset(forms[stem]) for stem in sorted(forms)}
