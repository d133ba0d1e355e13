"""Boundary punctuation stripping for word tokens."""

from __future__ import annotations

import string

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def surrounding_punctuation_bounds(token: str) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of ``token`` without boundary punctuation.

    Only ASCII punctuation is considered; interior characters are never
    inspected. Empty and all-punctuation tokens yield an empty slice.
    """

    start = 0
    end = len(token)
    while start < end and token[start] in _ASCII_PUNCTUATION:
        start += 1
    while end > start and token[end - 1] in _ASCII_PUNCTUATION:
        end -= 1
    return start, end


def remove_surrounding_punctuation(token: str) -> str:
    start, end = surrounding_punctuation_bounds(token)
    return token[start:end]
