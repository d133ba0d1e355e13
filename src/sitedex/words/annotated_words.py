"""Split text buffers into annotated, punctuation-stripped words."""

from __future__ import annotations

import re

from sitedex.models import AnnotatedWord
from sitedex.words.punctuation import surrounding_punctuation_bounds

_TOKEN_RE = re.compile(r"\S+")


def annotated_words_from_string(
    text: str,
    *,
    base_offset: int = 0,
    annotations: tuple[str, ...] = (),
) -> list[AnnotatedWord]:
    """Tokenize on whitespace, keeping order and character offsets.

    ``base_offset`` shifts every offset so callers that extract several
    text runs from one document (HTML nodes, subtitles) keep offsets
    relative to the whole extracted text.
    """

    words: list[AnnotatedWord] = []
    for match in _TOKEN_RE.finditer(text):
        token = match.group(0)
        start, end = surrounding_punctuation_bounds(token)
        if start == end:
            continue
        words.append(
            AnnotatedWord(
                text=token[start:end],
                character_offset=base_offset + match.start() + start,
                annotations=annotations,
            )
        )
    return words
