"""Per-stem container assembly with occurrence provenance."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from sitedex.index.stems import stem_word
from sitedex.models import Container, NormalizedEntry, Occurrence


def build_containers(
    entries: Sequence[NormalizedEntry],
    stems: Mapping[str, frozenset[str]],
) -> dict[str, Container]:
    """Group every word occurrence under the container of its stem.

    Title words come first for each entry and are flagged ``in_title``;
    their ``word_index`` points into ``entry.title_words``. ``stems`` must
    be the table built from the same ``entries``; a word whose stem is
    missing from it raises ``KeyError``.
    """

    containers: dict[str, Container] = {}
    for entry_index, entry in enumerate(entries):
        for in_title, words in ((True, entry.title_words), (False, entry.words)):
            for word_index, word in enumerate(words):
                stem = stem_word(word.surface_form, entry.stemming)
                container = containers.get(stem)
                if container is None:
                    container = Container(stem=stem, surface_forms=tuple(sorted(stems[stem])))
                    containers[stem] = container
                container.occurrences.append(
                    Occurrence(
                        entry_index=entry_index,
                        word_index=word_index,
                        character_offset=word.character_offset,
                        annotations=word.annotations,
                        in_title=in_title,
                    )
                )
    return containers


def build_prefix_table(containers: Iterable[Container], minimum_length: int) -> dict[str, tuple[str, ...]]:
    """Map each prefix of at least ``minimum_length`` chars to matching stems.

    Prefixes are taken from the words as written (``surface_forms``) and
    from the stem itself, so a partly typed word longer than its stem
    still resolves.
    """

    table: dict[str, set[str]] = {}
    for container in containers:
        for word in {container.stem, *container.surface_forms}:
            for end in range(minimum_length, len(word) + 1):
                table.setdefault(word[:end], set()).add(container.stem)
    return {prefix: tuple(sorted(table[prefix])) for prefix in sorted(table)}
