"""Data structures flowing through the index build pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from sitedex.config import TitleBoost
from sitedex.errors import DocumentError


@dataclass(frozen=True, slots=True)
class AnnotatedWord:
    """One punctuation-stripped word occurrence inside a document.

    Words belong to the ``NormalizedEntry`` that holds them; once indexed,
    the source document is ``Occurrence.entry_index``.
    """

    text: str
    character_offset: int
    annotations: tuple[str, ...] = ()

    @property
    def surface_form(self) -> str:
        return self.text.lower()


@dataclass(slots=True)
class NormalizedEntry:
    """A successfully normalized document, ready for stemming."""

    title: str
    url: str
    words: list[AnnotatedWord]
    fields: dict[str, str] = field(default_factory=dict)
    stemming: str = "english"
    title_words: list[AnnotatedWord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Entry:
    """Index-facing record for one document."""

    title: str
    url: str
    contents: str
    fields: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_normalized(cls, entry: NormalizedEntry) -> "Entry":
        return cls(
            title=entry.title,
            url=entry.url,
            contents=" ".join(word.text for word in entry.words),
            fields=dict(entry.fields),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "url": self.url, "contents": self.contents, "fields": dict(self.fields)}


@dataclass(frozen=True, slots=True)
class Occurrence:
    """Where a word mapping to a container's stem was found."""

    entry_index: int
    word_index: int
    character_offset: int
    annotations: tuple[str, ...] = ()
    in_title: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "entry_index": self.entry_index,
            "word_index": self.word_index,
            "character_offset": self.character_offset,
            "annotations": list(self.annotations),
            "in_title": self.in_title,
        }


@dataclass(slots=True)
class Container:
    """All corpus occurrences of one stem and its surface forms."""

    stem: str
    surface_forms: tuple[str, ...] = ()
    occurrences: list[Occurrence] = field(default_factory=list)

    def results_by_entry(self) -> dict[int, list[Occurrence]]:
        grouped: dict[int, list[Occurrence]] = {}
        for occurrence in self.occurrences:
            grouped.setdefault(occurrence.entry_index, []).append(occurrence)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        return {
            "stem": self.stem,
            "surface_forms": list(self.surface_forms),
            "occurrences": [occurrence.to_dict() for occurrence in self.occurrences],
        }


@dataclass(frozen=True, slots=True)
class PassthroughConfig:
    """Output tuning copied verbatim for the query-time engine."""

    url_prefix: str
    title_boost: TitleBoost
    excerpt_buffer: int
    excerpts_per_result: int
    displayed_results_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "url_prefix": self.url_prefix,
            "title_boost": self.title_boost.value,
            "excerpt_buffer": self.excerpt_buffer,
            "excerpts_per_result": self.excerpts_per_result,
            "displayed_results_count": self.displayed_results_count,
        }


@dataclass(slots=True)
class Index:
    """Compiled index consumed by the search engine."""

    entries: list[Entry]
    containers: dict[str, Container]
    config: PassthroughConfig
    errors: list[DocumentError] = field(default_factory=list)
    prefixes: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "containers": {stem: container.to_dict() for stem, container in self.containers.items()},
            "config": self.config.to_dict(),
            "errors": [error.to_dict() for error in self.errors],
            "prefixes": {prefix: list(stems) for prefix, stems in self.prefixes.items()},
        }
