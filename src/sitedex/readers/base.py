"""Shared reader contract for per-source document readers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from sitedex.config import DataSource, DocumentConfig, Filetype, FrontmatterHandling, InputConfig, OutputConfig
from sitedex.readers.frontmatter import split_frontmatter


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Everything a reader may consult for one document."""

    input: InputConfig
    document: DocumentConfig
    output: OutputConfig

    @property
    def frontmatter_handling(self) -> FrontmatterHandling:
        return self.document.frontmatter_handling_override or self.input.frontmatter_handling


@dataclass(slots=True)
class ReadResult:
    """Raw document text with its resolved filetype."""

    buffer: str
    filetype: Filetype | None
    frontmatter_fields: dict[str, str] | None = None


@runtime_checkable
class DataSourceReader(Protocol):
    """Protocol that every source-kind reader must implement."""

    def read(self, source: DataSource, config: ReaderConfig) -> ReadResult:
        """Resolve the source into text or raise a WordListGenerationError."""


def read_result_with_frontmatter(buffer: str, filetype: Filetype | None, config: ReaderConfig) -> ReadResult:
    """Apply the configured frontmatter handling to a freshly read buffer."""

    handling = config.frontmatter_handling
    if handling == FrontmatterHandling.IGNORE:
        return ReadResult(buffer=buffer, filetype=filetype)

    body, fields = split_frontmatter(buffer)
    if handling == FrontmatterHandling.PARSE:
        return ReadResult(buffer=body, filetype=filetype, frontmatter_fields=fields)
    return ReadResult(buffer=body, filetype=filetype)
