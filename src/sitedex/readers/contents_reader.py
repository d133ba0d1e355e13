"""Reader for documents whose text is inlined in the configuration."""

from __future__ import annotations

from sitedex.config import ContentsSource, DataSource
from sitedex.readers.base import ReaderConfig, ReadResult, read_result_with_frontmatter


class ContentsReader:
    """Inline contents carry no filetype hints beyond the declared one."""

    def read(self, source: DataSource, config: ReaderConfig) -> ReadResult:
        if not isinstance(source, ContentsSource):
            raise TypeError(f"ContentsReader cannot read {source.kind} sources")
        return read_result_with_frontmatter(source.contents, config.document.filetype, config)
