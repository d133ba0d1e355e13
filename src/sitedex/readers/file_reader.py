"""Filesystem reader with encoding detection and extension-based filetypes."""

from __future__ import annotations

import logging
from pathlib import Path

from charset_normalizer import from_bytes

from sitedex.config import DataSource, FilePathSource, Filetype
from sitedex.errors import ExtractionFailed, FileNotFound
from sitedex.readers.base import ReaderConfig, ReadResult, read_result_with_frontmatter

logger = logging.getLogger(__name__)

_EXTENSION_FILETYPES = {
    ".html": Filetype.HTML,
    ".htm": Filetype.HTML,
    ".txt": Filetype.PLAIN_TEXT,
    ".srt": Filetype.SRT,
}


def filetype_from_extension(path: Path) -> Filetype | None:
    return _EXTENSION_FILETYPES.get(path.suffix.lower())


def decode_bytes(raw: bytes) -> str:
    """Decode file bytes, preferring UTF-8 and falling back to detection."""

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    best = from_bytes(raw).best()
    if best and best.encoding:
        return raw.decode(best.encoding)
    raise ExtractionFailed("Could not detect file encoding")


class FileReader:
    """Read documents from disk relative to the configured base directory."""

    def read(self, source: DataSource, config: ReaderConfig) -> ReadResult:
        if not isinstance(source, FilePathSource):
            raise TypeError(f"FileReader cannot read {source.kind} sources")

        path = Path(config.input.base_directory) / source.path
        logger.debug("Reading %s", path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise FileNotFound() from exc

        filetype = config.document.filetype or filetype_from_extension(path)
        return read_result_with_frontmatter(decode_bytes(raw), filetype, config)
