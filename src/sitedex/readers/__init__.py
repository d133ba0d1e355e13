"""Data-source reader implementations and contracts."""

import logging

from sitedex.config import InputConfig

from .base import DataSourceReader, ReaderConfig, ReadResult
from .contents_reader import ContentsReader
from .file_reader import FileReader
from .unavailable import UnavailableReader
from .url_reader import URLReader

logger = logging.getLogger(__name__)


def build_default_readers(config: InputConfig | None = None) -> dict[str, DataSourceReader]:
    """Return the reader map keyed by source kind, honouring capability flags."""

    config = config or InputConfig()
    readers: dict[str, DataSourceReader] = {"contents": ContentsReader()}

    if config.enable_file_read:
        readers["file"] = FileReader()
    else:
        logger.info("File reading disabled; file sources will be reported as unavailable")
        readers["file"] = UnavailableReader("file")

    if config.enable_web_fetch:
        readers["url"] = URLReader()
    else:
        logger.info("Web fetching disabled; URL sources will be reported as unavailable")
        readers["url"] = UnavailableReader("url")

    return readers


__all__ = [
    "ContentsReader",
    "DataSourceReader",
    "FileReader",
    "ReadResult",
    "ReaderConfig",
    "URLReader",
    "UnavailableReader",
    "build_default_readers",
]
