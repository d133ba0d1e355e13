"""Placeholder reader for source kinds disabled in this build."""

from __future__ import annotations

from sitedex.config import DataSource
from sitedex.errors import FeatureNotAvailable
from sitedex.readers.base import ReaderConfig, ReadResult


class UnavailableReader:
    def __init__(self, kind: str) -> None:
        self.kind = kind

    def read(self, source: DataSource, config: ReaderConfig) -> ReadResult:
        raise FeatureNotAvailable(self.kind)
