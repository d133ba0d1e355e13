"""Compile documents into a stem-grouped search index."""

from .config import Config, load_config
from .errors import DocumentError, DocumentErrors, IndexGenerationError, NoValidFiles, WordListGenerationError
from .index import build
from .models import Index

__all__ = [
    "Config",
    "DocumentError",
    "DocumentErrors",
    "Index",
    "IndexGenerationError",
    "NoValidFiles",
    "WordListGenerationError",
    "build",
    "load_config",
]
