"""Document-scoped and build-fatal error types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitedex.config import DocumentConfig
    from sitedex.models import Index


class WordListGenerationError(Exception):
    """A failure that prevents one document from producing a word list."""

    message = "The document could not be indexed"

    def __str__(self) -> str:
        return self.message


class FeatureNotAvailable(WordListGenerationError):
    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Reading `{self.kind}` sources is not available in this build"


class FileNotFound(WordListGenerationError):
    message = "The file could not be found"


class CannotDetermineFiletype(WordListGenerationError):
    message = (
        "Could not determine the filetype. Use a known file extension "
        "or set the filetype within the configuration file"
    )


class SelectorNotPresent(WordListGenerationError):
    def __init__(self, selector: str) -> None:
        super().__init__(selector)
        self.selector = selector

    def __str__(self) -> str:
        return f"HTML selector `{self.selector}` is not present in the file"


class EmptyWordList(WordListGenerationError):
    message = "No words in word list"


class InvalidSRT(WordListGenerationError):
    message = "SRT file could not be parsed"


class WebPageNotFetched(WordListGenerationError):
    message = "The web page could not be fetched"


class WebPageErrorfulStatusCode(WordListGenerationError):
    def __init__(self, status_code: int) -> None:
        super().__init__(status_code)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"When fetched, the web page returned a {self.status_code} status code"


class UnknownContentType(WordListGenerationError):
    message = "Content-Type is not present or invalid"


class ExtractionFailed(WordListGenerationError):
    """Wraps an unexpected reader or parser exception for one document."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Document extraction failed: {self.detail}"


@dataclass(slots=True)
class DocumentError:
    """A recoverable failure attributed to one configured document."""

    document: DocumentConfig
    cause: WordListGenerationError

    def __str__(self) -> str:
        return f"{self.cause} (document=`{self.document.title}`, source={self.document.source.describe()})"

    def to_dict(self) -> dict[str, str]:
        return {
            "title": self.document.title,
            "source": self.document.source.describe(),
            "error": str(self.cause),
        }


class IndexGenerationError(Exception):
    """Build-fatal failure; no usable index is returned."""


class NoValidFiles(IndexGenerationError):
    def __str__(self) -> str:
        return "No files could be indexed"


class DocumentErrors(IndexGenerationError):
    """Raised in fail-fast mode; still carries the fully built index."""

    def __init__(self, index: Index) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        count = len(self.index.errors)
        noun = "file" if count == 1 else "files"
        return f"Errors while indexing {count} {noun}"
