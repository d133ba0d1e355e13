"""Turn one configured document into a normalized entry or a document error."""

from __future__ import annotations

import logging
from typing import Mapping

from sitedex.config import DocumentConfig, Filetype, InputConfig, OutputConfig
from sitedex.errors import (
    CannotDetermineFiletype,
    DocumentError,
    EmptyWordList,
    ExtractionFailed,
    FeatureNotAvailable,
    WordListGenerationError,
)
from sitedex.models import AnnotatedWord, NormalizedEntry
from sitedex.readers.base import DataSourceReader, ReaderConfig, ReadResult
from sitedex.words.annotated_words import annotated_words_from_string
from sitedex.words.html import annotated_words_from_html
from sitedex.words.srt import annotated_words_from_srt

logger = logging.getLogger(__name__)


def _read(document: DocumentConfig, config: ReaderConfig, readers: Mapping[str, DataSourceReader]) -> ReadResult:
    reader = readers.get(document.source.kind)
    if reader is None:
        raise FeatureNotAvailable(document.source.kind)
    try:
        return reader.read(document.source, config)
    except WordListGenerationError:
        raise
    except Exception as exc:
        raise ExtractionFailed(f"{type(exc).__name__}: {exc}") from exc


def words_from_read_result(result: ReadResult, config: ReaderConfig) -> list[AnnotatedWord]:
    """Extract annotated words according to the resolved filetype."""

    if result.filetype is None:
        raise CannotDetermineFiletype()

    try:
        if result.filetype == Filetype.HTML:
            document = config.document
            words = annotated_words_from_html(
                result.buffer,
                selector=document.html_selector_override or config.input.html_selector,
                exclude_selector=document.exclude_html_selector_override or config.input.exclude_html_selector,
                save_nearest_html_id=config.output.save_nearest_html_id,
            )
        elif result.filetype == Filetype.SRT:
            words = annotated_words_from_srt(result.buffer, config.input.srt_config)
        else:
            words = annotated_words_from_string(result.buffer)
    except WordListGenerationError:
        raise
    except Exception as exc:
        raise ExtractionFailed(f"{type(exc).__name__}: {exc}") from exc

    if not words:
        raise EmptyWordList()
    return words


def normalize_document(
    document: DocumentConfig,
    *,
    input_config: InputConfig,
    output_config: OutputConfig,
    readers: Mapping[str, DataSourceReader],
) -> NormalizedEntry | DocumentError:
    """Read and normalize one document without raising document-scoped errors."""

    config = ReaderConfig(input=input_config, document=document, output=output_config)
    try:
        result = _read(document, config, readers)
        words = words_from_read_result(result, config)
    except WordListGenerationError as exc:
        logger.debug("Document %r failed: %s", document.title, exc)
        return DocumentError(document=document, cause=exc)

    fields = dict(document.fields)
    if result.frontmatter_fields:
        fields.update(result.frontmatter_fields)

    return NormalizedEntry(
        title=document.title,
        url=document.url,
        words=words,
        fields=fields,
        stemming=document.stemming_override or input_config.stemming,
        title_words=annotated_words_from_string(document.title),
    )
