"""Index build orchestration over configured documents."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
import logging
import time
from typing import Callable, Mapping

from sitedex.config import Config
from sitedex.errors import DocumentError, DocumentErrors, NoValidFiles
from sitedex.index.containers import build_containers, build_prefix_table
from sitedex.index.nudger import analyze, print_advisories
from sitedex.index.stems import build_stem_table
from sitedex.models import Entry, Index, NormalizedEntry, PassthroughConfig
from sitedex.readers import DataSourceReader, build_default_readers
from sitedex.words.normalizer import normalize_document

logger = logging.getLogger(__name__)


def passthrough_config(config: Config) -> PassthroughConfig:
    return PassthroughConfig(
        url_prefix=config.input.url_prefix,
        title_boost=config.input.title_boost,
        excerpt_buffer=config.output.excerpt_buffer,
        excerpts_per_result=config.output.excerpts_per_result,
        displayed_results_count=config.output.displayed_results_count,
    )


def normalize_documents(
    config: Config,
    readers: Mapping[str, DataSourceReader],
) -> list[NormalizedEntry | DocumentError]:
    """Normalize every configured document, in configuration order.

    Documents are independent, so they run on a thread pool; each task
    returns its own outcome and ``executor.map`` keeps the input order.
    """

    files = config.input.files
    task = partial(
        normalize_document,
        input_config=config.input,
        output_config=config.output,
        readers=readers,
    )
    workers = min(config.input.max_workers, len(files))
    if workers <= 1:
        return [task(document) for document in files]

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sitedex-read") as executor:
        return list(executor.map(task, files))


def build(
    config: Config,
    *,
    readers: Mapping[str, DataSourceReader] | None = None,
    emit_advisory: Callable[[str], None] | None = None,
) -> Index:
    """Compile ``config`` into an index.

    Raises ``NoValidFiles`` when no document could be normalized, and
    ``DocumentErrors`` (carrying the built index) when
    ``break_on_file_error`` is set and any document failed.
    """

    started = time.perf_counter()
    print_advisories(analyze(config), emit=emit_advisory)

    if readers is None:
        readers = build_default_readers(config.input)

    normalized: list[NormalizedEntry] = []
    errors: list[DocumentError] = []
    for outcome in normalize_documents(config, readers):
        if isinstance(outcome, DocumentError):
            logger.warning("Skipping document: %s", outcome)
            errors.append(outcome)
        else:
            normalized.append(outcome)

    if not normalized:
        raise NoValidFiles()

    stems = build_stem_table(normalized)
    containers = build_containers(normalized, stems)

    index = Index(
        entries=[Entry.from_normalized(entry) for entry in normalized],
        containers=containers,
        config=passthrough_config(config),
        errors=errors,
        prefixes=build_prefix_table(containers.values(), config.input.minimum_indexed_substring_length),
    )

    logger.info(
        "Indexed %d documents (%d failed) into %d containers in %d ms",
        len(index.entries),
        len(index.errors),
        len(index.containers),
        int((time.perf_counter() - started) * 1000),
    )

    if config.input.break_on_file_error and index.errors:
        raise DocumentErrors(index)
    return index
