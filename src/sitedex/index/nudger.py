"""Heuristic configuration advisories printed before a build."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging
from typing import Callable, Iterable

from sitedex.config import Config, Filetype, URLSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Advisory:
    code: str
    message: str


def _is_absolute_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def analyze(config: Config) -> list[Advisory]:
    """Inspect ``config`` for likely mistakes without touching the build."""

    advisories: list[Advisory] = []
    files = config.input.files

    if not files:
        advisories.append(Advisory("no-files", "No files are configured; the build will have nothing to index"))

    for document in files:
        has_selector = document.html_selector_override or document.exclude_html_selector_override
        if has_selector and document.filetype not in (None, Filetype.HTML):
            advisories.append(
                Advisory(
                    "selector-on-non-html",
                    f"`{document.title}` sets an HTML selector but is declared as {document.filetype.value}; "
                    "the selector will be ignored",
                )
            )
        if config.input.url_prefix and _is_absolute_url(document.url):
            advisories.append(
                Advisory(
                    "absolute-url-with-prefix",
                    f"`{document.title}` has an absolute URL but url_prefix `{config.input.url_prefix}` "
                    "will still be prepended at search time",
                )
            )

    url_counts = Counter(document.url for document in files if document.url)
    for url, count in sorted(url_counts.items()):
        if count > 1:
            advisories.append(Advisory("duplicate-url", f"{count} files share the URL `{url}`"))

    if not config.input.enable_web_fetch and any(isinstance(d.source, URLSource) for d in files):
        advisories.append(
            Advisory(
                "web-fetch-disabled",
                "Web fetching is disabled, so every file with a src_url will fail to index",
            )
        )

    if config.output.excerpts_per_result == 0:
        advisories.append(
            Advisory("no-excerpts", "excerpts_per_result is 0; search results will show no excerpts")
        )

    return advisories


def print_advisories(advisories: Iterable[Advisory], emit: Callable[[str], None] | None = None) -> None:
    """Emit each advisory; defaults to ``logger.warning``."""

    emit = emit or logger.warning
    for advisory in advisories:
        emit(f"[{advisory.code}] {advisory.message}")
