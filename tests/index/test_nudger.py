from __future__ import annotations

import logging

import pytest

from sitedex.config import Config, ContentsSource, DocumentConfig, Filetype, InputConfig, OutputConfig, URLSource
from sitedex.index.nudger import Advisory, analyze, print_advisories


def _codes(config: Config) -> list[str]:
    return [advisory.code for advisory in analyze(config)]


def test_clean_config_has_no_advisories() -> None:
    config = Config(
        input=InputConfig(
            files=(DocumentConfig(title="Doc", url="/doc", source=ContentsSource("x"), filetype=Filetype.PLAIN_TEXT),)
        )
    )

    assert analyze(config) == []


def test_empty_file_list_is_flagged() -> None:
    assert _codes(Config()) == ["no-files"]


def test_selector_on_plain_text_document() -> None:
    document = DocumentConfig(
        title="Doc",
        source=ContentsSource("x"),
        filetype=Filetype.PLAIN_TEXT,
        html_selector_override=".article",
    )

    assert _codes(Config(input=InputConfig(files=(document,)))) == ["selector-on-non-html"]


def test_prefix_with_absolute_urls_and_duplicates() -> None:
    files = tuple(
        DocumentConfig(title=f"Doc {n}", url="https://example.com/a", source=ContentsSource("x")) for n in range(2)
    )

    codes = _codes(Config(input=InputConfig(files=files, url_prefix="https://example.com")))

    assert codes == ["absolute-url-with-prefix", "absolute-url-with-prefix", "duplicate-url"]


def test_url_sources_with_web_fetch_disabled_and_no_excerpts() -> None:
    document = DocumentConfig(title="Remote", url="/r", source=URLSource("https://example.com"))
    config = Config(
        input=InputConfig(files=(document,), enable_web_fetch=False),
        output=OutputConfig(excerpts_per_result=0),
    )

    assert _codes(config) == ["web-fetch-disabled", "no-excerpts"]


def test_print_advisories_uses_injected_emitter() -> None:
    lines: list[str] = []

    print_advisories([Advisory("no-files", "nothing here")], emit=lines.append)

    assert lines == ["[no-files] nothing here"]


def test_print_advisories_defaults_to_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sitedex.index.nudger"):
        print_advisories([Advisory("no-files", "nothing here")])

    assert "[no-files] nothing here" in caplog.text
