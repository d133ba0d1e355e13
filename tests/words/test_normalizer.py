from __future__ import annotations

from sitedex.config import (
    ContentsSource,
    DocumentConfig,
    Filetype,
    FrontmatterHandling,
    InputConfig,
    OutputConfig,
    URLSource,
)
from sitedex.errors import (
    CannotDetermineFiletype,
    DocumentError,
    EmptyWordList,
    ExtractionFailed,
    FeatureNotAvailable,
)
from sitedex.models import NormalizedEntry
from sitedex.readers import ContentsReader
from sitedex.words.normalizer import normalize_document


class _ExplodingReader:
    def read(self, source: object, config: object) -> object:
        raise RuntimeError("parser crashed")


def _normalize(document: DocumentConfig, *, readers: dict | None = None, **input_options: object):
    return normalize_document(
        document,
        input_config=InputConfig(**input_options),
        output_config=OutputConfig(),
        readers=readers if readers is not None else {"contents": ContentsReader()},
    )


def test_plain_text_document_becomes_normalized_entry() -> None:
    document = DocumentConfig(
        title="Doc",
        url="/doc",
        source=ContentsSource("Words, words; words."),
        filetype=Filetype.PLAIN_TEXT,
        fields={"section": "guides"},
    )

    outcome = _normalize(document)

    assert isinstance(outcome, NormalizedEntry)
    assert outcome.title == "Doc"
    assert outcome.url == "/doc"
    assert [word.text for word in outcome.words] == ["Words", "words", "words"]
    assert outcome.fields == {"section": "guides"}
    assert outcome.stemming == "english"


def test_title_is_tokenized_separately_from_body() -> None:
    document = DocumentConfig(title="Getting Started!", source=ContentsSource("body"), filetype=Filetype.PLAIN_TEXT)

    outcome = _normalize(document)

    assert isinstance(outcome, NormalizedEntry)
    assert [(word.text, word.character_offset) for word in outcome.title_words] == [("Getting", 0), ("Started", 8)]
    assert [word.text for word in outcome.words] == ["body"]


def test_missing_filetype_is_a_document_error() -> None:
    document = DocumentConfig(title="Untyped", source=ContentsSource("some text"))

    outcome = _normalize(document)

    assert isinstance(outcome, DocumentError)
    assert isinstance(outcome.cause, CannotDetermineFiletype)


def test_all_punctuation_contents_yield_empty_word_list() -> None:
    document = DocumentConfig(title="Noise", source=ContentsSource("!!! --- ..."), filetype=Filetype.PLAIN_TEXT)

    outcome = _normalize(document)

    assert isinstance(outcome, DocumentError)
    assert isinstance(outcome.cause, EmptyWordList)
    assert "No words in word list" in str(outcome)
    assert "`Noise`" in str(outcome)


def test_unregistered_source_kind_reports_unavailable_capability() -> None:
    document = DocumentConfig(title="Remote", source=URLSource("https://example.com"))

    outcome = _normalize(document)

    assert isinstance(outcome, DocumentError)
    assert isinstance(outcome.cause, FeatureNotAvailable)


def test_unexpected_reader_exception_stays_document_scoped() -> None:
    document = DocumentConfig(title="Boom", source=ContentsSource("x"), filetype=Filetype.PLAIN_TEXT)

    outcome = _normalize(document, readers={"contents": _ExplodingReader()})

    assert isinstance(outcome, DocumentError)
    assert isinstance(outcome.cause, ExtractionFailed)
    assert "parser crashed" in str(outcome.cause)


def test_parsed_frontmatter_overrides_configured_fields() -> None:
    document = DocumentConfig(
        title="Post",
        source=ContentsSource("---\nauthor: Ada\nsection: blog\n---\nBody text here"),
        filetype=Filetype.PLAIN_TEXT,
        frontmatter_handling_override=FrontmatterHandling.PARSE,
        fields={"section": "docs", "lang": "en"},
    )

    outcome = _normalize(document)

    assert isinstance(outcome, NormalizedEntry)
    assert [word.text for word in outcome.words] == ["Body", "text", "here"]
    assert outcome.fields == {"section": "blog", "lang": "en", "author": "Ada"}


def test_stemming_override_wins_over_global_setting() -> None:
    document = DocumentConfig(
        title="Raw",
        source=ContentsSource("running"),
        filetype=Filetype.PLAIN_TEXT,
        stemming_override="none",
    )

    outcome = _normalize(document, stemming="english")

    assert isinstance(outcome, NormalizedEntry)
    assert outcome.stemming == "none"


def test_html_uses_document_selector_override() -> None:
    document = DocumentConfig(
        title="Page",
        source=ContentsSource('<main>ignored</main><div class="article">kept words</div>'),
        filetype=Filetype.HTML,
        html_selector_override=".article",
    )

    outcome = _normalize(document)

    assert isinstance(outcome, NormalizedEntry)
    assert [word.text for word in outcome.words] == ["kept", "words"]
