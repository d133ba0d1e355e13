from __future__ import annotations

import pytest

from sitedex.errors import SelectorNotPresent
from sitedex.words.html import annotated_words_from_html


def _texts(words: list) -> list[str]:
    return [word.text for word in words]


def test_only_selected_element_text_is_extracted() -> None:
    html = "<html><body><nav>skip me</nav><main><p>Hello <b>world</b>.</p></main></body></html>"

    words = annotated_words_from_html(html, selector="main")

    assert _texts(words) == ["Hello", "world"]


def test_exclude_selector_removes_matching_elements() -> None:
    html = '<main><p>keep</p><aside class="ad">drop this</aside><p>also kept</p></main>'

    words = annotated_words_from_html(html, selector="main", exclude_selector=".ad")

    assert _texts(words) == ["keep", "also", "kept"]


def test_missing_selector_raises_document_error() -> None:
    with pytest.raises(SelectorNotPresent) as excinfo:
        annotated_words_from_html("", selector=".article")

    assert str(excinfo.value) == "HTML selector `.article` is not present in the file"


def test_script_and_style_text_is_ignored() -> None:
    html = "<main><style>p { color: red; }</style><script>var x = 1;</script><p>text</p></main>"

    assert _texts(annotated_words_from_html(html, selector="main")) == ["text"]


def test_nested_matches_are_not_counted_twice() -> None:
    html = "<main><div>outer <div>inner</div></div></main>"

    assert _texts(annotated_words_from_html(html, selector="div")) == ["outer", "inner"]


def test_nearest_html_id_annotations() -> None:
    html = (
        '<main><h2 id="intro">Intro</h2><p>alpha</p>'
        '<h2 id="usage">Usage</h2><p>beta</p></main>'
    )

    words = annotated_words_from_html(html, selector="main", save_nearest_html_id=True)

    assert [(word.text, word.annotations) for word in words] == [
        ("Intro", ("#intro",)),
        ("alpha", ("#intro",)),
        ("Usage", ("#usage",)),
        ("beta", ("#usage",)),
    ]


def test_ids_are_not_recorded_unless_requested() -> None:
    html = '<main><h2 id="intro">Intro</h2></main>'

    words = annotated_words_from_html(html, selector="main")

    assert words[0].annotations == ()
