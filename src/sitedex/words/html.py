"""HTML text extraction scoped by CSS selectors."""

from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from sitedex.errors import SelectorNotPresent
from sitedex.models import AnnotatedWord
from sitedex.words.annotated_words import annotated_words_from_string

_SKIPPED_PARENTS = {"script", "style", "noscript", "template"}


def _outermost(nodes: list[Tag]) -> list[Tag]:
    selected = {id(node) for node in nodes}
    return [node for node in nodes if not any(id(parent) in selected for parent in node.parents)]


def _inherited_id(node: Tag) -> str | None:
    if node.get("id"):
        return str(node["id"])
    parent = node.find_parent(id=True)
    return str(parent["id"]) if parent is not None else None


def annotated_words_from_html(
    buffer: str,
    *,
    selector: str,
    exclude_selector: str | None = None,
    save_nearest_html_id: bool = False,
) -> list[AnnotatedWord]:
    """Extract words from the elements matching ``selector``.

    With ``save_nearest_html_id`` each word is annotated with a ``#id``
    URL suffix naming the closest element id seen before it.
    """

    soup = BeautifulSoup(buffer, "lxml")
    if exclude_selector:
        for node in soup.select(exclude_selector):
            node.decompose()

    roots = soup.select(selector)
    if not roots:
        raise SelectorNotPresent(selector)

    words: list[AnnotatedWord] = []
    offset = 0
    for root in _outermost(roots):
        nearest_id = _inherited_id(root) if save_nearest_html_id else None
        for node in root.descendants:
            if isinstance(node, Tag):
                if save_nearest_html_id and node.get("id"):
                    nearest_id = str(node["id"])
                continue
            if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
                continue
            if node.parent is not None and node.parent.name in _SKIPPED_PARENTS:
                continue

            text = str(node)
            annotations = (f"#{nearest_id}",) if nearest_id else ()
            words.extend(annotated_words_from_string(text, base_offset=offset, annotations=annotations))
            offset += len(text) + 1

    return words
