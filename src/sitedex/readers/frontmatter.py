"""YAML frontmatter splitting for document buffers."""

from __future__ import annotations

import logging
import re

import yaml

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def split_frontmatter(buffer: str) -> tuple[str, dict[str, str] | None]:
    """Return the buffer without its frontmatter block and the parsed fields.

    Fields are ``None`` when there is no frontmatter or it is not a YAML
    mapping. Non-string values are stringified so entries carry a flat
    ``str -> str`` field map.
    """

    match = _FRONTMATTER_RE.match(buffer)
    if match is None:
        return buffer, None

    body = buffer[match.end() :]
    try:
        parsed = yaml.safe_load(match.group(1) or "")
    except yaml.YAMLError as exc:
        logger.debug("Ignoring malformed frontmatter: %s", exc)
        return body, None

    if not isinstance(parsed, dict):
        return body, None
    return body, {str(key): str(value) for key, value in parsed.items() if value is not None}
