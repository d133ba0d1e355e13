"""SubRip subtitle parsing with timestamp annotations."""

from __future__ import annotations

from dataclasses import dataclass
import re

from sitedex.config import SRTConfig, TimestampFormat
from sitedex.errors import InvalidSRT
from sitedex.models import AnnotatedWord
from sitedex.words.annotated_words import annotated_words_from_string

_BLOCK_SPLIT_RE = re.compile(r"\r?\n[ \t]*\r?\n")
_TIMING_RE = re.compile(
    r"^(\d{1,2}):(\d{2}):(\d{2})[,.](\d{1,3})\s*-->\s*(\d{1,2}):(\d{2}):(\d{2})[,.](\d{1,3})"
)


@dataclass(slots=True)
class Subtitle:
    start_seconds: int
    text: str


def parse_srt(buffer: str) -> list[Subtitle]:
    subtitles: list[Subtitle] = []
    for block in _BLOCK_SPLIT_RE.split(buffer.strip()):
        lines = [line.strip() for line in block.splitlines() if line.strip()]
        if not lines:
            continue
        if lines[0].isdigit():
            lines = lines[1:]
        if not lines:
            raise InvalidSRT()

        match = _TIMING_RE.match(lines[0])
        if match is None:
            raise InvalidSRT()

        hours, minutes, seconds = (int(value) for value in match.group(1, 2, 3))
        subtitles.append(
            Subtitle(start_seconds=hours * 3600 + minutes * 60 + seconds, text=" ".join(lines[1:]))
        )
    return subtitles


def format_timestamp(seconds: int, timestamp_format: TimestampFormat) -> str:
    if timestamp_format == TimestampFormat.MINUTES_AND_SECONDS:
        return f"{seconds // 60}m{seconds % 60}s"
    return str(seconds)


def annotated_words_from_srt(buffer: str, config: SRTConfig) -> list[AnnotatedWord]:
    words: list[AnnotatedWord] = []
    offset = 0
    for subtitle in parse_srt(buffer):
        annotations: tuple[str, ...] = ()
        if config.timestamp_linking:
            timestamp = format_timestamp(subtitle.start_seconds, config.timestamp_format)
            annotations = (config.timestamp_template_string.replace("{ts}", timestamp),)
        words.extend(annotated_words_from_string(subtitle.text, base_offset=offset, annotations=annotations))
        offset += len(subtitle.text) + 1
    return words
