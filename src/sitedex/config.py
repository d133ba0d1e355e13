"""Build configuration for index compilation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from pathlib import Path
import tomllib
from typing import Any, Mapping

import snowballstemmer


DEFAULT_HTML_SELECTOR = "main"
DEFAULT_STEMMING = "english"
DEFAULT_MINIMUM_INDEXED_SUBSTRING_LENGTH = 3
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_WORKERS = 4
DEFAULT_EXCERPT_BUFFER = 8
DEFAULT_EXCERPTS_PER_RESULT = 5
DEFAULT_DISPLAYED_RESULTS_COUNT = 10
DEFAULT_TIMESTAMP_TEMPLATE = "&t={ts}"

NO_STEMMING = "none"


class Filetype(str, Enum):
    PLAIN_TEXT = "PlainText"
    HTML = "HTML"
    SRT = "SRTSubtitle"


class TitleBoost(str, Enum):
    MINIMAL = "Minimal"
    MODERATE = "Moderate"
    LARGE = "Large"
    RIDICULOUS = "Ridiculous"


class FrontmatterHandling(str, Enum):
    IGNORE = "Ignore"
    OMIT = "Omit"
    PARSE = "Parse"


class TimestampFormat(str, Enum):
    NUMBER_OF_SECONDS = "NumberOfSeconds"
    MINUTES_AND_SECONDS = "MinutesAndSeconds"


def _parse_enum(enum_type: type[Enum], *, name: str, raw_value: Any) -> Any:
    try:
        return enum_type(raw_value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValueError(f"{name} must be one of: {choices} (got {raw_value!r})") from None


def _parse_int(*, name: str, raw_value: Any, minimum: int = 0) -> int:
    if isinstance(raw_value, bool) or not isinstance(raw_value, int):
        raise ValueError(f"{name} must be an integer")
    if raw_value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return raw_value


def _parse_positive_float(*, name: str, raw_value: Any, minimum: float = 0.001) -> float:
    if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
        raise ValueError(f"{name} must be a number")
    value = float(raw_value)
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


def _parse_bool(*, name: str, raw_value: Any) -> bool:
    if not isinstance(raw_value, bool):
        raise ValueError(f"{name} must be true or false")
    return raw_value


def _parse_stemming(*, name: str, raw_value: Any) -> str:
    if not isinstance(raw_value, str) or not raw_value.strip():
        raise ValueError(f"{name} cannot be empty")
    language = raw_value.strip().lower()
    if language == NO_STEMMING:
        return language
    if language not in snowballstemmer.algorithms():
        raise ValueError(f"{name} is not a supported stemming language: {raw_value!r}")
    return language


def _optional_str(source: Mapping[str, Any], key: str) -> str | None:
    value = source.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


@dataclass(frozen=True, slots=True)
class ContentsSource:
    """Document text supplied inline in the configuration."""

    contents: str
    kind: str = field(default="contents", init=False)

    def describe(self) -> str:
        return "inline contents"


@dataclass(frozen=True, slots=True)
class FilePathSource:
    """Document read from the local filesystem."""

    path: str
    kind: str = field(default="file", init=False)

    def describe(self) -> str:
        return self.path


@dataclass(frozen=True, slots=True)
class URLSource:
    """Document fetched over HTTP(S)."""

    url: str
    kind: str = field(default="url", init=False)

    def describe(self) -> str:
        return self.url


DataSource = ContentsSource | FilePathSource | URLSource


@dataclass(frozen=True, slots=True)
class SRTConfig:
    timestamp_linking: bool = True
    timestamp_template_string: str = DEFAULT_TIMESTAMP_TEMPLATE
    timestamp_format: TimestampFormat = TimestampFormat.NUMBER_OF_SECONDS

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "SRTConfig":
        linking = _parse_bool(
            name="srt_config.timestamp_linking",
            raw_value=source.get("timestamp_linking", True),
        )
        template = source.get("timestamp_template_string", DEFAULT_TIMESTAMP_TEMPLATE)
        if not isinstance(template, str) or "{ts}" not in template:
            raise ValueError("srt_config.timestamp_template_string must contain '{ts}'")
        timestamp_format = _parse_enum(
            TimestampFormat,
            name="srt_config.timestamp_format",
            raw_value=source.get("timestamp_format", TimestampFormat.NUMBER_OF_SECONDS.value),
        )
        return cls(
            timestamp_linking=linking,
            timestamp_template_string=template,
            timestamp_format=timestamp_format,
        )


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """One document to index, with per-document overrides."""

    title: str
    source: DataSource
    url: str = ""
    filetype: Filetype | None = None
    html_selector_override: str | None = None
    exclude_html_selector_override: str | None = None
    frontmatter_handling_override: FrontmatterHandling | None = None
    stemming_override: str | None = None
    fields: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "DocumentConfig":
        if not isinstance(source, Mapping):
            raise ValueError("Every file must be a table")
        title = source.get("title", "")
        if not isinstance(title, str) or not title.strip():
            raise ValueError("Every file needs a non-empty title")

        present = [key for key in ("contents", "path", "src_url") if source.get(key) is not None]
        if len(present) != 1:
            raise ValueError(f"File {title!r} must set exactly one of: contents, path, src_url")

        key = present[0]
        raw = source[key]
        if not isinstance(raw, str):
            raise ValueError(f"File {title!r}: {key} must be a string")
        data_source: DataSource
        if key == "contents":
            data_source = ContentsSource(raw)
        elif key == "path":
            data_source = FilePathSource(raw)
        else:
            if not (raw.startswith("http://") or raw.startswith("https://")):
                raise ValueError(f"File {title!r}: src_url must start with http:// or https://")
            data_source = URLSource(raw)

        filetype = None
        if source.get("filetype") is not None:
            filetype = _parse_enum(Filetype, name="filetype", raw_value=source["filetype"])

        frontmatter = None
        if source.get("frontmatter_handling_override") is not None:
            frontmatter = _parse_enum(
                FrontmatterHandling,
                name="frontmatter_handling_override",
                raw_value=source["frontmatter_handling_override"],
            )

        stemming = None
        if source.get("stemming_override") is not None:
            stemming = _parse_stemming(name="stemming_override", raw_value=source["stemming_override"])

        raw_fields = source.get("fields") or {}
        if not isinstance(raw_fields, Mapping):
            raise ValueError(f"File {title!r}: fields must be a table of strings")

        return cls(
            title=title,
            source=data_source,
            url=_optional_str(source, "url") or "",
            filetype=filetype,
            html_selector_override=_optional_str(source, "html_selector_override"),
            exclude_html_selector_override=_optional_str(source, "exclude_html_selector_override"),
            frontmatter_handling_override=frontmatter,
            stemming_override=stemming,
            fields={str(name): str(value) for name, value in raw_fields.items()},
        )


@dataclass(frozen=True, slots=True)
class InputConfig:
    files: tuple[DocumentConfig, ...] = ()
    base_directory: str = ""
    url_prefix: str = ""
    title_boost: TitleBoost = TitleBoost.MODERATE
    stemming: str = DEFAULT_STEMMING
    html_selector: str = DEFAULT_HTML_SELECTOR
    exclude_html_selector: str | None = None
    frontmatter_handling: FrontmatterHandling = FrontmatterHandling.OMIT
    minimum_indexed_substring_length: int = DEFAULT_MINIMUM_INDEXED_SUBSTRING_LENGTH
    break_on_file_error: bool = False
    srt_config: SRTConfig = field(default_factory=SRTConfig)
    enable_web_fetch: bool = True
    enable_file_read: bool = True
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "InputConfig":
        raw_files = source.get("files", [])
        if not isinstance(raw_files, list):
            raise ValueError("input.files must be an array of tables")
        for position, item in enumerate(raw_files):
            if not isinstance(item, Mapping):
                raise ValueError(f"input.files[{position}] must be a table")

        raw_srt = source.get("srt_config") or {}
        if not isinstance(raw_srt, Mapping):
            raise ValueError("input.srt_config must be a table")

        html_selector = source.get("html_selector", DEFAULT_HTML_SELECTOR)
        if not isinstance(html_selector, str) or not html_selector.strip():
            raise ValueError("input.html_selector cannot be empty")

        return cls(
            files=tuple(DocumentConfig.from_mapping(item) for item in raw_files),
            base_directory=_optional_str(source, "base_directory") or "",
            url_prefix=_optional_str(source, "url_prefix") or "",
            title_boost=_parse_enum(
                TitleBoost,
                name="input.title_boost",
                raw_value=source.get("title_boost", TitleBoost.MODERATE.value),
            ),
            stemming=_parse_stemming(name="input.stemming", raw_value=source.get("stemming", DEFAULT_STEMMING)),
            html_selector=html_selector,
            exclude_html_selector=_optional_str(source, "exclude_html_selector"),
            frontmatter_handling=_parse_enum(
                FrontmatterHandling,
                name="input.frontmatter_handling",
                raw_value=source.get("frontmatter_handling", FrontmatterHandling.OMIT.value),
            ),
            minimum_indexed_substring_length=_parse_int(
                name="input.minimum_indexed_substring_length",
                raw_value=source.get(
                    "minimum_indexed_substring_length",
                    DEFAULT_MINIMUM_INDEXED_SUBSTRING_LENGTH,
                ),
                minimum=1,
            ),
            break_on_file_error=_parse_bool(
                name="input.break_on_file_error",
                raw_value=source.get("break_on_file_error", False),
            ),
            srt_config=SRTConfig.from_mapping(raw_srt),
            enable_web_fetch=_parse_bool(
                name="input.enable_web_fetch",
                raw_value=source.get("enable_web_fetch", True),
            ),
            enable_file_read=_parse_bool(
                name="input.enable_file_read",
                raw_value=source.get("enable_file_read", True),
            ),
            fetch_timeout_seconds=_parse_positive_float(
                name="input.fetch_timeout_seconds",
                raw_value=source.get("fetch_timeout_seconds", DEFAULT_FETCH_TIMEOUT_SECONDS),
                minimum=0.1,
            ),
            max_workers=_parse_int(
                name="input.max_workers",
                raw_value=source.get("max_workers", DEFAULT_MAX_WORKERS),
                minimum=1,
            ),
        )


@dataclass(frozen=True, slots=True)
class OutputConfig:
    excerpt_buffer: int = DEFAULT_EXCERPT_BUFFER
    excerpts_per_result: int = DEFAULT_EXCERPTS_PER_RESULT
    displayed_results_count: int = DEFAULT_DISPLAYED_RESULTS_COUNT
    save_nearest_html_id: bool = False

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "OutputConfig":
        return cls(
            excerpt_buffer=_parse_int(
                name="output.excerpt_buffer",
                raw_value=source.get("excerpt_buffer", DEFAULT_EXCERPT_BUFFER),
            ),
            excerpts_per_result=_parse_int(
                name="output.excerpts_per_result",
                raw_value=source.get("excerpts_per_result", DEFAULT_EXCERPTS_PER_RESULT),
            ),
            displayed_results_count=_parse_int(
                name="output.displayed_results_count",
                raw_value=source.get("displayed_results_count", DEFAULT_DISPLAYED_RESULTS_COUNT),
                minimum=1,
            ),
            save_nearest_html_id=_parse_bool(
                name="output.save_nearest_html_id",
                raw_value=source.get("save_nearest_html_id", False),
            ),
        )


@dataclass(frozen=True, slots=True)
class Config:
    """Validated build configuration."""

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "Config":
        input_section = source.get("input") or {}
        output_section = source.get("output") or {}
        if not isinstance(input_section, Mapping):
            raise ValueError("input must be a table")
        if not isinstance(output_section, Mapping):
            raise ValueError("output must be a table")
        return cls(
            input=InputConfig.from_mapping(input_section),
            output=OutputConfig.from_mapping(output_section),
        )


def load_config(path: str | Path) -> Config:
    """Read a TOML or JSON configuration file."""

    config_path = Path(path)
    raw = config_path.read_bytes()
    if config_path.suffix.lower() == ".json":
        payload = json.loads(raw.decode("utf-8"))
    else:
        payload = tomllib.loads(raw.decode("utf-8"))

    if not isinstance(payload, dict):
        raise ValueError(f"Configuration root must be a table: {config_path}")
    return Config.from_mapping(payload)
