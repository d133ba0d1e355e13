"""HTTP reader for documents fetched from a URL."""

from __future__ import annotations

import logging
from typing import Any

import requests

from sitedex.config import DataSource, Filetype, URLSource
from sitedex.errors import UnknownContentType, WebPageErrorfulStatusCode, WebPageNotFetched
from sitedex.readers.base import ReaderConfig, ReadResult
from sitedex.readers.file_reader import decode_bytes

logger = logging.getLogger(__name__)

USER_AGENT = "sitedex/0.1 (+index builder)"

_MIME_FILETYPES = {
    "text/plain": Filetype.PLAIN_TEXT,
    "text/html": Filetype.HTML,
}


def parse_mime_type(header: str | None) -> str:
    """Return the bare ``type/subtype`` of a Content-Type header."""

    if not header:
        raise UnknownContentType()
    mime = header.split(";", 1)[0].strip().lower()
    main_type, _, subtype = mime.partition("/")
    if not main_type or not subtype or "/" in subtype:
        raise UnknownContentType()
    return mime


def declares_charset(header: str | None) -> bool:
    if not header:
        return False
    params = header.split(";")[1:]
    return any(param.strip().lower().startswith("charset=") for param in params)


def response_text(response: Any) -> str:
    """Decode a response body, trusting only an explicit charset.

    Without one, ``requests`` falls back to ISO-8859-1 for ``text/*``, so
    the raw bytes go through the same UTF-8-first decoding as files.
    """

    if declares_charset(response.headers.get("Content-Type")):
        return response.text
    return decode_bytes(response.content)


class URLReader:
    """Fetch a web page once; retries are left to the caller.

    Without an injected ``session`` every read is a standalone
    ``requests.get``, so nothing is shared between worker threads and
    there is no connection pool left to close.
    """

    def __init__(self, session: Any | None = None) -> None:
        self._session = session
        self._headers = {"User-Agent": USER_AGENT}

    def read(self, source: DataSource, config: ReaderConfig) -> ReadResult:
        if not isinstance(source, URLSource):
            raise TypeError(f"URLReader cannot read {source.kind} sources")

        get = self._session.get if self._session is not None else requests.get
        logger.debug("Fetching %s", source.url)
        try:
            response = get(
                source.url,
                headers=self._headers,
                timeout=config.input.fetch_timeout_seconds,
            )
        except requests.RequestException as exc:
            raise WebPageNotFetched() from exc

        if response.status_code >= 400:
            raise WebPageErrorfulStatusCode(response.status_code)

        mime = parse_mime_type(response.headers.get("Content-Type"))
        filetype = config.document.filetype or _MIME_FILETYPES.get(mime)
        return ReadResult(buffer=response_text(response), filetype=filetype)
