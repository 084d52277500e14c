"""Content types and form encoding for request bodies."""

from __future__ import annotations

import string
from enum import Enum
from typing import Mapping

_UNRESERVED = frozenset(string.ascii_letters + string.digits + "-_.~")


class ContentType(Enum):
    """Well-known body content types, valued by their MIME type."""

    JSON = "application/json"
    XML = "application/xml"
    TEXT = "text/plain"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    FORM_DATA = "multipart/form-data"
    BINARY = "application/octet-stream"

    @property
    def mime_type(self) -> str:
        """The MIME type string for this content type."""
        return self.value

    def __str__(self) -> str:
        return self.value


_RULES: tuple[tuple[tuple[str, ...], ContentType], ...] = (
    (("application/json",), ContentType.JSON),
    (("application/xml", "text/xml"), ContentType.XML),
    (("text/plain",), ContentType.TEXT),
    (("application/x-www-form-urlencoded",), ContentType.FORM_URLENCODED),
    (("multipart/form-data",), ContentType.FORM_DATA),
    (("application/octet-stream",), ContentType.BINARY),
)


def classify_mime(mime: str) -> ContentType | str:
    """Classify a MIME type, case-insensitively and ignoring parameters.

    Returns the matching :class:`ContentType`, or ``mime`` itself unchanged
    when it is not one of the known types.
    """
    lowered = mime.lower()
    for needles, content_type in _RULES:
        if any(needle in lowered for needle in needles):
            return content_type
    return mime


def _encode_component(text: str) -> str:
    return "".join(
        c if c in _UNRESERVED else "+" if c == " " else f"%{ord(c) & 0xFF:02X}"
        for c in text
    )


def encode_form_urlencoded(data: Mapping[str, str]) -> str:
    """Encode key/value pairs as an ``application/x-www-form-urlencoded`` body."""
    return "&".join(
        f"{_encode_component(key)}={_encode_component(value)}"
        for key, value in data.items()
    )