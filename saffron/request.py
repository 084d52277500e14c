"""HTTP request model with a fluent builder interface."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Optional, Union


class HttpMethod(Enum):
    """Supported HTTP methods, valued by their wire name."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value


def parse_method(name: str) -> HttpMethod:
    """Look up a method by name, ignoring case; raise ValueError if unknown."""
    try:
        return HttpMethod(name.upper())
    except ValueError:
        raise ValueError(f"Invalid HTTP method: {name}") from None


@dataclass
class HttpHeader:
    """A single request header."""

    name: str
    value: str


@dataclass(frozen=True)
class TextBody:
    """A plain text body."""

    text: str


@dataclass(frozen=True)
class JsonBody:
    """A JSON body, kept as its source text."""

    json: str


@dataclass(frozen=True)
class FormBody:
    """A URL-encoded form body."""

    fields: dict[str, str]


@dataclass(frozen=True)
class FormDataFile:
    """A file uploaded as one part of a multipart body."""

    filename: str
    data: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class FormDataPart:
    """One named part of a multipart body: text or a file."""

    name: str
    content: Union[str, FormDataFile]


@dataclass(frozen=True)
class MultipartBody:
    """A ``multipart/form-data`` body."""

    parts: list[FormDataPart]


@dataclass(frozen=True)
class BinaryBody:
    """Raw bytes."""

    data: bytes


RequestBody = Union[TextBody, JsonBody, FormBody, MultipartBody, BinaryBody, None]


@dataclass
class HttpRequest:
    """An HTTP request. The ``with_*`` methods return modified copies."""

    method: HttpMethod = HttpMethod.GET
    url: str = ""
    headers: list[HttpHeader] = field(default_factory=list)
    body: RequestBody = None
    timeout_seconds: Optional[int] = 30
    follow_redirects: bool = True

    @classmethod
    def get(cls, url: str) -> HttpRequest:
        return cls(HttpMethod.GET, url)

    @classmethod
    def post(cls, url: str) -> HttpRequest:
        return cls(HttpMethod.POST, url)

    @classmethod
    def put(cls, url: str) -> HttpRequest:
        return cls(HttpMethod.PUT, url)

    @classmethod
    def patch(cls, url: str) -> HttpRequest:
        return cls(HttpMethod.PATCH, url)

    @classmethod
    def delete(cls, url: str) -> HttpRequest:
        return cls(HttpMethod.DELETE, url)

    def with_header(self, name: str, value: str) -> HttpRequest:
        return replace(self, headers=[*self.headers, HttpHeader(name, value)])

    def with_headers(self, headers: Iterable[HttpHeader]) -> HttpRequest:
        return replace(self, headers=[*self.headers, *headers])

    def with_body(self, body: RequestBody) -> HttpRequest:
        return replace(self, headers=list(self.headers), body=body)

    def with_json_body(self, json: str) -> HttpRequest:
        return self.with_body(JsonBody(json))

    def with_text_body(self, text: str) -> HttpRequest:
        return self.with_body(TextBody(text))

    def with_timeout(self, seconds: int) -> HttpRequest:
        return replace(self, headers=list(self.headers), timeout_seconds=seconds)

    def without_timeout(self) -> HttpRequest:
        return replace(self, headers=list(self.headers), timeout_seconds=None)

    def with_follow_redirects(self, follow: bool) -> HttpRequest:
        return replace(self, headers=list(self.headers), follow_redirects=follow)

    def add_header(self, name: str, value: str) -> None:
        """Append a header to this request in place."""
        self.headers.append(HttpHeader(name, value))

    def get_header(self, name: str) -> Optional[str]:
        """Value of the first header with this name, ignoring case."""
        wanted = name.lower()
        return next((h.value for h in self.headers if h.name.lower() == wanted), None)

    def content_type(self) -> Optional[str]:
        return self.get_header("Content-Type")