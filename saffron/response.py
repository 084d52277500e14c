"""HTTP response model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional


@dataclass
class HttpResponse:
    """A received HTTP response."""

    status: int
    status_text: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    elapsed: timedelta = timedelta(0)
    url: str = ""

    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def is_redirect(self) -> bool:
        return 300 <= self.status < 400

    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    def is_server_error(self) -> bool:
        return 500 <= self.status < 600

    def body_as_string(self) -> str:
        """Decode the body as UTF-8; raises UnicodeDecodeError if it is not."""
        return self.body.decode("utf-8")

    def body_as_str(self) -> Optional[str]:
        """The body as UTF-8 text, or None if it is not valid UTF-8."""
        try:
            return self.body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def get_header(self, name: str) -> Optional[str]:
        """Value of a header, matching the name case-insensitively."""
        wanted = name.lower()
        return next(
            (value for key, value in self.headers.items() if key.lower() == wanted),
            None,
        )

    def content_type(self) -> Optional[str]:
        return self.get_header("content-type")

    def _content_type_has(self, needle: str) -> bool:
        content_type = self.content_type()
        return content_type is not None and needle in content_type

    def is_json(self) -> bool:
        return self._content_type_has("application/json")

    def is_html(self) -> bool:
        return self._content_type_has("text/html")

    def is_xml(self) -> bool:
        return self._content_type_has("xml")

    def content_length(self) -> Optional[int]:
        """The Content-Length header as an integer, or None if absent or invalid."""
        value = self.get_header("content-length")
        if value is None:
            return None
        digits = value.removeprefix("+")
        if digits.isascii() and digits.isdigit():
            return int(digits)
        return None