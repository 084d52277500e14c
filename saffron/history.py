"""Records of sent requests and the responses they got."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from saffron.response import HttpResponse

_PREVIEW_LIMIT = 500
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _pairs(raw: Any) -> list[tuple[str, str]]:
    return [(name, value) for name, value in raw]


@dataclass
class HistoryRequest:
    """The request part of a history entry."""

    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": [[name, value] for name, value in self.headers],
            "body": self.body,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryRequest:
        return cls(
            method=data["method"],
            url=data["url"],
            headers=_pairs(data["headers"]),
            body=data.get("body"),
        )


@dataclass
class HistoryResponse:
    """A summary of a response: status, headers and a body preview."""

    status: int
    status_text: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body_preview: str = ""

    @classmethod
    def from_response(cls, response: HttpResponse) -> HistoryResponse:
        """Summarise a response; text bodies over 500 bytes are cut short."""
        body = response.body
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            preview = f"<binary data, {len(body)} bytes>"
        else:
            if len(body) > _PREVIEW_LIMIT:
                head = body[:_PREVIEW_LIMIT].decode("utf-8", errors="ignore")
                preview = f"{head}..."
            else:
                preview = text
        return cls(
            status=response.status,
            status_text=response.status_text,
            headers=list(response.headers.items()),
            body_preview=preview,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "status_text": self.status_text,
            "headers": [[name, value] for name, value in self.headers],
            "body_preview": self.body_preview,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryResponse:
        return cls(
            status=data["status"],
            status_text=data["status_text"],
            headers=_pairs(data["headers"]),
            body_preview=data["body_preview"],
        )


@dataclass
class HistoryEntry:
    """One sent request with its response and timing."""

    id: str
    timestamp: int
    request: HistoryRequest
    response: HistoryResponse
    duration_ms: int

    @classmethod
    def create(
        cls, request: HistoryRequest, response: HistoryResponse, duration_ms: int
    ) -> HistoryEntry:
        """A new entry with a fresh id, stamped with the current time."""
        return cls(
            id=str(uuid.uuid4()),
            timestamp=int(time.time()),
            request=request,
            response=response,
            duration_ms=duration_ms,
        )

    def format_timestamp(self) -> str:
        """The timestamp as UTC ``YYYY-MM-DD HH:MM:SS``; the epoch if out of range."""
        try:
            moment = datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            moment = _EPOCH
        return moment.strftime("%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "request": self.request.to_dict(),
            "response": self.response.to_dict(),
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HistoryEntry:
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            request=HistoryRequest.from_dict(data["request"]),
            response=HistoryResponse.from_dict(data["response"]),
            duration_ms=data["duration_ms"],
        )