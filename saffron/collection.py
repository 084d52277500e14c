"""Collections of saved requests, organised in nested folders."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from saffron.request import HttpMethod, HttpRequest, JsonBody, TextBody


@dataclass
class SerializableRequest:
    """A request in the plain form that is stored on disk."""

    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None
    timeout_seconds: Optional[int] = None

    @classmethod
    def from_request(cls, request: HttpRequest) -> SerializableRequest:
        """Capture a request; only text and JSON bodies are kept."""
        body = request.body
        if isinstance(body, TextBody):
            body_text: Optional[str] = body.text
        elif isinstance(body, JsonBody):
            body_text = body.json
        else:
            body_text = None
        return cls(
            method=request.method.value,
            url=request.url,
            headers=[(h.name, h.value) for h in request.headers],
            body=body_text,
            timeout_seconds=request.timeout_seconds,
        )

    def to_http_request(self) -> HttpRequest:
        """Rebuild a request; an unknown method falls back to GET."""
        try:
            method = HttpMethod(self.method.upper())
        except ValueError:
            method = HttpMethod.GET
        request = HttpRequest(method, self.url)
        for name, value in self.headers:
            request.add_header(name, value)
        if self.body is not None:
            request.body = TextBody(self.body)
        if self.timeout_seconds is not None:
            request.timeout_seconds = self.timeout_seconds
        return request

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "headers": [[name, value] for name, value in self.headers],
            "body": self.body,
            "timeout_seconds": self.timeout_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SerializableRequest:
        """Build from a stored dict; raises KeyError on missing required keys."""
        return cls(
            method=data["method"],
            url=data["url"],
            headers=[(name, value) for name, value in data["headers"]],
            body=data.get("body"),
            timeout_seconds=data.get("timeout_seconds"),
        )


@dataclass
class SavedRequest:
    """A named request stored in a collection."""

    id: str
    name: str
    description: Optional[str]
    request: SerializableRequest

    @classmethod
    def from_http_request(
        cls, request_id: str, name: str, request: HttpRequest
    ) -> SavedRequest:
        return cls(request_id, name, None, SerializableRequest.from_request(request))

    def with_description(self, description: str) -> SavedRequest:
        return replace(self, description=description)

    def to_http_request(self) -> HttpRequest:
        return self.request.to_http_request()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            **self.request.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SavedRequest:
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            request=SerializableRequest.from_dict(data),
        )


def _find_request(
    requests: list[SavedRequest], folders: list[Folder], request_id: str
) -> Optional[SavedRequest]:
    for request in requests:
        if request.id == request_id:
            return request
    for folder in folders:
        found = folder.find_request(request_id)
        if found is not None:
            return found
    return None


@dataclass
class Folder:
    """A named group of requests and sub-folders."""

    name: str
    description: Optional[str] = None
    requests: list[SavedRequest] = field(default_factory=list)
    folders: list[Folder] = field(default_factory=list)

    def with_description(self, description: str) -> Folder:
        return replace(self, description=description)

    def add_request(self, request: SavedRequest) -> None:
        self.requests.append(request)

    def add_folder(self, folder: Folder) -> None:
        self.folders.append(folder)

    def find_request(self, request_id: str) -> Optional[SavedRequest]:
        """Search this folder, then its sub-folders depth first."""
        return _find_request(self.requests, self.folders, request_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "requests": [r.to_dict() for r in self.requests],
            "folders": [f.to_dict() for f in self.folders],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Folder:
        return cls(
            name=data["name"],
            description=data.get("description"),
            requests=[SavedRequest.from_dict(r) for r in data["requests"]],
            folders=[Folder.from_dict(f) for f in data["folders"]],
        )


@dataclass
class Collection:
    """A named set of saved requests and folders."""

    name: str
    description: Optional[str] = None
    folders: list[Folder] = field(default_factory=list)
    requests: list[SavedRequest] = field(default_factory=list)

    def with_description(self, description: str) -> Collection:
        return replace(self, description=description)

    def add_request(self, request: SavedRequest) -> None:
        self.requests.append(request)

    def add_folder(self, folder: Folder) -> None:
        self.folders.append(folder)

    def find_request(self, request_id: str) -> Optional[SavedRequest]:
        """Search top-level requests, then folders depth first."""
        return _find_request(self.requests, self.folders, request_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "folders": [f.to_dict() for f in self.folders],
            "requests": [r.to_dict() for r in self.requests],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Collection:
        return cls(
            name=data["name"],
            description=data.get("description"),
            folders=[Folder.from_dict(f) for f in data["folders"]],
            requests=[SavedRequest.from_dict(r) for r in data["requests"]],
        )