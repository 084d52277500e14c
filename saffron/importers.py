"""Importing request collections from other HTTP tools' export files.

Only the Insomnia v4 export format is recognised at present.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from saffron.jsonparse import ParseError, parse_json


class CollectionImportError(Exception):
    """Base class for failures while importing a collection."""

    prefix = ""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}{self.detail}"


class InvalidFormatError(CollectionImportError):
    """The content is not in a recognised or well-formed export format."""

    prefix = "Invalid format: "


class UnsupportedVersionError(CollectionImportError):
    """The export format version is not supported."""

    prefix = "Unsupported version: "


class ImportParseError(CollectionImportError):
    """The content could not be parsed as JSON."""

    prefix = "Parse error: "


class MissingFieldError(CollectionImportError):
    """A required field is absent or has the wrong type."""

    prefix = "Missing required field: "


@dataclass
class ImportedRequest:
    """A request read from an export, independent of its source format."""

    id: str
    name: str
    description: Optional[str]
    method: str
    url: str
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None


@dataclass
class ImportedCollection:
    """A collection read from an export, independent of its source format."""

    name: str
    description: Optional[str] = None
    requests: list[ImportedRequest] = field(default_factory=list)


class InsomniaResourceType(Enum):
    """The kinds of Insomnia resource that are understood."""

    WORKSPACE = "workspace"
    REQUEST_GROUP = "request_group"
    REQUEST = "request"
    ENVIRONMENT = "environment"


@dataclass
class InsomniaResource:
    """One resource of an Insomnia export.

    ``method``, ``url``, ``headers`` and ``body`` are used by requests only,
    ``data`` by environments only.
    """

    id: str
    name: str
    parent_id: Optional[str]
    kind: InsomniaResourceType
    description: Optional[str] = None
    method: str = ""
    url: str = ""
    headers: list[tuple[str, str]] = field(default_factory=list)
    body: Optional[str] = None
    data: dict[str, str] = field(default_factory=dict)


@dataclass
class InsomniaExport:
    """A parsed Insomnia export document."""

    version: str
    resources: list[InsomniaResource] = field(default_factory=list)


def _get_string(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if isinstance(value, str):
        return value
    raise MissingFieldError(key)


def _get_optional_string(obj: dict[str, Any], key: str) -> Optional[str]:
    value = obj.get(key)
    return value if isinstance(value, str) else None


def _format_version(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _parse_headers(raw: Any) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        return []
    headers = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        name = _get_optional_string(item, "name")
        value = _get_optional_string(item, "value")
        if name is not None and value is not None:
            headers.append((name, value))
    return headers


def _parse_resource(obj: dict[str, Any]) -> Optional[InsomniaResource]:
    resource_id = _get_string(obj, "_id")
    name = _get_string(obj, "name")
    parent_id = _get_optional_string(obj, "parentId")
    type_name = _get_string(obj, "_type")

    try:
        kind = InsomniaResourceType(type_name)
    except ValueError:
        return None

    resource = InsomniaResource(resource_id, name, parent_id, kind)
    if kind in (InsomniaResourceType.WORKSPACE, InsomniaResourceType.REQUEST_GROUP):
        resource.description = _get_optional_string(obj, "description")
    elif kind is InsomniaResourceType.REQUEST:
        resource.method = _get_string(obj, "method")
        resource.url = _get_string(obj, "url")
        resource.description = _get_optional_string(obj, "description")
        resource.headers = _parse_headers(obj.get("headers"))
        body = obj.get("body")
        resource.body = _get_optional_string(body, "text") if isinstance(body, dict) else None
    else:
        data = obj.get("data")
        if isinstance(data, dict):
            resource.data = {k: v for k, v in data.items() if isinstance(v, str)}
    return resource


def can_import_insomnia(content: str) -> bool:
    """Whether the text looks like an Insomnia export."""
    return '"__export_format"' in content and '"resources"' in content


def parse_insomnia(content: str) -> InsomniaExport:
    """Parse an Insomnia v4 export; unknown resource types are skipped."""
    try:
        root = parse_json(content)
    except ParseError as exc:
        raise ImportParseError(str(exc)) from exc

    if not isinstance(root, dict):
        raise InvalidFormatError("Root must be an object")

    version = _format_version(root.get("__export_format"))
    if version is None:
        raise MissingFieldError("__export_format")
    if version != "4":
        raise UnsupportedVersionError(f"Insomnia v{version} (only v4 supported)")

    if "resources" not in root:
        raise MissingFieldError("resources")
    raw_resources = root["resources"]
    if not isinstance(raw_resources, list):
        raise InvalidFormatError("resources must be an array")

    resources = []
    for item in raw_resources:
        if not isinstance(item, dict):
            continue
        resource = _parse_resource(item)
        if resource is not None:
            resources.append(resource)
    return InsomniaExport(version, resources)


def convert_insomnia(export: InsomniaExport) -> list[ImportedCollection]:
    """Make one collection per workspace, holding its direct requests."""
    workspaces: dict[str, tuple[str, Optional[str]]] = {}
    children: defaultdict[str, list[InsomniaResource]] = defaultdict(list)

    for resource in export.resources:
        if resource.kind is InsomniaResourceType.WORKSPACE:
            workspaces[resource.id] = (resource.name, resource.description)
        elif resource.kind in (
            InsomniaResourceType.REQUEST,
            InsomniaResourceType.REQUEST_GROUP,
        ):
            children[resource.parent_id or ""].append(resource)

    return [
        ImportedCollection(
            name=name,
            description=description,
            requests=[
                ImportedRequest(
                    id=child.id,
                    name=child.name,
                    description=child.description,
                    method=child.method,
                    url=child.url,
                    headers=list(child.headers),
                    body=child.body,
                )
                for child in children.get(workspace_id, [])
                if child.kind is InsomniaResourceType.REQUEST
            ],
        )
        for workspace_id, (name, description) in workspaces.items()
    ]


def import_insomnia(content: str) -> list[ImportedCollection]:
    """Parse and convert an Insomnia export."""
    return convert_insomnia(parse_insomnia(content))


def auto_import(content: str) -> list[ImportedCollection]:
    """Detect the export format of ``content`` and import it."""
    if can_import_insomnia(content):
        return import_insomnia(content)
    raise InvalidFormatError("Unknown format. Supported: Insomnia v4")