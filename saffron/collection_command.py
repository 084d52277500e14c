"""The ``collection`` commands: create, list, show, edit, export and import."""

from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Iterable, Optional, Union

from termcolor import colored

from saffron.collection import Collection, SavedRequest, SerializableRequest
from saffron.importers import CollectionImportError, ImportedCollection, auto_import
from saffron.output import print_error, print_info, print_success
from saffron.request import HttpRequest, parse_method
from saffron.storage import Storage


def _heading(text: str) -> str:
    return colored(text, "cyan", attrs=["bold"])


def convert_imported_to_collection(imported: ImportedCollection) -> Collection:
    """Turn an imported collection into a stored collection."""
    collection = Collection(imported.name)
    if imported.description is not None:
        collection = collection.with_description(imported.description)
    for request in imported.requests:
        collection.add_request(
            SavedRequest(
                id=request.id,
                name=request.name,
                description=request.description,
                request=SerializableRequest(
                    method=request.method,
                    url=request.url,
                    headers=list(request.headers),
                    body=request.body,
                    timeout_seconds=None,
                ),
            )
        )
    return collection


def collection_new(
    storage: Storage, name: str, description: Optional[str]
) -> Optional[Collection]:
    """Create and save an empty collection."""
    collection = Collection(name, description)
    try:
        storage.save_collection(collection)
    except OSError as exc:
        print_error(f"Failed to create collection: {exc}")
        return None
    print_success(f"Collection '{name}' created")
    return collection


def collection_list(storage: Storage) -> list[str]:
    """Print and return the names of the stored collections."""
    try:
        names = storage.list_collections()
    except OSError as exc:
        print_error(f"Failed to list collections: {exc}")
        return []
    if not names:
        print_info("No collections found")
        return names
    print(f"\n{_heading('Collections')}:")
    for name in names:
        print(f"  • {name}")
    print()
    return names


def collection_show(storage: Storage, name: str) -> Optional[Collection]:
    """Print a collection's description and requests."""
    try:
        collection = storage.load_collection(name)
    except (OSError, ValueError) as exc:
        print_error(f"Failed to load collection: {exc}")
        return None

    print(f"\n{_heading('Collection')}: {collection.name}")
    if collection.description is not None:
        print(f"{colored('Description', attrs=['bold'])}: {collection.description}")
    print(f"\n{_heading('Requests')}:")
    if not collection.requests:
        print(f"  {colored('(no requests)', 'dark_grey')}")
    for saved in collection.requests:
        print(f"  • {saved.name} - {saved.request.url}")
    print()
    return collection


def collection_add(
    storage: Storage,
    collection: str,
    name: str,
    url: str,
    method: str,
    headers: Iterable[tuple[str, str]],
    body: Optional[str],
    description: Optional[str],
) -> Optional[SavedRequest]:
    """Add a request to an existing collection and save it."""
    try:
        stored = storage.load_collection(collection)
    except (OSError, ValueError):
        print_error(f"Collection '{collection}' not found")
        return None

    try:
        http_method = parse_method(method)
    except ValueError:
        print_error(f"Invalid HTTP method: {method}")
        return None

    request = HttpRequest(http_method, url)
    for key, value in headers:
        request.add_header(key, value)
    if body is not None:
        request = request.with_text_body(body)

    saved = SavedRequest(
        id=str(uuid.uuid4()),
        name=name,
        description=description,
        request=SerializableRequest.from_request(request),
    )
    stored.add_request(saved)

    try:
        storage.save_collection(stored)
    except OSError as exc:
        print_error(f"Failed to save collection: {exc}")
        return None
    print_success(f"Request '{name}' added to collection '{collection}'")
    return saved


def collection_delete(storage: Storage, name: str) -> None:
    """Delete a stored collection."""
    try:
        storage.delete_collection(name)
    except OSError as exc:
        print_error(f"Failed to delete collection: {exc}")
        return
    print_success(f"Collection '{name}' deleted")


def collection_export(
    storage: Storage, name: str, output: Union[str, os.PathLike[str]]
) -> None:
    """Write a collection to a JSON file."""
    try:
        collection = storage.load_collection(name)
    except (OSError, ValueError) as exc:
        print_error(f"Failed to load collection: {exc}")
        return

    text = json.dumps(collection.to_dict(), indent=2, ensure_ascii=False)
    try:
        Path(output).write_text(text, encoding="utf-8")
    except OSError as exc:
        print_error(f"Failed to write file: {exc}")
        return
    print_success(f"Collection exported to '{output}'")


def collection_import(
    storage: Storage, input_path: Union[str, os.PathLike[str]]
) -> list[Collection]:
    """Import collections from an export file; returns those that were saved."""
    try:
        contents = Path(input_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print_error(f"Failed to read file: {exc}")
        return []

    try:
        imported = auto_import(contents)
    except CollectionImportError as exc:
        print_error(f"Failed to import: {exc}")
        return []

    saved: list[Collection] = []
    failures = 0
    for item in imported:
        collection = convert_imported_to_collection(item)
        try:
            storage.save_collection(collection)
        except OSError as exc:
            print_error(f"Failed to save collection '{collection.name}': {exc}")
            failures += 1
            continue
        print_success(f"Imported collection '{collection.name}'")
        saved.append(collection)

    if saved:
        count = colored(str(len(saved)), "green", attrs=["bold"])
        print(f"\n{count} collection(s) imported successfully")
    if failures:
        count = colored(str(failures), "red", attrs=["bold"])
        print(f"{count} collection(s) failed to import")
    return saved