"""On-disk storage of collections, environments and request history."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from saffron.collection import Collection
from saffron.environment import EnvironmentSet
from saffron.history import HistoryEntry

_T = TypeVar("_T")
_HISTORY_LIMIT = 100
_FORBIDDEN = frozenset('/\\:*?"<>|')


def sanitize_filename(name: str) -> str:
    """Replace characters that are not allowed in file names with ``_``."""
    return "".join("_" if c in _FORBIDDEN else c for c in name)


def _write_json(path: Path, data: Any) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def _read_json(path: Path, build: Callable[[Any], _T]) -> _T:
    """Read and decode a JSON file; malformed content raises ValueError."""
    data = json.loads(path.read_text(encoding="utf-8"))
    try:
        return build(data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid data in {path}: {exc}") from exc


class Storage:
    """Files under a base directory, ``~/.saffron`` by default."""

    def __init__(self, base_path: Optional[str | os.PathLike[str]] = None) -> None:
        self.base_path = (
            Path(base_path) if base_path is not None else Path.home() / ".saffron"
        )
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _subdir(self, name: str) -> Path:
        directory = self.base_path / name
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        return directory

    def collections_dir(self) -> Path:
        return self._subdir("collections")

    def environments_dir(self) -> Path:
        return self._subdir("environments")

    def _collection_path(self, name: str) -> Path:
        return self.collections_dir() / f"{sanitize_filename(name)}.json"

    def save_collection(self, collection: Collection) -> None:
        _write_json(self._collection_path(collection.name), collection.to_dict())

    def load_collection(self, name: str) -> Collection:
        """Load a collection; raises OSError if absent, ValueError if malformed."""
        return _read_json(self._collection_path(name), Collection.from_dict)

    def list_collections(self) -> list[str]:
        """Names of the stored collection files, sorted."""
        directory = self.collections_dir()
        if not directory.exists():
            return []
        return sorted(path.stem for path in directory.iterdir() if path.suffix == ".json")

    def load_collections(self) -> list[Collection]:
        """All collections that load cleanly; broken files are skipped."""
        collections = []
        for name in self.list_collections():
            try:
                collections.append(self.load_collection(name))
            except (OSError, ValueError):
                continue
        return collections

    def delete_collection(self, name: str) -> None:
        self._collection_path(name).unlink()

    def _environments_file(self) -> Path:
        return self.environments_dir() / "environments.json"

    def save_environment_set(self, env_set: EnvironmentSet) -> None:
        _write_json(self._environments_file(), env_set.to_dict())

    def load_environment_set(self) -> EnvironmentSet:
        """The stored environments, or an empty set if none were saved."""
        path = self._environments_file()
        if not path.exists():
            return EnvironmentSet()
        return _read_json(path, EnvironmentSet.from_dict)

    def history_file(self) -> Path:
        return self.base_path / "history.json"

    def save_history_entry(self, entry: HistoryEntry) -> None:
        """Prepend an entry, keeping only the 100 most recent."""
        history = [entry, *self.load_history()][:_HISTORY_LIMIT]
        _write_json(self.history_file(), [e.to_dict() for e in history])

    def load_history(self) -> list[HistoryEntry]:
        """History entries, newest first."""
        path = self.history_file()
        if not path.exists():
            return []
        return _read_json(path, lambda data: [HistoryEntry.from_dict(e) for e in data])

    def clear_history(self) -> None:
        self.history_file().unlink(missing_ok=True)