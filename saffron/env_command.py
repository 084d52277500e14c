"""The ``env`` commands: list, set, show, delete and activate environments."""

from __future__ import annotations

from typing import Iterable, Optional

from termcolor import colored

from saffron.environment import Environment, EnvironmentSet
from saffron.output import print_error, print_info, print_success
from saffron.storage import Storage


def _heading(text: str) -> str:
    return colored(text, "cyan", attrs=["bold"])


def _load(storage: Storage) -> EnvironmentSet:
    try:
        return storage.load_environment_set()
    except (OSError, ValueError):
        return EnvironmentSet()


def _save(storage: Storage, env_set: EnvironmentSet, success: str, failure: str) -> bool:
    try:
        storage.save_environment_set(env_set)
    except OSError as exc:
        print_error(f"{failure}: {exc}")
        return False
    print_success(success)
    return True


def env_list(storage: Storage) -> list[str]:
    """Print and return the names of all environments, marking the active one."""
    env_set = _load(storage)
    names = [environment.name for environment in env_set.environments]
    if not names:
        print_info("No environments found")
        return names

    active = env_set.get_active()
    active_name = active.name if active is not None else None
    print(f"\n{_heading('Environments')}:")
    for name in names:
        marker = colored("* ", "green") if name == active_name else "  "
        print(f"{marker}• {name}")
    print()
    return names


def env_set(
    storage: Storage, name: str, variables: Iterable[tuple[str, str]]
) -> Optional[Environment]:
    """Add an environment holding the given variables and save it."""
    store = _load(storage)
    environment = Environment(name)
    for key, value in dict(variables).items():
        environment.set(key, value)
    store.add(environment)
    if not _save(
        storage, store, f"Environment '{name}' saved", "Failed to save environment"
    ):
        return None
    return environment


def env_show(storage: Storage, name: str) -> Optional[Environment]:
    """Print an environment's variables."""
    environment = _load(storage).get(name)
    if environment is None:
        print_error(f"Environment '{name}' not found")
        return None

    print(f"\n{_heading('Environment')}: {environment.name}")
    print(f"\n{_heading('Variables')}:")
    if not environment.variables:
        print(f"  {colored('(no variables)', 'dark_grey')}")
    for key, value in environment.variables.items():
        print(f"  {colored(key, 'white')} = {value}")
    print()
    return environment


def env_delete(storage: Storage, name: str) -> None:
    """Remove an environment, if present, and save the change."""
    store = _load(storage)
    store.remove(name)
    _save(storage, store, f"Environment '{name}' deleted", "Failed to save changes")


def env_use(storage: Storage, name: str) -> bool:
    """Make an existing environment the active one."""
    store = _load(storage)
    if store.get(name) is None:
        print_error(f"Environment '{name}' not found")
        return False
    store.set_active(name)
    return _save(
        storage, store, f"Active environment set to '{name}'", "Failed to save changes"
    )