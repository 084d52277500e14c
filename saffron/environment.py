"""Named sets of variables used to fill ``{{name}}`` placeholders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Environment:
    """A named mapping of template variables."""

    name: str
    variables: dict[str, str] = field(default_factory=dict)

    def set(self, key: str, value: str) -> None:
        self.variables[key] = value

    def get(self, key: str) -> Optional[str]:
        return self.variables.get(key)

    def remove(self, key: str) -> Optional[str]:
        """Remove a variable and return its value, or None if it was absent."""
        return self.variables.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self.variables

    def resolve_template(self, template: str) -> str:
        """Replace every ``{{key}}`` with its value; unknown keys stay as they are."""
        result = template
        for key, value in self.variables.items():
            result = result.replace(f"{{{{{key}}}}}", value)
        return result

    def resolve_request_url(self, url: str) -> str:
        return self.resolve_template(url)

    def resolve_header_value(self, value: str) -> str:
        return self.resolve_template(value)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "variables": dict(self.variables)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Environment:
        return cls(name=data["name"], variables=dict(data["variables"]))


@dataclass
class EnvironmentSet:
    """All environments, with the name of the active one."""

    active: Optional[str] = None
    environments: list[Environment] = field(default_factory=list)

    def add(self, env: Environment) -> None:
        self.environments.append(env)

    def get(self, name: str) -> Optional[Environment]:
        """The first environment with this name, or None."""
        return next((env for env in self.environments if env.name == name), None)

    def remove(self, name: str) -> Optional[Environment]:
        """Remove and return the first environment with this name, or None."""
        env = self.get(name)
        if env is not None:
            self.environments.remove(env)
        return env

    def set_active(self, name: str) -> None:
        self.active = name

    def get_active(self) -> Optional[Environment]:
        return None if self.active is None else self.get(self.active)

    def to_dict(self) -> dict[str, Any]:
        return {
            "active": self.active,
            "environments": [env.to_dict() for env in self.environments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnvironmentSet:
        return cls(
            active=data.get("active"),
            environments=[Environment.from_dict(e) for e in data["environments"]],
        )