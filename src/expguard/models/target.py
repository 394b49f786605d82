"""Target data models.

Active targets are the DOM regions reserved by running experiments; a
candidate is the region a new experiment proposes to change. Records
arriving from JSON stores may use camelCase keys, so ``from_dict`` accepts
both spellings.
"""

from dataclasses import dataclass
from typing import Any, Mapping


def _pick(data: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    """Read a field by its snake_case or camelCase name."""
    if snake in data:
        return data[snake]
    return data.get(camel, default)


@dataclass(frozen=True)
class TargetKeys:
    """Identity keys derived from a selector and/or a role."""

    target_key: str | None = None
    role_key: str | None = None

    @property
    def is_empty(self) -> bool:
        """Check whether neither key is present."""
        return self.target_key is None and self.role_key is None


@dataclass(frozen=True)
class ActiveTarget:
    """A DOM region currently reserved by a running experiment."""

    experiment_id: str
    url_pattern: str
    label: str
    target_key: str | None = None  # sha256 of canonical selector
    role_key: str | None = None  # "role:primary-cta"

    @property
    def keys(self) -> TargetKeys:
        """Get the identity keys of this target."""
        return TargetKeys(target_key=self.target_key, role_key=self.role_key)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "experiment_id": self.experiment_id,
            "url_pattern": self.url_pattern,
            "label": self.label,
            "target_key": self.target_key,
            "role_key": self.role_key,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ActiveTarget":
        """Create from dictionary."""
        experiment_id = _pick(data, "experiment_id", "experimentId")
        if experiment_id is None:
            raise KeyError("experiment_id")
        return cls(
            experiment_id=str(experiment_id),
            url_pattern=_pick(data, "url_pattern", "urlPattern"),
            label=data.get("label", ""),
            target_key=_pick(data, "target_key", "targetKey"),
            role_key=_pick(data, "role_key", "roleKey"),
        )


@dataclass(frozen=True)
class CandidateTarget:
    """A proposed reservation, not yet canonicalized."""

    url: str
    selector: str | None = None
    role: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "url": self.url,
            "selector": self.selector,
            "role": self.role,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateTarget":
        """Create from dictionary."""
        return cls(
            url=data["url"],
            selector=data.get("selector"),
            role=data.get("role"),
        )
