"""Guard configuration loading and validation."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from expguard.core.constants import (
    CONFLICT_ERROR_CODE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_RESERVED_ITEMS,
    get_config_path,
)
from expguard.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PayloadConfig:
    """Reserved-payload configuration."""

    max_items: int = DEFAULT_MAX_RESERVED_ITEMS

    def __post_init__(self) -> None:
        if self.max_items < 0:
            raise ValueError(f"max_items must be non-negative, got {self.max_items}")


@dataclass(frozen=True)
class ConflictPolicyConfig:
    """How the facade reacts to detected conflicts."""

    strict: bool = True
    error_code: str = CONFLICT_ERROR_CODE


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration for the CLI."""

    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class GuardConfig:
    """Complete guard configuration."""

    version: str = "1.0"
    payload: PayloadConfig = field(default_factory=PayloadConfig)
    conflicts: ConflictPolicyConfig = field(default_factory=ConflictPolicyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from dictionary."""
        return cls(
            version=data.get("version", "1.0"),
            payload=PayloadConfig(**data.get("payload", {})),
            conflicts=ConflictPolicyConfig(**data.get("conflicts", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )

    @classmethod
    def load(cls, base_path: Path | None = None) -> Self:
        """Load configuration from file or use defaults."""
        config_path = get_config_path(base_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.from_dict(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {e}",
                details={"path": str(config_path)},
            ) from e
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigurationError(
                f"Invalid configuration values: {e}",
                details={"path": str(config_path)},
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "version": self.version,
            "payload": {
                "max_items": self.payload.max_items,
            },
            "conflicts": {
                "strict": self.conflicts.strict,
                "error_code": self.conflicts.error_code,
            },
            "logging": {
                "level": self.logging.level,
            },
        }
