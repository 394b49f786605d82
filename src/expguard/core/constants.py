"""Guard constants and default values."""

from enum import Enum
from pathlib import Path
from typing import Final


class ExperimentStatus(str, Enum):
    """Experiment lifecycle states as reported by the persistence layer."""

    DRAFT = "draft"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class ConflictReason(str, Enum):
    """Why an active target collides with a candidate."""

    SELECTOR = "selector"
    ROLE = "role"


# URL patterns
WILDCARD: Final[str] = "*"
ROOT_PATTERN: Final[str] = "/"
ALL_PATHS_PATTERN: Final[str] = "/*"

# Identity keys
ROLE_PREFIX: Final[str] = "role:"

# Reserved payload
REDACTED_SELECTOR: Final[str] = "[selector-protected]"
DEFAULT_MAX_RESERVED_ITEMS: Final[int] = 10
RESERVATION_RULES: Final[dict[str, bool]] = {
    "strict": True,
    "check_overlaps": True,
    "prevent_indirect_changes": True,
}

# Indirect-effect heuristic
GLOBAL_SCOPE_PREFIXES: Final[tuple[str, ...]] = ("body", "html", ":root")

# Experiments whose targets count as reserved
ACTIVE_STATUSES: Final[frozenset[str]] = frozenset({ExperimentStatus.RUNNING.value})

# Error codes
CONFLICT_ERROR_CODE: Final[str] = "EXPERIMENT_CONFLICT"

# Messages
NO_CONFLICTS_MESSAGE: Final[str] = "No conflicts found"
CONFLICTS_HEADER: Final[str] = "Conflicts detected with active experiments:"

# Configuration
CONFIG_FILE_NAME: Final[str] = "expguard.config.json"
DEFAULT_LOG_LEVEL: Final[str] = "warning"


def get_config_path(base_path: Path | None = None) -> Path:
    """Get the configuration file path for a base directory."""
    base = base_path or Path.cwd()
    return base / CONFIG_FILE_NAME
