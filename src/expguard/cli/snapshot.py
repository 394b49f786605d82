"""Loading active-target snapshots from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any

import yaml

from expguard.core.exceptions import TargetFileError
from expguard.models.target import ActiveTarget

YAML_SUFFIXES = (".yaml", ".yml")


def _read_document(path: Path) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TargetFileError(f"Cannot read file: {e}", path=path) from e

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise TargetFileError(f"Invalid YAML: {e}", path=path) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise TargetFileError(f"Invalid JSON: {e}", path=path) from e


def load_targets(path: Path) -> list[ActiveTarget]:
    """Load active targets from a snapshot file.

    The document is either a list of targets or a mapping with a
    ``targets`` list. An empty document is an empty snapshot.

    Raises:
        TargetFileError: If the file is missing, unparsable or malformed.
    """
    if not path.exists():
        raise TargetFileError("File not found", path=path)

    data = _read_document(path)
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("targets", [])
    if not isinstance(data, list):
        raise TargetFileError("Snapshot must be a list of targets", path=path)

    targets = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise TargetFileError(
                "Target must be a mapping", path=path, details={"index": index}
            )
        try:
            targets.append(ActiveTarget.from_dict(item))
        except (KeyError, TypeError) as e:
            raise TargetFileError(
                f"Invalid target: {e}", path=path, details={"index": index}
            ) from e
        if not targets[-1].url_pattern:
            raise TargetFileError(
                "Target is missing url_pattern", path=path, details={"index": index}
            )
    return targets
