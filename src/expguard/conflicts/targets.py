"""Projection of experiment records into active targets.

The persistence layer hands over plain experiment records; this module
turns the running ones into the snapshot the detector consumes. Records
look like::

    {
        "id": "exp_1",
        "status": "running",
        "url": "https://shop.example/products/shoe-1",   # or "pattern"
        "variants": [{"selector": "button.add", "role": "primary-cta",
                      "label": "Add to cart"}],
    }
"""

from typing import Any, Iterable, Mapping

from expguard.core.constants import ACTIVE_STATUSES
from expguard.models.target import ActiveTarget
from expguard.conflicts.keys import target_keys
from expguard.normalization.url import extract_url_pattern


def is_active(experiment: Mapping[str, Any]) -> bool:
    """Check if an experiment currently reserves its targets."""
    status = experiment.get("status")
    if status is None:
        return False
    return str(getattr(status, "value", status)).lower() in ACTIVE_STATUSES


def _url_config(experiment: Mapping[str, Any]) -> Any:
    for key in ("url_pattern", "pattern", "url"):
        if experiment.get(key):
            return experiment[key]
    return None


def _variant_label(experiment: Mapping[str, Any], variant: Mapping[str, Any]) -> str:
    for value in (
        variant.get("label"),
        variant.get("role"),
        variant.get("selector"),
        experiment.get("name"),
    ):
        if value:
            return str(value)
    return str(experiment.get("id", ""))


def targets_from_experiments(
    experiments: Iterable[Mapping[str, Any]],
    exclude_experiment_id: str | None = None,
) -> list[ActiveTarget]:
    """Build the active-target snapshot from experiment records.

    Args:
        experiments: Experiment records.
        exclude_experiment_id: Experiment being edited; its own targets are
            never reported as conflicts.

    Returns:
        One target per variant of each running experiment.
    """
    targets: list[ActiveTarget] = []

    for experiment in experiments:
        experiment_id = str(experiment.get("id", ""))
        if not is_active(experiment):
            continue
        if exclude_experiment_id is not None and experiment_id == str(exclude_experiment_id):
            continue

        url_pattern = extract_url_pattern(_url_config(experiment))

        for variant in experiment.get("variants") or []:
            keys = target_keys(variant.get("selector"), variant.get("role"))
            targets.append(ActiveTarget(
                experiment_id=experiment_id,
                url_pattern=url_pattern,
                label=_variant_label(experiment, variant),
                target_key=keys.target_key,
                role_key=keys.role_key,
            ))

    return targets
