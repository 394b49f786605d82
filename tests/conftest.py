"""Pytest configuration and fixtures for expguard tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from expguard.conflicts.keys import target_keys
from expguard.core.config import GuardConfig
from expguard.models.target import ActiveTarget


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def config() -> GuardConfig:
    """Create default configuration."""
    return GuardConfig()


@pytest.fixture
def make_target():
    """Build an active target from a raw selector and/or role."""
    def _create(
        experiment_id: str,
        url_pattern: str,
        selector: str | None = None,
        role: str | None = None,
        label: str | None = None,
    ) -> ActiveTarget:
        keys = target_keys(selector, role)
        return ActiveTarget(
            experiment_id=experiment_id,
            url_pattern=url_pattern,
            label=label or selector or role or experiment_id,
            target_key=keys.target_key,
            role_key=keys.role_key,
        )
    return _create


@pytest.fixture
def active_targets(make_target) -> list[ActiveTarget]:
    """A snapshot spanning product, collection and global reservations."""
    return [
        make_target("exp_cta", "/products/*", selector="button.add-to-cart",
                    label="Add to cart"),
        make_target("exp_hero", "/products/*", role="Hero Banner",
                    label="Product hero"),
        make_target("exp_collections", "/collections/*", selector="h1.title",
                    label="Collection title"),
        make_target("exp_home", "/", selector=".promo", label="Home promo"),
    ]
