"""Unit tests for the expguard CLI."""

import json

import pytest
import yaml
from typer.testing import CliRunner

from expguard.cli.main import app
from expguard.conflicts.keys import target_keys

runner = CliRunner()


@pytest.fixture
def snapshot_file(temp_dir, active_targets):
    """Write the active-target snapshot as JSON."""
    path = temp_dir / "targets.json"
    path.write_text(json.dumps([t.to_dict() for t in active_targets]))
    return path


@pytest.fixture
def yaml_snapshot_file(temp_dir, active_targets):
    """Write the active-target snapshot as YAML under a targets key."""
    path = temp_dir / "targets.yaml"
    path.write_text(yaml.safe_dump({"targets": [t.to_dict() for t in active_targets]}))
    return path


class TestUtilityCommands:
    """Tests for the single-value commands."""

    def test_help(self):
        """Test help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "check" in result.stdout

    def test_normalize(self):
        """Test URL normalization output."""
        result = runner.invoke(app, ["normalize", "https://x.com/products/shoe-123"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "/products/*"

    def test_overlap(self):
        """Test overlap exit codes."""
        assert runner.invoke(app, ["overlap", "/products/*", "/products/shoe"]).exit_code == 0
        assert runner.invoke(app, ["overlap", "/", "/products"]).exit_code == 1

    def test_canonicalize(self):
        """Test selector canonicalization output."""
        result = runner.invoke(app, ["canonicalize", "DIV.b.a"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "div.a.b"

    def test_keys(self):
        """Test key output as JSON."""
        result = runner.invoke(app, ["keys", "--selector", "div .a.b", "--role", "CTA"])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["target_key"] == target_keys("DIV.b.a").target_key
        assert data["role_key"] == "role:cta"

    def test_indirect(self):
        """Test the advisory heuristic never fails the command."""
        flagged = runner.invoke(app, ["indirect", ".card .title", ".card .price"])
        assert flagged.exit_code == 0
        assert "possible indirect effect" in flagged.stdout

        clean = runner.invoke(app, ["indirect", ".a", ".b"])
        assert clean.exit_code == 0
        assert "no indirect effect" in clean.stdout

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        result = runner.invoke(app, ["--log-level", "loud", "normalize", "/"])
        assert result.exit_code == 1


class TestCheckCommand:
    """Tests for the check command."""

    def test_no_conflicts(self, snapshot_file):
        """Test a clean candidate exits with code 0."""
        result = runner.invoke(app, [
            "check", "--targets", str(snapshot_file),
            "--url", "/products/1", "--selector", ".reviews",
        ])
        assert result.exit_code == 0
        assert "No conflicts found" in result.stdout

    def test_conflicts(self, snapshot_file):
        """Test a colliding candidate exits with code 1 and lists targets."""
        result = runner.invoke(app, [
            "check", "--targets", str(snapshot_file),
            "--url", "https://x.com/products/blue-shoe",
            "--selector", "BUTTON.add-to-cart",
        ])
        assert result.exit_code == 1
        assert "exp_cta" in result.stdout

    def test_json_output(self, yaml_snapshot_file):
        """Test JSON output from a YAML snapshot."""
        result = runner.invoke(app, [
            "check", "--targets", str(yaml_snapshot_file),
            "--url", "/products/9", "--role", "Hero Banner", "--json",
        ])
        assert result.exit_code == 1

        data = json.loads(result.stdout)
        assert data["candidate_pattern"] == "/products/*"
        assert [m["target"]["experiment_id"] for m in data["matches"]] == ["exp_hero"]
        assert data["matches"][0]["reason"] == "role"

    def test_missing_snapshot(self, temp_dir):
        """Test a missing snapshot file is reported."""
        result = runner.invoke(app, [
            "check", "--targets", str(temp_dir / "missing.json"), "--url", "/",
        ])
        assert result.exit_code == 1

    def test_invalid_snapshot(self, temp_dir):
        """Test a malformed snapshot file is reported."""
        path = temp_dir / "targets.json"
        path.write_text(json.dumps({"targets": "nope"}))

        result = runner.invoke(app, ["check", "--targets", str(path), "--url", "/"])
        assert result.exit_code == 1


class TestReservedCommand:
    """Tests for the reserved command."""

    def test_payload(self, snapshot_file):
        """Test the payload JSON for a product page."""
        result = runner.invoke(app, [
            "reserved", "--targets", str(snapshot_file), "--url", "/products/shoe-1",
        ])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert data["context_pattern"] == "/products/*"
        assert [t["experiment_id"] for t in data["reserved_targets"]] == [
            "exp_cta", "exp_hero",
        ]
        assert "button.add-to-cart" not in result.stdout

    def test_max_items(self, snapshot_file):
        """Test the max-items override."""
        result = runner.invoke(app, [
            "reserved", "--targets", str(snapshot_file),
            "--url", "/products/shoe-1", "--max-items", "1",
        ])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["reserved_targets"]) == 1

    def test_config_dir(self, snapshot_file, temp_dir):
        """Test the payload bound is read from the config directory."""
        (temp_dir / "expguard.config.json").write_text(
            json.dumps({"payload": {"max_items": 0}})
        )

        result = runner.invoke(app, [
            "--config-dir", str(temp_dir),
            "reserved", "--targets", str(snapshot_file), "--url", "/products/shoe-1",
        ])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["reserved_targets"] == []
