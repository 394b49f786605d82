"""Unit tests for conflict message formatting."""

from expguard.conflicts.report import format_conflict_error, format_conflict_line
from expguard.models.target import ActiveTarget


def _target(experiment_id: str, label: str, pattern: str) -> ActiveTarget:
    return ActiveTarget(experiment_id=experiment_id, url_pattern=pattern, label=label)


class TestFormatConflictError:
    """Tests for format_conflict_error."""

    def test_no_conflicts(self):
        """Test the empty message."""
        assert format_conflict_error([]) == "No conflicts found"

    def test_single_line(self):
        """Test the per-conflict line format."""
        line = format_conflict_line(_target("exp_1", "Add to cart", "/products/*"))
        assert line == "  - Experiment exp_1: Add to cart on /products/*"

    def test_multiple_conflicts(self):
        """Test one line per conflict under a header."""
        message = format_conflict_error([
            _target("exp_1", "Add to cart", "/products/*"),
            _target("exp_2", "Hero", "/"),
        ])

        assert message == (
            "Conflicts detected with active experiments:\n"
            "  - Experiment exp_1: Add to cart on /products/*\n"
            "  - Experiment exp_2: Hero on /"
        )
