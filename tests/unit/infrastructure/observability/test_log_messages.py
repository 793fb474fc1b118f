"""Tests for structured log message templates."""

from seedshelf.infrastructure.observability.log_messages import LogMessages, LogTemplate


class TestLogTemplate:
    """Test LogTemplate formatting."""

    def test_tree_structure_with_hint(self) -> None:
        """Test fields use ├─ and the hint closes with └─."""
        template = LogTemplate(
            icon="⚠️", title="Title", fields={"A": "{a}", "B": "{b}"}, hint="Do {a}"
        )
        assert template.format(a="1", b="2") == "⚠️ Title\n├─ A: 1\n├─ B: 2\n└─ 💡 Do 1"

    def test_last_field_closes_without_hint(self) -> None:
        """Test the last field uses └─ when there is no hint."""
        template = LogTemplate(icon="✅", title="Done", fields={"A": "x"})
        assert template.format() == "✅ Done\n└─ A: x"

    def test_missing_placeholder(self) -> None:
        """Test missing values are marked instead of raising."""
        template = LogTemplate(icon="✅", title="T", fields={"A": "{nope}"})
        assert "<missing: 'nope'>" in template.format()


class TestLogMessages:
    """Test category log messages."""

    def test_category_rejected(self) -> None:
        """Test rejected message includes name and reason."""
        message = LogMessages.category_rejected("a//b", "Invalid category name")
        assert message.splitlines() == [
            "⚠️ Category Rejected",
            "├─ Category: a//b",
            "└─ Reason: Invalid category name",
        ]

    def test_category_saved_with_braces_in_name(self) -> None:
        """Test names with braces are printed verbatim."""
        message = LogMessages.category_saved("{weird}", "Created", {"Ratio limit": -2.0})
        assert "├─ Category: {weird}" in message
        assert "└─ Ratio limit: -2.0" in message
