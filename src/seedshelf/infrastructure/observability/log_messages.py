"""Structured log message templates for consistent, human-readable logging.

Hey future me - instead of "add failed" we log things like:

    ⚠️ Category Rejected
    ├─ Category: a//b
    ├─ Reason: Invalid category name
    └─ 💡 Pick a name without '\\', leading/trailing '/' or '//'

The templates follow these principles:
1. **Icon First** - Visual marker for quick scanning (⚠️ = rejected, ✅ = success)
2. **Action/Entity** - What happened to which category
3. **Context** - Names, paths, limits
4. **Hints** - Actionable next steps

Usage:
    from seedshelf.infrastructure.observability.log_messages import LogMessages

    logger.warning(LogMessages.category_rejected(name="a//b", reason="Invalid category name"))
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class LogTemplate:
    """A reusable log message template with placeholders.

    The format() method replaces {placeholders} in field values and the hint
    with actual values and adds the tree structure.
    """

    icon: str
    title: str
    fields: dict[str, str]
    hint: str | None = None

    def format(self, **kwargs: Any) -> str:
        """Format the template with provided values.

        Args:
            **kwargs: Values to fill into template placeholders

        Returns:
            Formatted multi-line log message with icon, title, fields, and optional hint
        """
        lines = [f"{self.icon} {self.title}"]

        field_items = list(self.fields.items())
        for i, (key, value_template) in enumerate(field_items):
            # Last field uses └─ instead of ├─
            prefix = "└─" if i == len(field_items) - 1 and not self.hint else "├─"

            try:
                value = value_template.format(**kwargs)
            except KeyError as e:
                value = f"<missing: {e}>"

            lines.append(f"{prefix} {key}: {value}")

        if self.hint:
            try:
                hint_text = self.hint.format(**kwargs)
            except KeyError as e:
                hint_text = f"<missing: {e}>"
            lines.append(f"└─ 💡 {hint_text}")

        return "\n".join(lines)


class LogMessages:
    """Collection of standardized log message templates for category editing."""

    @staticmethod
    def category_rejected(name: str, reason: str, hint: str | None = None) -> str:
        """Format a rejected category submission.

        Args:
            name: Category name as submitted
            reason: Short reason (the caption shown to the user)
            hint: Custom hint
        """
        template = LogTemplate(
            icon="⚠️",
            title="Category Rejected",
            fields={"Category": "{name}", "Reason": "{reason}"},
            hint=hint,
        )
        return template.format(name=name, reason=reason)

    @staticmethod
    def category_saved(
        name: str,
        action: str,
        details: dict[str, Any] | None = None,
    ) -> str:
        """Format a successful category create/edit.

        Args:
            name: Category name
            action: "Created" or "Updated"
            details: Extra fields to display (limits, paths)
        """
        fields = {"Category": name}
        if details:
            for key, value in details.items():
                fields[key] = str(value)

        # No placeholders here - values are already final, so escape braces
        escaped = {key: value.replace("{", "{{").replace("}", "}}") for key, value in fields.items()}
        template = LogTemplate(icon="✅", title=f"Category {action}", fields=escaped)
        return template.format()

    @staticmethod
    def store_write_ignored(name: str, operation: str, reason: str) -> str:
        """Format a store write that changed nothing.

        Args:
            name: Category name
            operation: "add" or "edit"
            reason: Why the store ignored the write
        """
        template = LogTemplate(
            icon="ℹ️",
            title="Category Store Write Ignored",
            fields={"Category": "{name}", "Operation": "{operation}", "Reason": "{reason}"},
        )
        return template.format(name=name, operation=operation, reason=reason)
