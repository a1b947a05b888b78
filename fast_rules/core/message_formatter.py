from __future__ import annotations

import re
from typing import Any, Dict, List

from fast_rules.decorators.deprecated_decorator import deprecated

PROPERTY_NAME_PLACEHOLDER = "PropertyName"
PROPERTY_VALUE_PLACEHOLDER = "PropertyValue"
COLLECTION_INDEX_PLACEHOLDER = "CollectionIndex"

# {Name} or {Name:format}
_PLACEHOLDER_RE = re.compile(r"\{([^{}:]+)(?::([^{}]*))?\}")


class MessageFormatter:
    """
    Accumulates placeholder values for a single failure and renders message templates.

    One formatter belongs to exactly one validation context; it is populated
    while a failure is prepared and read once when the message is built.

    Usage:
        formatter = MessageFormatter()
        formatter.append_property_name("Email").append_argument("MaxLength", 50)
        formatter.build_message("'{PropertyName}' must be {MaxLength} characters or fewer.")
    """

    def __init__(self) -> None:
        self._placeholder_values: Dict[str, Any] = {}
        self._additional_arguments: List[Any] = []

    @property
    def placeholder_values(self) -> Dict[str, Any]:
        """Named placeholder values, in insertion order."""
        return self._placeholder_values

    @property
    def additional_arguments(self) -> List[Any]:
        """Legacy positional arguments used for `{0}`-style slots."""
        return self._additional_arguments

    def append_argument(self, name: str, value: Any) -> "MessageFormatter":
        """Add or overwrite a named placeholder. Last write wins."""
        self._placeholder_values[name] = value
        return self

    def append_property_name(self, name: str) -> "MessageFormatter":
        return self.append_argument(PROPERTY_NAME_PLACEHOLDER, name)

    def append_property_value(self, value: Any) -> "MessageFormatter":
        return self.append_argument(PROPERTY_VALUE_PLACEHOLDER, value)

    @deprecated("Use append_argument with a named placeholder instead.")
    def append_additional_arguments(self, *args: Any) -> "MessageFormatter":
        self._additional_arguments.extend(args)
        return self

    def has_placeholder(self, name: str) -> bool:
        return name in self._placeholder_values

    def build_message(self, template: str) -> str:
        """
        Replace every known placeholder in `template`.

        Placeholders without a registered value are left untouched, so a
        misconfigured template degrades to literal text instead of raising.
        """
        if not template:
            return ""
        return _PLACEHOLDER_RE.sub(self._replace, template)

    def copy(self) -> "MessageFormatter":
        clone = MessageFormatter()
        clone._placeholder_values = dict(self._placeholder_values)
        clone._additional_arguments = list(self._additional_arguments)
        return clone

    def reset(self) -> None:
        self._placeholder_values.clear()
        self._additional_arguments.clear()

    def _replace(self, match: re.Match) -> str:
        name, fmt = match.group(1), match.group(2)

        if name in self._placeholder_values:
            return _format_value(self._placeholder_values[name], fmt)

        if name.isdecimal() and int(name) < len(self._additional_arguments):
            return _format_value(self._additional_arguments[int(name)], fmt)

        return match.group(0)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"MessageFormatter(placeholder_values={self._placeholder_values!r})"


def _format_value(value: Any, fmt: str | None) -> str:
    if value is None:
        return ""
    if fmt:
        try:
            return format(value, fmt)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


__all__ = [
    "MessageFormatter",
    "PROPERTY_NAME_PLACEHOLDER",
    "PROPERTY_VALUE_PLACEHOLDER",
    "COLLECTION_INDEX_PLACEHOLDER",
]
