from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fast_rules.core.message_formatter import MessageFormatter
from fast_rules.core.validation_context import ParentContext, ValidationContext

if TYPE_CHECKING:
    from fast_rules.contracts.property_validator import PropertyValidator


class MessageBuilderContext:
    """Handed to a custom message builder: the failing context plus the validator that failed."""

    def __init__(self, context: ValidationContext, validator: "PropertyValidator") -> None:
        self.context = context
        self.validator = validator

    @property
    def property_name(self) -> str:
        return self.context.property_name

    @property
    def display_name(self) -> str:
        return self.context.display_name

    @property
    def property_value(self) -> Any:
        return self.context.property_value

    @property
    def message_formatter(self) -> MessageFormatter:
        return self.context.message_formatter

    @property
    def instance_to_validate(self) -> Any:
        return self.context.instance_to_validate

    @property
    def parent_context(self) -> ParentContext:
        return self.context.parent_context

    def build_message(self, template: str) -> str:
        return self.message_formatter.build_message(template)

    def get_default_message(self) -> str:
        """The message the validator would have produced without a custom builder."""
        return self.build_message(self.validator.get_default_message_template())


__all__ = [
    "MessageBuilderContext",
]
