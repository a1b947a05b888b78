from collections.abc import Sized
from typing import Any

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext


class NotEmptyValidator(PropertyValidator):
    """Fails for None, blank strings and empty collections."""

    def is_valid(self, context: ValidationContext) -> bool:
        return not is_empty(context.property_value)


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        return len(value) == 0
    return False
