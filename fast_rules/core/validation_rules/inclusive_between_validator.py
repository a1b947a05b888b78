from __future__ import annotations

from typing import Any, Optional

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validator_options import ValidatorOptions


class InclusiveBetweenValidator(PropertyValidator):
    def __init__(self, from_: Any, to: Any, options: Optional[ValidatorOptions] = None, **kwargs):
        if to < from_:
            raise ValueError("'to' should be larger than 'from_'.")
        super().__init__(options, **kwargs)
        self.from_ = from_
        self.to = to

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None or self.from_ <= value <= self.to:
            return True

        context.message_formatter.append_argument("From", self.from_).append_argument("To", self.to)
        return False
