from __future__ import annotations

import re
from typing import Optional, Pattern, Union

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validator_options import ValidatorOptions


class RegularExpressionValidator(PropertyValidator):
    """String values must contain a match for `pattern`. None is valid."""

    def __init__(self, pattern: Union[str, Pattern[str]], flags: int = 0,
                 options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(options, **kwargs)
        self.regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, flags)

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        if self.regex.search(str(value)):
            return True

        context.message_formatter.append_argument("RegularExpression", self.regex.pattern)
        return False
