from __future__ import annotations

from typing import Optional

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validator_options import ValidatorOptions


class LengthValidator(PropertyValidator):
    """
    Length of a string (or any sized value) must lie within `min_length..max_length`.

    `max_length=None` means no upper bound. None values are valid; combine
    with `NotNullValidator` when a value is required.
    """

    def __init__(self, min_length: int = 0, max_length: Optional[int] = None,
                 options: Optional[ValidatorOptions] = None, **kwargs):
        if max_length is not None and max_length < min_length:
            raise ValueError("max_length should be larger than min_length.")
        super().__init__(options, **kwargs)
        self.min_length = min_length
        self.max_length = max_length

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None:
            return True

        length = len(value)
        if length >= self.min_length and (self.max_length is None or length <= self.max_length):
            return True

        context.message_formatter \
            .append_argument("MinLength", self.min_length) \
            .append_argument("MaxLength", self.max_length) \
            .append_argument("TotalLength", length)
        return False


class MinimumLengthValidator(LengthValidator):
    def __init__(self, min_length: int, options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(min_length, None, options, **kwargs)


class MaximumLengthValidator(LengthValidator):
    def __init__(self, max_length: int, options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(0, max_length, options, **kwargs)
