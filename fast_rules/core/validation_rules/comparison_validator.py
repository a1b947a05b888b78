from __future__ import annotations

import operator
from typing import Any, Callable, ClassVar, Optional

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validator_options import ValidatorOptions


class ComparisonValidator(PropertyValidator):
    """
    Compares the property value with a fixed value.

    `comparison_value` may also be a callable receiving the instance being
    validated, for comparisons against another property. A value that cannot
    be compared with it (e.g. a string against an int) is invalid.
    """

    comparer: ClassVar[Callable[[Any, Any], bool]]
    # Ordering comparisons treat None as valid
    skip_none: ClassVar[bool] = True

    def __init__(self, comparison_value: Any, options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(options, **kwargs)
        self.comparison_value = comparison_value

    def get_comparison_value(self, context: ValidationContext) -> Any:
        if callable(self.comparison_value):
            return self.comparison_value(context.instance_to_validate)
        return self.comparison_value

    def is_valid(self, context: ValidationContext) -> bool:
        value = context.property_value
        if value is None and self.skip_none:
            return True

        comparison_value = self.get_comparison_value(context)
        try:
            if type(self).comparer(value, comparison_value):
                return True
        except TypeError:
            # Values that cannot be ordered against each other fail the rule
            pass

        context.message_formatter.append_argument("ComparisonValue", comparison_value)
        return False


class GreaterThanValidator(ComparisonValidator):
    comparer = operator.gt


class GreaterThanOrEqualValidator(ComparisonValidator):
    comparer = operator.ge


class LessThanValidator(ComparisonValidator):
    comparer = operator.lt


class LessThanOrEqualValidator(ComparisonValidator):
    comparer = operator.le


class EqualValidator(ComparisonValidator):
    comparer = operator.eq
    skip_none = False


class NotEqualValidator(ComparisonValidator):
    comparer = operator.ne
    skip_none = False
