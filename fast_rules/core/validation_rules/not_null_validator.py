from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.validation_context import ValidationContext


class NotNullValidator(PropertyValidator):
    def is_valid(self, context: ValidationContext) -> bool:
        return context.property_value is not None
