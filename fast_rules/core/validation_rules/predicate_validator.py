from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

from fast_rules.contracts.property_validator import PropertyValidator
from fast_rules.core.cancellation import CancellationToken
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validator_options import ValidatorOptions
from fast_rules.exceptions.common_exceptions import AsyncValidatorInvokedSynchronouslyException

Predicate = Callable[[Any, Any, ValidationContext], bool]
AsyncPredicate = Callable[[Any, Any, ValidationContext, CancellationToken], Awaitable[bool]]


class PredicateValidator(PropertyValidator):
    """Valid when `predicate(instance, value, context)` returns True."""

    def __init__(self, predicate: Predicate, options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(options, **kwargs)
        self.predicate = predicate

    def is_valid(self, context: ValidationContext) -> bool:
        return bool(self.predicate(context.instance_to_validate, context.property_value, context))


class AsyncPredicateValidator(PropertyValidator):
    """
    Valid when `await predicate(instance, value, context, cancellation)` returns True.

    The predicate is raced against the cancellation token, so cancelling the
    token aborts the check even if the predicate never looks at it.
    """

    def __init__(self, predicate: AsyncPredicate, options: Optional[ValidatorOptions] = None, **kwargs):
        super().__init__(options, **kwargs)
        self.predicate = predicate

    def is_valid(self, context: ValidationContext) -> bool:
        raise AsyncValidatorInvokedSynchronouslyException(self.name)

    async def is_valid_async(self, context: ValidationContext, cancellation: CancellationToken) -> bool:
        result = await cancellation.guard(
            self.predicate(context.instance_to_validate, context.property_value, context, cancellation)
        )
        return bool(result)

    def should_validate_asynchronously(self, context: ValidationContext) -> bool:
        return True
