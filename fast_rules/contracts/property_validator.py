from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional

from fast_rules.core.cancellation import CancellationToken
from fast_rules.core.message_builder_context import MessageBuilderContext
from fast_rules.core.message_formatter import COLLECTION_INDEX_PLACEHOLDER
from fast_rules.core.message_resolver import LanguageStore, resolve_message_template
from fast_rules.core.root_context_data import COLLECTION_INDEX
from fast_rules.core.validation_context import ValidationContext
from fast_rules.core.validation_failure import ValidationFailure
from fast_rules.core.validator_options import ValidatorOptions


class PropertyValidator(ABC):
    """
    Contract for a single rule evaluated against a single property value.

    Subclasses implement `is_valid` (and optionally `is_valid_async`); this
    class turns a negative verdict into exactly one `ValidationFailure`.

    Instances are read-only after construction and may be shared between
    concurrent evaluations; all per-evaluation state lives in the context.
    """

    # Key of the default message template; the class name when not set
    fallback_key: ClassVar[Optional[str]] = None

    def __init__(self, options: Optional[ValidatorOptions] = None, *, language_store: Optional[LanguageStore] = None):
        self.options = options or ValidatorOptions()
        self.language_store = language_store

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def error_code(self) -> Optional[str]:
        return self.options.error_code

    def localized(self, fallback_key: str) -> str:
        """
        Message template for this validator.

        Uses the error code as the key when a template is registered for it,
        otherwise `fallback_key`.
        """
        return resolve_message_template(fallback_key, error_code=self.error_code, store=self.language_store)

    def get_default_message_template(self) -> str:
        if self.options.error_message is not None:
            return self.options.error_message
        return self.localized(self.fallback_key or self.name)

    def validate(self, context: ValidationContext) -> List[ValidationFailure]:
        if self.is_valid(context):
            return []

        self.prepare_message_formatter_for_validation_error(context)
        return [self.create_validation_error(context)]

    async def validate_async(
        self, context: ValidationContext, cancellation: Optional[CancellationToken] = None
    ) -> List[ValidationFailure]:
        """
        Asynchronous counterpart of `validate`.

        Raises:
            OperationCancelledException: If `cancellation` fires before or during the validity check.
        """
        cancellation = cancellation or CancellationToken()
        cancellation.raise_if_cancellation_requested()

        if await self.is_valid_async(context, cancellation):
            return []

        self.prepare_message_formatter_for_validation_error(context)
        return [self.create_validation_error(context)]

    def should_validate_asynchronously(self, context: ValidationContext) -> bool:
        # An async applicability condition can only be evaluated on the async
        # path, even when the caller runs validation synchronously.
        return self.options.has_async_condition

    @abstractmethod
    def is_valid(self, context: ValidationContext) -> bool:
        """
        Decide whether `context.property_value` satisfies the rule.

        Must not have side effects other than staging placeholder values on
        `context.message_formatter` for a prospective failure message.
        """
        raise NotImplementedError

    async def is_valid_async(self, context: ValidationContext, cancellation: CancellationToken) -> bool:
        return self.is_valid(context)

    def prepare_message_formatter_for_validation_error(self, context: ValidationContext) -> None:
        formatter = context.message_formatter
        formatter.append_property_name(context.display_name)
        formatter.append_property_value(context.property_value)

        # Child validators run from a collection iteration see the item index
        # through root context data. A placeholder set by the rule itself wins.
        root_context_data = context.root_context_data
        if root_context_data.has(COLLECTION_INDEX) and not formatter.has_placeholder(COLLECTION_INDEX_PLACEHOLDER):
            formatter.append_argument(COLLECTION_INDEX_PLACEHOLDER, root_context_data.get(COLLECTION_INDEX))

    def create_validation_error(self, context: ValidationContext) -> ValidationFailure:
        options = self.options
        message_builder_context = MessageBuilderContext(context, self)

        if options.message_builder is not None:
            error_message = options.message_builder(message_builder_context)
        else:
            error_message = message_builder_context.get_default_message()

        formatter = context.message_formatter
        failure = {
            "property_name": context.property_name,
            "error_message": error_message,
            "attempted_value": context.property_value,
            "error_code": self.error_code or self.name,
            "formatted_message_arguments": tuple(formatter.additional_arguments),
            "formatted_message_placeholder_values": dict(formatter.placeholder_values),
        }

        if options.custom_state_provider is not None:
            failure["custom_state"] = options.custom_state_provider(context)

        if options.severity_provider is not None:
            failure["severity"] = options.severity_provider(context)

        logging.debug(f"[VALIDATOR] {self.name} failed for `{context.property_name}`: {error_message}")
        return ValidationFailure(**failure)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.name}(error_code={self.error_code!r})"


__all__ = [
    "PropertyValidator",
]
