from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_validator

from fast_rules.core.validation_failure import Severity

if TYPE_CHECKING:
    from fast_rules.core.cancellation import CancellationToken
    from fast_rules.core.message_builder_context import MessageBuilderContext
    from fast_rules.core.validation_context import ValidationContext

T = TypeVar("T")


class Override(Generic[T]):
    """An attached extension point. `None` in its place means default behaviour."""

    __slots__ = ("fn",)

    def __init__(self, fn: Callable[..., T]) -> None:
        self.fn = fn

    def __call__(self, *args: Any, **kwargs: Any) -> T:
        return self.fn(*args, **kwargs)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Override) and other.fn == self.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Override({self.fn!r})"

    @classmethod
    def of(cls, fn: Union["Override[T]", Callable[..., T], None]) -> Optional["Override[T]"]:
        if fn is None or isinstance(fn, Override):
            return fn
        if not callable(fn):
            raise TypeError(f"Override expects a callable, got {type(fn).__name__}")
        return cls(fn)


MessageBuilder = Callable[["MessageBuilderContext"], str]
CustomStateProvider = Callable[["ValidationContext"], Any]
SeverityProvider = Callable[["ValidationContext"], Severity]
AsyncCondition = Callable[["ValidationContext", "CancellationToken"], Awaitable[bool]]


class ValidatorOptions(BaseModel):
    """
    Configuration a validator receives at construction.

    Read-only once built, so one validator can be shared across many
    concurrent evaluations. The `with_*` helpers return modified copies.

    Usage:
        options = (
            ValidatorOptions(error_code="user.email")
            .with_severity(Severity.WARNING)
            .with_state(lambda ctx: {"field": ctx.property_name})
        )
        NotEmptyValidator(options)
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error_code: Optional[str] = None
    error_message: Optional[str] = None
    message_builder: Optional[Override] = None
    custom_state_provider: Optional[Override] = None
    severity_provider: Optional[Override] = None
    async_condition: Optional[Override] = None

    @field_validator(
        "message_builder", "custom_state_provider", "severity_provider", "async_condition", mode="before"
    )
    @classmethod
    def _wrap_callable(cls, value: Any) -> Any:
        return Override.of(value)

    @property
    def has_async_condition(self) -> bool:
        return self.async_condition is not None

    def with_error_code(self, error_code: Optional[str]) -> "ValidatorOptions":
        return self.model_copy(update={"error_code": error_code})

    def with_message(self, message: Union[str, MessageBuilder]) -> "ValidatorOptions":
        """A string replaces the localized template; a callable replaces message building entirely."""
        if isinstance(message, str):
            return self.model_copy(update={"error_message": message})
        return self.model_copy(update={"message_builder": Override.of(message)})

    def with_state(self, provider: CustomStateProvider) -> "ValidatorOptions":
        return self.model_copy(update={"custom_state_provider": Override.of(provider)})

    def with_severity(self, severity: Union[Severity, SeverityProvider]) -> "ValidatorOptions":
        if isinstance(severity, Severity):
            fixed = severity
            provider: SeverityProvider = lambda context: fixed
        else:
            provider = severity
        return self.model_copy(update={"severity_provider": Override.of(provider)})

    def when_async(self, condition: AsyncCondition) -> "ValidatorOptions":
        return self.model_copy(update={"async_condition": Override.of(condition)})


__all__ = [
    "Override",
    "ValidatorOptions",
]
