from typing import Optional


class MessageTemplateMissingException(LookupError):
    """
    Raised when a validator's fallback key has no registered message template.

    This is a configuration error: every validator must ship a default message
    for its fallback key in the active language files.
    """

    def __init__(self, key: str, locale: Optional[str] = None):
        self.key = key
        self.locale = locale
        message = f"No message template registered for key `{key}`"
        if locale:
            message += f" (locale: `{locale}`)"
        super().__init__(message)


class OperationCancelledException(Exception):
    """
    Raised when an asynchronous validity check is aborted through its cancellation token.

    A cancelled check has no verdict: callers must not report it as a passed or failed rule.
    """

    def __init__(self, message: str = "The validation operation was cancelled."):
        super().__init__(message)
        self.message = message


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)


class AsyncValidatorInvokedSynchronouslyException(RuntimeError):
    """Raised when a validator that only has an asynchronous check is run through `validate`."""

    def __init__(self, validator_name: str):
        self.validator_name = validator_name
        super().__init__(f"Validator `{validator_name}` can only be run asynchronously; use validate_async.")
