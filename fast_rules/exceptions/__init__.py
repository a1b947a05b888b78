"""Custom exceptions raised by the validation engine."""

from .common_exceptions import (
    MessageTemplateMissingException,
    OperationCancelledException,
    EnvInvalidException,
    AsyncValidatorInvokedSynchronouslyException,
)


__all__ = [
    "MessageTemplateMissingException",
    "OperationCancelledException",
    "EnvInvalidException",
    "AsyncValidatorInvokedSynchronouslyException",
]
