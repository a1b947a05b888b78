from __future__ import annotations

from typing import Optional, Protocol

from fast_rules.core import localization
from fast_rules.exceptions.common_exceptions import MessageTemplateMissingException


class LanguageStore(Protocol):
    """Anything able to look up a message template by key. Missing keys yield `""`."""

    def get_string(self, key: str) -> str:
        ...


def resolve_message_template(
    fallback_key: str,
    *,
    error_code: Optional[str] = None,
    store: Optional[LanguageStore] = None,
) -> str:
    """
    Pick the message template for a failing validator.

    1. A non-empty template registered under `error_code` wins.
    2. Otherwise the template registered under `fallback_key` is used.

    Args:
        fallback_key: Validator-intrinsic key (usually the validator class name).
        error_code: Optional user-assigned code that may carry its own template.
        store: Language store to query; defaults to `fast_rules.core.localization`.

    Raises:
        MessageTemplateMissingException: If nothing is registered under `fallback_key`.
    """
    get_string = store.get_string if store is not None else localization.get_string

    if error_code:
        template = get_string(error_code)
        if template:
            return template

    template = get_string(fallback_key)
    if not template:
        locale = localization.get_locale() if store is None else None
        raise MessageTemplateMissingException(fallback_key, locale)

    return template


__all__ = [
    "LanguageStore",
    "resolve_message_template",
]
