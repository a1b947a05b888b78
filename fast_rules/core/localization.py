"""
Localized message templates for validators.

Module-level state, JSON files per locale and a context-aware current locale,
in the spirit of Laravel's translator.
Lookup layers, highest precedence first:
- runtime translations registered with `add_translation`
- user files under `LOCALE_PATH` (`<locale>.json`)
- bundled defaults shipped in `fast_rules/lang`

Usage:
    from fast_rules.core.localization import get_string, set_locale, add_translation

    get_string('NotNullValidator')                          # "'{PropertyName}' must not be empty."
    add_translation('en', 'user.name', 'Name is required')  # Override per error code
    set_locale('fr')                                        # Change locale for this context
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Dict, Any, Optional

from fast_rules import config

_BUNDLED_PATH = Path(__file__).resolve().parent.parent / "lang"

_translations: Dict[str, Dict[str, Any]] = {}
_bundled: Dict[str, Dict[str, Any]] = {}
_overrides: Dict[str, Dict[str, str]] = {}
_locale_path: str = config.LOCALE_PATH
_enabled: bool = config.LOCALIZATION_ENABLED
_current_locale: ContextVar[str] = ContextVar('locale', default=config.LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[str]:
    """Exact key first, then dot notation for nested dicts."""
    if key in data and isinstance(data[key], str):
        return data[key]

    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current if isinstance(current, str) else None


def _read_json(locale_file: Path) -> Dict[str, Any]:
    if not locale_file.exists():
        return {}
    try:
        with locale_file.open(encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logging.warning(f"[LOCALE] Could not read {locale_file}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache user translations for a locale. Idempotent."""
    if locale not in _translations:
        _translations[locale] = _read_json(Path(_locale_path) / f"{locale}.json")
    return _translations[locale]


def _load_bundled(locale: str) -> Dict[str, Any]:
    if locale not in _bundled:
        _bundled[locale] = _read_json(_BUNDLED_PATH / f"{locale}.json")
    return _bundled[locale]


def _lookup(key: str, locale: str) -> Optional[str]:
    override = _overrides.get(locale, {}).get(key)
    if override:
        return override

    for layer in (_load_locale(locale), _load_bundled(locale)):
        translation = _get_nested(layer, key)
        if translation:
            return translation
    return None


def get_string(key: str, locale: Optional[str] = None) -> str:
    """
    Return the template registered under `key`, or an empty string.

    Tries the requested (or current) locale, then the fallback locale.
    When localization is disabled only the fallback locale is consulted.
    """
    fallback_locale = config.LOCALE_FALLBACK
    current_locale = (locale or _current_locale.get()) if _enabled else fallback_locale

    translation = _lookup(key, current_locale)

    if translation is None and current_locale != fallback_locale:
        translation = _lookup(key, fallback_locale)

    return translation or ""


def add_translation(locale: str, key: str, message: str) -> None:
    """Register a template at runtime. Takes precedence over every file."""
    _overrides.setdefault(locale, {})[key] = message


def set_locale(locale: str) -> None:
    """Set the locale for the current context (thread or task)."""
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get()


def set_enabled(enabled: bool) -> None:
    """Disable to always resolve against the fallback locale."""
    global _enabled
    _enabled = enabled


def is_enabled() -> bool:
    return _enabled


def set_locale_path(path: str) -> None:
    """Point the user translation layer at another directory and drop cached files."""
    global _locale_path
    _locale_path = path
    _translations.clear()


def clear_cache() -> None:
    """Clear cached files and runtime translations."""
    _translations.clear()
    _bundled.clear()
    _overrides.clear()


__all__ = [
    "get_string",
    "add_translation",
    "set_locale",
    "get_locale",
    "set_enabled",
    "is_enabled",
    "set_locale_path",
    "clear_cache",
]
