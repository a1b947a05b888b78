"""
fast-rules - per-rule validation execution and failure reporting

This package evaluates one validator against one value and, on failure,
builds a structured, localized failure record:
- Property validators with sync and async evaluation paths
- Localized message templates with error-code overrides
- Placeholder formatting ({PropertyName}, {CollectionIndex}, ...)
- Custom message builders, custom state and severity providers
- Cooperative cancellation for async checks
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"
__url__ = "https://github.com/patrikmojzis/fast-rules"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.validation_rules import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .core.localization import get_string, add_translation, set_locale, get_locale
