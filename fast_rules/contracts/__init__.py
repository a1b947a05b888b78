"""Contract classes and abstract interfaces.

Exported so they can be imported directly from :mod:`fast_rules`.
"""

from .property_validator import PropertyValidator

__all__ = [
    "PropertyValidator",
]
