from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from fast_rules.utils.serialisation import serialise


class Severity(str, Enum):
    """Classification of a failure, independent of the valid/invalid outcome."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationFailure(BaseModel):
    """
    A single failed rule.

    Field names are the wire contract consumed by reporting and serialization.
    Instances are immutable; placeholder and argument snapshots are copies
    taken from the formatter at construction time.

    Attributes:
        property_name: Name of the validated property (e.g. "email" or "orders[2].total")
        error_message: Rendered, localized message
        attempted_value: The offending value
        custom_state: Opaque value attached by a custom state provider
        severity: ERROR unless a severity provider says otherwise
        error_code: Error code of the validator (its name when none was set)
        formatted_message_arguments: Legacy positional arguments used while rendering
        formatted_message_placeholder_values: Named placeholder values used while rendering
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    property_name: str
    error_message: str
    attempted_value: Any = None
    custom_state: Any = None
    severity: Severity = Severity.ERROR
    error_code: Optional[str] = None
    formatted_message_arguments: Tuple[Any, ...] = ()
    formatted_message_placeholder_values: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation."""
        return serialise(self.model_dump())

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.property_name}: {self.error_message}"


__all__ = [
    "Severity",
    "ValidationFailure",
]
