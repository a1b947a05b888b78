from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from fast_rules.core.message_formatter import MessageFormatter
from fast_rules.core.root_context_data import RootContextData


@dataclass
class ParentContext:
    """Object-level context shared by every property evaluation of one validation run."""
    instance_to_validate: Any = None
    root_context_data: RootContextData = field(default_factory=RootContextData)

    def __post_init__(self) -> None:
        if not isinstance(self.root_context_data, RootContextData):
            # Wrap, never copy: the caller keeps writing to the same mapping
            self.root_context_data = RootContextData(self.root_context_data)


@dataclass
class ValidationContext:
    """
    Everything one validator needs to evaluate one value.

    Owned by the caller for the duration of a single rule evaluation. The
    message formatter is exclusive to this context and must not be shared
    between evaluations running concurrently.
    """
    property_value: Any
    property_name: str
    display_name: Optional[str] = None
    parent_context: ParentContext = field(default_factory=ParentContext)
    message_formatter: MessageFormatter = field(default_factory=MessageFormatter)

    def __post_init__(self) -> None:
        if self.display_name is None:
            self.display_name = self.property_name

    @property
    def instance_to_validate(self) -> Any:
        return self.parent_context.instance_to_validate

    @property
    def root_context_data(self) -> RootContextData:
        return self.parent_context.root_context_data

    def for_collection_item(self, index: Any, value: Any) -> "ValidationContext":
        """
        Child context for one item of a collection property.

        The item gets its own formatter. Root context data stays shared with the
        parent; only the collection index is local to the item.
        """
        root_context_data = self.root_context_data.for_collection_item(index)
        return ValidationContext(
            property_value=value,
            property_name=f"{self.property_name}[{index}]",
            display_name=self.display_name,
            parent_context=ParentContext(
                instance_to_validate=self.instance_to_validate,
                root_context_data=root_context_data,
            ),
        )


__all__ = [
    "ParentContext",
    "ValidationContext",
]
