"""Built-in validators. Each resolves its default message under its class name."""

from .comparison_validator import (
    ComparisonValidator,
    GreaterThanValidator,
    GreaterThanOrEqualValidator,
    LessThanValidator,
    LessThanOrEqualValidator,
    EqualValidator,
    NotEqualValidator,
)
from .inclusive_between_validator import InclusiveBetweenValidator
from .length_validator import LengthValidator, MinimumLengthValidator, MaximumLengthValidator
from .not_empty_validator import NotEmptyValidator
from .not_null_validator import NotNullValidator
from .predicate_validator import PredicateValidator, AsyncPredicateValidator
from .regular_expression_validator import RegularExpressionValidator

__all__ = [
    "ComparisonValidator",
    "GreaterThanValidator",
    "GreaterThanOrEqualValidator",
    "LessThanValidator",
    "LessThanOrEqualValidator",
    "EqualValidator",
    "NotEqualValidator",
    "InclusiveBetweenValidator",
    "LengthValidator",
    "MinimumLengthValidator",
    "MaximumLengthValidator",
    "NotEmptyValidator",
    "NotNullValidator",
    "PredicateValidator",
    "AsyncPredicateValidator",
    "RegularExpressionValidator",
]
