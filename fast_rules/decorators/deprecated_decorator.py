import functools
import warnings

from typing_extensions import deprecated as typing_deprecated


def deprecated(reason=None):
    """
    Decorator to mark legacy functions and methods as deprecated.

    This decorator:
    1. Emits a `DeprecationWarning` every time the deprecated callable runs
    2. Adds type checking support via typing_extensions.deprecated

    Usage:
    @deprecated  # No message, no parentheses
    @deprecated("Use append_argument instead.")  # With message
    """
    # Allow using @deprecated without parentheses
    if callable(reason):
        return deprecated()(reason)

    def decorator(func):
        message = f" {reason}" if reason else ""
        marked = typing_deprecated(reason or "This function is deprecated")(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            warnings.warn(
                f"Call to deprecated function {func.__name__}.{message}",
                category=DeprecationWarning,
                stacklevel=2
            )
            return func(*args, **kwargs)

        wrapper.__deprecated__ = marked.__deprecated__
        return wrapper

    return decorator
