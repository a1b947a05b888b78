from .deprecated_decorator import deprecated

__all__ = [
    "deprecated",
]
