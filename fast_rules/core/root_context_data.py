from __future__ import annotations

from collections import ChainMap
from typing import Any, Callable, Dict, Generic, Iterator, MutableMapping, Optional, Type, TypeVar, overload, cast

from fast_rules.config import COLLECTION_INDEX_KEY


T = TypeVar("T")


class ContextKey(Generic[T]):
    """Typed key handle for values stored in root context data.

    Using a typed key provides better type inference for `get`/`set` calls.
    """

    __slots__ = ("name", "default")

    def __init__(self, name: str, default: Optional[T] = None) -> None:
        self.name = name
        self.default = default

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"ContextKey(name={self.name!r}, default={self.default!r})"


class RootContextData(MutableMapping[str, Any]):
    """Data shared across an entire validation run.

    - Wraps the caller's mapping without copying it, so writes made by the
      collaborator that walks the object graph are seen by every context
      built on top of it, and the other way round.
    - `for_collection_item()` returns a view over the same mapping with the
      item index kept local to that view, so sibling items never overwrite
      each other's index.
    - Read-only from a validator's point of view. Sibling item evaluations may
      read concurrently; the writer is responsible for synchronizing writes.
    - Accepts both plain string keys and typed `ContextKey[T]` handles.
    """

    def __init__(self, initial: Optional[MutableMapping[str, Any]] = None) -> None:
        self._data: MutableMapping[str, Any] = initial if initial is not None else {}
        self._local: Dict[str, Any] = {}

    def _scope(self, name: str) -> MutableMapping[str, Any]:
        return self._local if name in self._local else self._data

    def _view(self) -> ChainMap:
        return ChainMap(self._local, self._data)

    def for_collection_item(self, index: Any) -> "RootContextData":
        """View sharing this run's data, with `index` as the current collection index."""
        child = RootContextData(self._data)
        child._local = {**self._local, COLLECTION_INDEX.name: index}
        return child

    # --------------- typed get/set ---------------
    @overload
    def get(self, key: ContextKey[T]) -> Optional[T]:
        ...

    @overload
    def get(self, key: ContextKey[T], default: T) -> T:
        ...

    @overload
    def get(self, key: str) -> Any:
        ...

    @overload
    def get(self, key: str, default: T) -> T:
        ...

    def get(self, key: ContextKey[Any] | str, default: Any = None) -> Any:
        name = key.name if isinstance(key, ContextKey) else key
        scope = self._scope(name)
        if name in scope:
            return scope[name]
        if default is not None:
            return default
        return key.default if isinstance(key, ContextKey) else None

    def set(self, key: ContextKey[Any] | str, value: Any) -> None:
        name = key.name if isinstance(key, ContextKey) else key
        self._scope(name)[name] = value

    def has(self, key: ContextKey[Any] | str) -> bool:
        name = key.name if isinstance(key, ContextKey) else key
        return name in self._local or name in self._data

    # --------------- well-known keys ---------------
    @property
    def collection_index(self) -> Any:
        """Index of the collection item currently being validated, if any."""
        return self.get(COLLECTION_INDEX)

    @collection_index.setter
    def collection_index(self, value: Any) -> None:
        self.set(COLLECTION_INDEX, value)

    @collection_index.deleter
    def collection_index(self) -> None:
        self._scope(COLLECTION_INDEX.name).pop(COLLECTION_INDEX.name, None)

    def has_collection_index(self) -> bool:
        return self.has(COLLECTION_INDEX)

    # --------------- mapping protocol ---------------
    def __getitem__(self, name: str) -> Any:
        return self._view()[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._scope(name)[name] = value

    def __delitem__(self, name: str) -> None:
        del self._scope(name)[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._view())

    def __len__(self) -> int:
        return len(self._view())

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"RootContextData({dict(self._view())!r})"


U = TypeVar("U")


class _DefineKey:
    """Callable + subscribable factory for `ContextKey`.

    Supports both:
    - define_key("name", default=None)
    - define_key[T]("name", default=None)
    """

    def __call__(self, name: str, default: Optional[U] = None) -> ContextKey[U]:
        return cast(ContextKey[U], ContextKey(name, default))

    def __getitem__(self, _typ: Type[U]) -> Callable[[str, Optional[U]], ContextKey[U]]:
        def factory(name: str, default: Optional[U] = None) -> ContextKey[U]:
            return cast(ContextKey[U], ContextKey(name, default))

        return factory


define_key = _DefineKey()

# Index stored by an enclosing collection iteration; the value is opaque (int or str)
COLLECTION_INDEX: ContextKey[Any] = define_key(COLLECTION_INDEX_KEY)


__all__ = [
    "ContextKey",
    "RootContextData",
    "define_key",
    "COLLECTION_INDEX",
]
