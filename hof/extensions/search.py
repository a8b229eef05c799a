from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def find(source: Iterable[T], predicate: Predicate[T]) -> Tuple[Optional[T], bool]:
    """first element satisfying 'predicate' with a found flag. (None, False) when absent."""
    for item in source:
        if predicate(item):
            return item, True
    return None, False


def some(source: Iterable[T], predicate: Predicate[T]) -> bool:
    return any(predicate(item) for item in source)


def every(source: Iterable[T], predicate: Predicate[T]) -> bool:
    return all(predicate(item) for item in source)


def contains(source: Iterable[T], value: T) -> bool:
    """membership by equality"""
    return any(item == value for item in source)


class SearchAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def find(self, predicate: Predicate[T]) -> Tuple[Optional[T], bool]:
        return find(self._collection._get_data(), predicate)

    def find_or_default(self, predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """first match, or 'default' when nothing matches"""
        item, found = find(self._collection._get_data(), predicate)
        return item if found else default

    def some(self, predicate: Predicate[T]) -> bool:
        return some(self._collection._get_data(), predicate)

    def every(self, predicate: Predicate[T]) -> bool:
        return every(self._collection._get_data(), predicate)

    def contains(self, value: T) -> bool:
        return contains(self._collection._get_data(), value)
