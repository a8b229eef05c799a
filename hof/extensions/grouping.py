from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def group_by(source: Iterable[T], key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
    """group elements by a key. groups and their members keep first-seen order."""
    groups = defaultdict(list)
    for item in source:
        groups[key_selector(item)].append(item)
    return dict(groups)


def partition(source: Iterable[T], predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
    """split into (matching, rest)"""
    matched, rest = [], []
    for item in source:
        (matched if predicate(item) else rest).append(item)
    return matched, rest


def unique(source: Iterable[T]) -> List[T]:
    """drop duplicates, keeping the first occurrence"""
    # dicts are insertion ordered, which makes fromkeys an order-preserving dedupe
    return list(dict.fromkeys(source))


def chunk(source: Iterable[T], size: int) -> List[List[T]]:
    """
    consecutive slices of 'size' elements; the last one may be shorter.
    a non-positive size yields no chunks at all.
    """
    if size <= 0:
        return []
    data = list(source)
    return [data[i:i + size] for i in range(0, len(data), size)]


class GroupingAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key"""
        return group_by(self._collection._get_data(), key_selector)

    def group_by_with_aggregate(self, key_selector: KeySelector[T, K],
                                result_selector: Callable[[K, List[T]], V]) -> Dict[K, V]:
        """group by key then transform each group"""
        return {key: result_selector(key, items)
                for key, items in group_by(self._collection._get_data(), key_selector).items()}

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements based on predicate"""
        return partition(self._collection._get_data(), predicate)

    def unique(self) -> 'Collection[T]':
        """distinct elements in order of first appearance"""
        from ..collection import Collection
        return Collection(lambda: unique(self._collection._get_data()))

    def chunk(self, size: int) -> 'Collection[List[T]]':
        """split into chunks of specified size"""
        from ..collection import Collection
        return Collection(lambda: chunk(self._collection._get_data(), size))
