from __future__ import annotations
import typing
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def reduce_(source: Iterable[T], fn: Accumulator[U, T], initial: U) -> U:
    """left fold from 'initial'. an empty source returns 'initial' unchanged."""
    return reduce(fn, source, initial)


def for_each(source: Iterable[T], action: Action[T]) -> None:
    """call 'action' on every element for its side effects"""
    for item in source:
        action(item)


class FoldAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def reduce(self, fn: Accumulator[U, T], initial: U) -> U:
        """accumulate into a single value"""
        return reduce_(self._collection._get_data(), fn, initial)

    def reduce_with_selector(self, fn: Accumulator[U, T], initial: U,
                             result_selector: Selector[U, V]) -> V:
        """fold then transform the accumulated value"""
        return result_selector(reduce_(self._collection._get_data(), fn, initial))

    def for_each(self, action: Action[T]) -> 'Collection[T]':
        """
        runs 'action' on each element. eager.
        returns the original collection to allow chaining.
        """
        for_each(self._collection._get_data(), action)
        return self._collection
