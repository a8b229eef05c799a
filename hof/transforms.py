from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from .sequence import LazySequence
from .types import *

logger = logging.getLogger(__name__)


def as_source(source: Iterable[T]) -> Iterable[T]:
    """bind to a stable, re-readable source. one-shot iterators are materialized."""
    if isinstance(source, pd.Series):
        # keep the dtype; iterating a series hands back plain python scalars
        return source.to_numpy()
    if isinstance(source, Iterator):
        return list(source)
    return source


def require_numbers(source: Iterable[Any], operation: str) -> None:
    """reject non-numeric sources before any value is produced"""
    if isinstance(source, np.ndarray) and source.dtype != object:
        if source.dtype == np.bool_ or not np.issubdtype(source.dtype, np.number) \
                or np.issubdtype(source.dtype, np.complexfloating):
            logger.debug(f"{operation}: rejected array of dtype {source.dtype}")
            raise TypeError(f"{operation} requires a numeric array, got dtype {source.dtype}")
        return
    for index, item in enumerate(source):
        if not is_number(item):
            logger.debug(f"{operation}: rejected {type(item).__name__} at index {index}")
            raise TypeError(f"{operation} requires number-like elements, "
                            f"got {type(item).__name__} at index {index}")


def map_(source: Iterable[T], transform: Selector[T, U]) -> LazySequence[U]:
    """lazily apply 'transform' to each element, in source order"""
    items = as_source(source)

    def produce(consume: Consumer[U]) -> None:
        for item in items:
            if not consume(transform(item)):
                return

    return LazySequence(produce, 'map')


def filter_(source: Iterable[T], predicate: Predicate[T]) -> LazySequence[T]:
    """lazily keep the elements satisfying 'predicate'. rejected elements are skipped silently."""
    items = as_source(source)

    def produce(consume: Consumer[T]) -> None:
        for item in items:
            if predicate(item):
                if not consume(item):
                    return

    return LazySequence(produce, 'filter')


def square(source: Iterable[N]) -> LazySequence[N]:
    """
    lazily square each element as v * v.
    overflow follows the element type: numpy fixed-width integers wrap, python ints don't.
    """
    items = as_source(source)
    require_numbers(items, 'square')

    def produce(consume: Consumer[N]) -> None:
        for v in items:
            if not consume(v * v):
                return

    return LazySequence(produce, 'square')


def cube(source: Iterable[N]) -> LazySequence[N]:
    """lazily cube each element as v * v * v"""
    items = as_source(source)
    require_numbers(items, 'cube')

    def produce(consume: Consumer[N]) -> None:
        for v in items:
            if not consume(v * v * v):
                return

    return LazySequence(produce, 'cube')
