from __future__ import annotations
import typing
import numpy as np
from ..transforms import as_source, require_numbers
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def _zero_of(values: Iterable[Any]) -> Any:
    """the zero value of the element type: dtype-typed for arrays, plain 0 otherwise"""
    if isinstance(values, np.ndarray) and values.dtype != object:
        return values.dtype.type(0)
    return 0


def _numeric_values(source: Iterable[N], operation: str) -> Iterable[N]:
    values = as_source(source)
    require_numbers(values, operation)
    return values


def sum_(source: Iterable[N]) -> N:
    """
    add all numbers. arrays accumulate in their own dtype, so fixed-width
    integers wrap exactly like the elements do. empty input returns zero.
    """
    values = _numeric_values(source, 'sum')
    if isinstance(values, np.ndarray) and values.dtype != object:
        return np.sum(values, dtype=values.dtype)
    return sum(values, _zero_of(values))


def average(source: Iterable[N]) -> float:
    """mean of the sum. empty input returns 0.0 rather than raising."""
    values = _numeric_values(source, 'average')
    count = sum(1 for _ in values)
    if count == 0:
        return 0.0
    return float(sum_(values)) / count


def min_(source: Iterable[N]) -> N:
    """smallest number, or the type's zero value for empty input"""
    values = _numeric_values(source, 'min')
    result = _zero_of(values)
    for index, v in enumerate(values):
        if index == 0 or v < result:
            result = v
    return result


def max_(source: Iterable[N]) -> N:
    """largest number, or the type's zero value for empty input"""
    values = _numeric_values(source, 'max')
    result = _zero_of(values)
    for index, v in enumerate(values):
        if index == 0 or result < v:
            result = v
    return result


class StatsAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def _get_values(self, selector: Optional[Selector[T, N]] = None) -> List[N]:
        """helper to extract numeric values for the aggregates."""
        data = self._collection._get_data()
        if selector: return [selector(item) for item in data]
        return data

    def sum(self, selector: Optional[Selector[T, N]] = None) -> N:
        """calc sum"""
        return sum_(self._get_values(selector))

    def average(self, selector: Optional[Selector[T, N]] = None) -> float:
        """calc average"""
        return average(self._get_values(selector))

    def min(self, selector: Optional[Selector[T, N]] = None) -> N:
        """find minimum"""
        return min_(self._get_values(selector))

    def max(self, selector: Optional[Selector[T, N]] = None) -> N:
        """find maximum"""
        return max_(self._get_values(selector))
