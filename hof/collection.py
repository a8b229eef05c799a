from __future__ import annotations

from .types import *
from .sequence import LazySequence
from .transforms import map_, filter_, square, cube

# --- accessors ---
from .extensions.fold import FoldAccessor
from .extensions.search import SearchAccessor
from .extensions.numeric import StatsAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.pairing import PairingAccessor
from .extensions.terminal import TerminalAccessor

# --- base collection implementation ---

class _BaseCollection(Generic[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the materialized data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

    def __repr__(self) -> str:
        return f"Collection({self._get_data()!r})"

# --- main collection class ---

class Collection(_BaseCollection[T]):
    """
    a materialized, ordered collection. map/filter/square/cube hand back
    one-shot LazySequences; everything under the accessors runs eagerly.
    """
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.fold = FoldAccessor(self)
        self.search = SearchAccessor(self)
        self.stats = StatsAccessor(self)
        self.group = GroupingAccessor(self)
        self.pair = PairingAccessor(self)
        self.to = TerminalAccessor(self)

    # --- lazy transforms ---

    def map(self, transform: Selector[T, U]) -> LazySequence[U]:
        """project each element, lazily"""
        return map_(self._get_data(), transform)

    def filter(self, predicate: Predicate[T]) -> LazySequence[T]:
        """keep matching elements, lazily"""
        return filter_(self._get_data(), predicate)

    def square(self) -> LazySequence[T]:
        return square(self._get_data())

    def cube(self) -> LazySequence[T]:
        return cube(self._get_data())
