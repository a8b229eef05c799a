from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


class TerminalAccessor(Generic[T]):
    """conversions out of a collection into plain containers"""

    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def list(self) -> List[T]:
        """a copy of the elements as a list"""
        return list(self._collection._get_data())

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._collection._get_data(), dtype=dtype)

    def set(self) -> Set[T]:
        return set(self._collection._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys win"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._collection._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._collection._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe (elements should be dicts or records)"""
        return pd.DataFrame(self._collection._get_data())

    def count(self) -> int:
        return len(self._collection._get_data())
