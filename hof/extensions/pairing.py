from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..collection import Collection


def zip_(first: Iterable[A], second: Iterable[B]) -> List[Tuple[A, B]]:
    """pair elements positionally, truncated to the shorter input"""
    return list(zip(first, second))


def unzip(pairs: Iterable[Tuple[A, B]]) -> Tuple[List[A], List[B]]:
    """split pairs back into two lists"""
    firsts, seconds = [], []
    for a, b in pairs:
        firsts.append(a)
        seconds.append(b)
    return firsts, seconds


def flat_map(source: Iterable[T], selector: Selector[T, Iterable[U]]) -> List[U]:
    """map each element to an iterable and flatten one level"""
    return [item for element in source for item in selector(element)]


class PairingAccessor(Generic[T]):
    def __init__(self, collection_instance: 'Collection[T]'):
        self._collection = collection_instance

    def zip_with(self, other: Iterable[U]) -> 'Collection[Tuple[T, U]]':
        """pair with another sequence"""
        from ..collection import Collection
        return Collection(lambda: zip_(self._collection._get_data(), other))

    def unzip(self) -> Tuple[List[Any], List[Any]]:
        """the inverse of zip_with for a collection of pairs"""
        return unzip(self._collection._get_data())

    def flat_map(self, selector: Selector[T, Iterable[U]]) -> 'Collection[U]':
        """project and flatten sequences"""
        from ..collection import Collection
        return Collection(lambda: flat_map(self._collection._get_data(), selector))
