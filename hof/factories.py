import typing
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collection

def from_iterable(data: Iterable[T]) -> 'Collection[T]':
    """create collection from iterable"""
    from .collection import Collection
    return Collection(lambda: list(data))

def from_range(start: int, count: int) -> 'Collection[int]':
    """create collection from range"""
    from .collection import Collection
    return Collection(lambda: list(range(start, start + count)))

def repeat(item: T, count: int) -> 'Collection[T]':
    """create collection with repeated item"""
    from .collection import Collection
    return Collection(lambda: [item] * count)

def empty() -> 'Collection[Any]':
    """create empty collection"""
    from .collection import Collection
    return Collection(lambda: [])

# --- aliases ---
H = from_iterable
