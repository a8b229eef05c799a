from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    Dict, List, Tuple, Set, Protocol
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
Action = Callable[[T], Any]

# --- consumer protocol ---

# the consumer returns a consumption decision after every produced value
Consumer = Callable[[T], bool]
# a producer runs to completion or until its consumer says stop
Producer = Callable[[Consumer[T]], None]

CONTINUE = True
STOP = False


class SequenceState(Enum):
    """lifecycle of a single traversal. stopped and exhausted are terminal."""
    IDLE = 'idle'
    PRODUCING = 'producing'
    STOPPED = 'stopped'
    EXHAUSTED = 'exhausted'

    @property
    def is_terminal(self) -> bool:
        return self in (SequenceState.STOPPED, SequenceState.EXHAUSTED)


# --- numeric capability ---

class Number(Protocol):
    """ordering and arithmetic, the capability set the numeric operations rely on"""

    def __lt__(self, other: Any) -> bool: ...
    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...


N = TypeVar('N', bound=Number)

# signed/unsigned integers of every width plus the float widths
NUMERIC_TYPES = (int, float, np.integer, np.floating)


def is_number(value: Any) -> bool:
    """true for int/float and numpy integer/floating scalars. bools are not numbers here."""
    return isinstance(value, NUMERIC_TYPES) and not isinstance(value, (bool, np.bool_))
