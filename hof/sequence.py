from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from .types import *

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def drive(self, consumer: Consumer[T]) -> None:
        """hand every produced value to consumer until it returns a falsy decision"""
        pass

# --- lazy sequence implementation ---

class LazySequence(ISequence[T]):
    """
    a one-shot, pull-driven production of values.

    nothing is computed until drive() is called. the consumer is called once per
    produced value and answers CONTINUE (truthy) or STOP (falsy). after STOP the
    producer returns immediately: no further values, no further calls into the
    element function. running out of source elements ends the traversal normally.

    a sequence may only be driven once. driving it again is not supported and
    is not guarded against; create a new sequence from the source instead.
    """

    def __init__(self, producer: Producer[T], name: str = 'sequence'):
        self._producer = producer
        self._name = name
        self._state = SequenceState.IDLE

    @property
    def state(self) -> SequenceState:
        return self._state

    @property
    def name(self) -> str:
        return self._name

    def drive(self, consumer: Consumer[T]) -> None:
        self._state = SequenceState.PRODUCING
        logger.debug(f"{self._name}: producing")
        stopped = False

        def gate(value: T) -> bool:
            nonlocal stopped
            if stopped:
                return STOP
            if consumer(value):
                return CONTINUE
            stopped = True
            return STOP

        self._producer(gate)
        self._state = SequenceState.STOPPED if stopped else SequenceState.EXHAUSTED
        logger.debug(f"{self._name}: {self._state.value}")

    # --- draining helpers ---

    def to_list(self) -> List[T]:
        """drain to exhaustion into a list"""
        result: List[T] = []

        def collect(value: T) -> bool:
            result.append(value)
            return CONTINUE

        self.drive(collect)
        return result

    def to_array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """drain to exhaustion into a numpy array"""
        return np.array(self.to_list(), dtype=dtype)

    def take(self, count: int) -> List[T]:
        """observe at most 'count' values, then stop production"""
        taken: List[T] = []
        if count <= 0:
            return taken

        def collect(value: T) -> bool:
            taken.append(value)
            return len(taken) < count

        self.drive(collect)
        return taken

    def __repr__(self) -> str:
        return f"LazySequence(name={self._name}, state={self._state.value})"
