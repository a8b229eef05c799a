from __future__ import annotations
from functools import partial
from ..types import *


def _require_callables(fns: Tuple[Callable, ...], combinator: str) -> None:
    if not fns:
        raise TypeError(f"{combinator} needs at least one function")
    for fn in fns:
        if not callable(fn):
            raise TypeError(f"{combinator} arguments must be callable, got {type(fn).__name__}")


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """right to left: compose(f, g)(x) == f(g(x))"""
    _require_callables(fns, 'compose')

    def composed(value):
        for fn in reversed(fns):
            value = fn(value)
        return value

    return composed


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """left to right: pipe(f, g)(x) == g(f(x))"""
    _require_callables(fns, 'pipe')

    def piped(value):
        for fn in fns:
            value = fn(value)
        return value

    return piped


def curry(fn: Callable[..., C], arity: int = 2) -> Callable[[Any], Any]:
    """
    turn an n-ary function into a chain of single-argument functions.
    curry(f)(a)(b) == f(a, b); curry(f, 3)(a)(b)(c) == f(a, b, c).
    """
    _require_callables((fn,), 'curry')
    if arity < 1:
        raise ValueError("curry arity must be at least 1")

    def collect(bound: Callable[..., C], remaining: int) -> Callable[[Any], Any]:
        def take_one(arg):
            applied = partial(bound, arg)
            return applied() if remaining == 1 else collect(applied, remaining - 1)
        return take_one

    return collect(fn, arity)
