"""
Terminal operations: drain a source into a value or a side effect.

``first`` and ``last`` raise ``EmptySequence`` when there is nothing to
return. ``reduce`` falls back to its initial value instead.
"""

import logging
from typing import Any, Callable, List, TypeVar

from ..errors import EmptySequence
from .combinators import steps
from .normalize import Iterthing, iterable, iterate

T = TypeVar('T')
S = TypeVar('S')

logger = logging.getLogger(__name__)

_MISSING = object()


def collect(source: Iterthing[T]) -> List[T]:
    """Drain ``source`` into a new list. An exhausted cursor gives ``[]``."""
    return list(iterable(source))


def each(source: Iterthing[T], callback: Callable[[T], Any]) -> None:
    """Call ``callback`` on every element, in order, ignoring its result."""
    for item in iterable(source):
        callback(item)


def first(source: Iterthing[T]) -> T:
    """
    Return the next element of ``source``.

    On a cursor this consumes exactly one element, so two calls return two
    successive values. On a repeatable source it is always the first one.
    """
    item = next(iterate(source), _MISSING)
    if item is _MISSING:
        logger.debug("first() on empty source %r", source)
        raise EmptySequence("first")
    return item


def last(source: Iterthing[T]) -> T:
    """Drain ``source`` and return the final element."""
    item = _MISSING
    for item in iterable(source):
        pass
    if item is _MISSING:
        logger.debug("last() on empty source %r", source)
        raise EmptySequence("last")
    return item


def reduce(source: Iterthing[T], combine: Callable[[S, T], S], initial: S) -> S:
    """
    Fold ``source`` with ``combine`` starting from ``initial``.

    Same as the last value of ``steps(source, combine, initial)``, except an
    empty source returns ``initial`` rather than raising.
    """
    result = initial
    for result in steps(source, combine, initial):
        pass
    return result


def count(source: Iterthing[T]) -> int:
    """Drain ``source`` and return how many elements it produced."""
    total = 0
    for _ in iterable(source):
        total += 1
    return total
