"""
Combinators
===========

Lazy transformations over either shape of source. Every combinator returns a
generator: nothing upstream is touched until the consumer asks for the next
value, and at most as much as that value needs.

Repeatable sources are turned into a fresh cursor when the combinator is
called; cursors are consumed in place, so a cursor passed to ``map`` is the
same cursor the caller holds.

The names intentionally mirror the builtins (``map``, ``filter``, ``zip``,
``enumerate``), so import the module or the names you need rather than
``from ... import *``.
"""

from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar

from .normalize import Iterthing, iterate

T = TypeVar('T')
U = TypeVar('U')
S = TypeVar('S')

_MISSING = object()


def map(source: Iterthing[T], transform: Callable[[T], U]) -> Iterator[U]:
    """Yield ``transform(x)`` for each ``x``, one call per pulled element."""
    return _map_iter(iterate(source), transform)


def filter(source: Iterthing[T], predicate: Callable[[T], Any]) -> Iterator[T]:
    """Yield the elements for which ``predicate`` is truthy."""
    return _filter_iter(iterate(source), predicate)


def chain(*sources: Iterthing[T]) -> Iterator[T]:
    """
    Yield every element of each source in turn.

    A source is normalized only once the one before it is exhausted, so
    ``chain(a, gen)`` does not touch ``gen`` while ``a`` still has data.
    """
    for source in sources:
        yield from iterate(source)


def zip(
    lhs: Iterthing[T],
    rhs: Iterthing[U],
    fillvalue: Any = None,
) -> Iterator[Tuple[Optional[T], Optional[U]]]:
    """
    Pair up two sources in lockstep.

    Keeps going while either side still has data. Once a side is exhausted
    it is no longer advanced and ``fillvalue`` takes its slot:

        >>> list(zip([1, 2, 3], 'ab'))
        [(1, 'a'), (2, 'b'), (3, None)]
    """
    return _zip_iter(iterate(lhs), iterate(rhs), fillvalue)


def pairs(source: Iterthing[T]) -> Iterator[Tuple[T, T]]:
    """Yield overlapping neighbours ``(x0, x1), (x1, x2), ...``."""
    return _pairs_iter(iterate(source))


def repeat(value_or_producer: Any, n: Optional[int] = None) -> Iterator[Any]:
    """
    Yield a value ``n`` times, or forever when ``n`` is None.

    A zero-argument callable is invoked for every yield and its result is
    yielded instead, so ``repeat(random.random, 3)`` gives three draws. To
    repeat a callable itself, use ``repeat(lambda: fn, n)``.
    """
    produce = value_or_producer if callable(value_or_producer) else None
    produced = 0
    while n is None or produced < n:
        yield produce() if produce is not None else value_or_producer
        produced += 1


def steps(source: Iterthing[T], combine: Callable[[S, T], S], initial: S) -> Iterator[S]:
    """
    Running fold: yield the accumulator after each element.

        >>> list(steps([1, 2, 3], lambda a, b: a + b, 0))
        [1, 3, 6]
    """
    return _steps_iter(iterate(source), combine, initial)


def take(source: Iterthing[T], n: int) -> Iterator[T]:
    """Yield at most the first ``n`` elements without pulling an extra one."""
    if n < 0:
        raise ValueError(f"take() count must be >= 0, got {n}")
    return _take_iter(iterate(source), n)


def skip(source: Iterthing[T], n: int) -> Iterator[T]:
    """Drop the first ``n`` elements, yield the rest."""
    if n < 0:
        raise ValueError(f"skip() count must be >= 0, got {n}")
    return _skip_iter(iterate(source), n)


def flat_map(source: Iterthing[T], func: Callable[[T], Iterthing[U]]) -> Iterator[U]:
    """Map each element to a source and yield from it."""
    return _flat_map_iter(iterate(source), func)


def enumerate(source: Iterthing[T], start: int = 0) -> Iterator[Tuple[int, T]]:
    """Yield ``(index, element)`` tuples counting from ``start``."""
    return _enumerate_iter(iterate(source), start)


# ---- Generator bodies ----
#
# Kept separate from the public functions so that argument errors and the
# normalization of repeatable sources happen at call time, not on first pull.

def _map_iter(stream: Iterator, func: Callable) -> Iterator:
    for x in stream:
        yield func(x)


def _filter_iter(stream: Iterator, predicate: Callable) -> Iterator:
    for x in stream:
        if predicate(x):
            yield x


def _zip_iter(lhs: Iterator, rhs: Iterator, fillvalue: Any) -> Iterator:
    lhs_done = rhs_done = False
    left = right = fillvalue
    while True:
        if not lhs_done:
            left = next(lhs, _MISSING)
            if left is _MISSING:
                lhs_done, left = True, fillvalue
        if not rhs_done:
            right = next(rhs, _MISSING)
            if right is _MISSING:
                rhs_done, right = True, fillvalue
        if lhs_done and rhs_done:
            return
        yield (left, right)


def _pairs_iter(stream: Iterator) -> Iterator:
    previous = next(stream, _MISSING)
    if previous is _MISSING:
        return
    for item in stream:
        yield (previous, item)
        previous = item


def _steps_iter(stream: Iterator, combine: Callable, state: Any) -> Iterator:
    for x in stream:
        state = combine(state, x)
        yield state


def _take_iter(stream: Iterator, n: int) -> Iterator:
    # Check the count before pulling so the cursor is not advanced past n.
    count = 0
    while count < n:
        item = next(stream, _MISSING)
        if item is _MISSING:
            return
        yield item
        count += 1


def _skip_iter(stream: Iterator, n: int) -> Iterator:
    count = 0
    for item in stream:
        if count >= n:
            yield item
        count += 1


def _flat_map_iter(stream: Iterator, func: Callable) -> Iterator:
    for item in stream:
        yield from iterate(func(item))


def _enumerate_iter(stream: Iterator, start: int) -> Iterator:
    index = start
    for item in stream:
        yield (index, item)
        index += 1
