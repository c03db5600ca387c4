"""
Normalizer
==========

Python hands us two shapes of iterable input:

  - Repeatable sources (lists, tuples, ranges, dicts, ...): ``iter(x)``
    returns a fresh, independent cursor every time.
  - Cursors (iterators, generators): ``iter(x)`` returns ``x`` itself, so
    the position is shared and consumption is one-time only.

``iterate`` turns either shape into a cursor; ``iterable`` turns either shape
into something that can be handed to a ``for`` loop. Neither one copies data.
"""

from typing import Any, Generic, Iterable, Iterator, TypeVar, Union

T = TypeVar('T')

Iterthing = Union[Iterable[T], Iterator[T]]


def is_cursor(source: Any) -> bool:
    """True if ``source`` is a single-pass cursor rather than a repeatable source."""
    return isinstance(source, Iterator)


def iterate(source: Iterthing[T]) -> Iterator[T]:
    """
    Return a cursor over ``source``.

    A cursor is returned unchanged; a repeatable source yields a brand-new
    cursor on every call.

        >>> it = iterate([1, 2, 3])
        >>> next(it), next(it)
        (1, 2)
    """
    if is_cursor(source):
        return source
    if not isinstance(source, Iterable):
        raise TypeError(f"Expected an iterable or iterator, got {type(source).__name__}")
    return iter(source)


class OnceIterable(Generic[T]):
    """
    Iterable view over a single cursor.

    Every ``iter()`` call hands out the same cursor, so the view can be
    consumed once. Later passes see whatever the cursor has left, which is
    nothing after a full pass.
    """

    __slots__ = ('_cursor',)

    def __init__(self, cursor: Iterator[T]):
        self._cursor = cursor

    def __iter__(self) -> Iterator[T]:
        return self._cursor

    def __repr__(self) -> str:
        return f"OnceIterable({self._cursor!r})"


def iterable(source: Iterthing[T]) -> Iterable[T]:
    """
    Return an iterable over ``source``.

    A repeatable source is returned unchanged. A cursor is wrapped in a
    ``OnceIterable`` that shares its exhaustion state:

        >>> gen = (x for x in range(3))
        >>> list(iterable(gen)), list(iterable(gen))
        ([0, 1, 2], [])
    """
    if is_cursor(source):
        return OnceIterable(source)
    if not isinstance(source, Iterable):
        raise TypeError(f"Expected an iterable or iterator, got {type(source).__name__}")
    return source


to_cursor = iterate
to_sequence = iterable
