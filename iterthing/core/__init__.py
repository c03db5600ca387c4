"""Normalizer, combinators and terminal operations."""

from .normalize import OnceIterable, is_cursor, iterable, iterate, to_cursor, to_sequence
from .combinators import (
    chain,
    enumerate,
    filter,
    flat_map,
    map,
    pairs,
    repeat,
    skip,
    steps,
    take,
    zip,
)
from .terminals import collect, count, each, first, last, reduce
