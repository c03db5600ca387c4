"""
iterthing: Lazy Sequence Combinators over Python's Iteration Protocol
=====================================================================

Python iteration comes in two shapes: repeatable sources (lists, ranges,
dicts) that hand out a fresh iterator on every ``iter()`` call, and cursors
(iterators, generators) that can only be walked once. iterthing accepts
either shape everywhere and builds lazy pipelines on top.

Core Components:
    - core.normalize: ``iterate`` / ``iterable`` adapters between the two shapes
    - core.combinators: map, filter, chain, zip, pairs, repeat, steps, ...
    - core.terminals: collect, each, first, last, reduce, count
    - pipeline: ``LazyChain`` method-chaining front end with map fusion

Usage:
    >>> import iterthing as it
    >>> it.collect(it.pairs([1, 2, 3, 4]))
    [(1, 2), (2, 3), (3, 4)]
    >>> it.reduce([1, 2, 3], lambda a, b: a + b, 0)
    6
    >>> it.lazy(range(10)).map(lambda x: x * x).take(3).collect()
    [0, 1, 4]

The combinators ``map``, ``filter``, ``zip`` and ``enumerate`` share their
names with builtins; prefer ``import iterthing as it`` over star imports.
"""

__version__ = "1.0.0"
__author__ = "iterthing contributors"

from iterthing.errors import EmptySequence
from iterthing.core.normalize import (
    Iterthing,
    OnceIterable,
    is_cursor,
    iterable,
    iterate,
    to_cursor,
    to_sequence,
)
from iterthing.core.combinators import (
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
from iterthing.core.terminals import collect, count, each, first, last, reduce
from iterthing.pipeline.lazy_chain import LazyChain, lazy
