"""
Lazy Chain
==========

Method-chaining front end over the combinators and terminals.

    result = (lazy(range(1000))
        .map(lambda x: x * x)
        .filter(lambda x: x % 2 == 0)
        .take(10)
        .collect())

Recording an operation returns a new chain and computes nothing. Work
happens when a terminal operation (collect, reduce, first, ...) runs or the
chain is iterated. Adjacent maps are fused into one composed function before
execution, so a run of ``k`` maps costs one generator frame instead of ``k``.

A chain built over a cursor inherits its single-pass nature: the first
execution consumes the cursor, and later executions see it exhausted. The
same holds for cursors handed to ``zip`` or ``chain``: a chain is only
re-runnable when its source and every source passed to those operations
are repeatable.
"""

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..core import combinators, terminals
from ..core.normalize import Iterthing, iterable

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


class LazyChain(Generic[T]):
    """
    Deferred pipeline over a source.

    Usage:
        >>> chain = LazyChain([3, 1, 2])
        >>> chain.map(lambda x: x * 10).collect()
        [30, 10, 20]
        >>> chain.pairs().collect()
        [(3, 1), (1, 2)]
    """

    def __init__(
        self,
        source: Iterthing[T],
        fuse_maps: bool = True,
        enable_logging: bool = False,
    ):
        self._source = iterable(source)
        self._operations: List[tuple] = []
        self.fuse_maps = fuse_maps

        if enable_logging:
            logging.basicConfig(level=logging.DEBUG)

    def _with(self, op_type: str, *args: Any) -> 'LazyChain':
        new_chain = LazyChain.__new__(LazyChain)
        new_chain._source = self._source
        new_chain._operations = self._operations + [(op_type, args)]
        new_chain.fuse_maps = self.fuse_maps
        return new_chain

    # ---- Intermediate Operations (deferred) ----

    def map(self, func: Callable[[T], U]) -> 'LazyChain[U]':
        return self._with('map', func)

    def filter(self, predicate: Callable[[T], Any]) -> 'LazyChain[T]':
        return self._with('filter', predicate)

    def take(self, n: int) -> 'LazyChain[T]':
        """Take first n elements (enables short-circuiting)."""
        if n < 0:
            raise ValueError(f"take() count must be >= 0, got {n}")
        return self._with('take', n)

    def skip(self, n: int) -> 'LazyChain[T]':
        if n < 0:
            raise ValueError(f"skip() count must be >= 0, got {n}")
        return self._with('skip', n)

    def flat_map(self, func: Callable[[T], Iterthing[U]]) -> 'LazyChain[U]':
        return self._with('flat_map', func)

    def enumerate(self, start: int = 0) -> 'LazyChain[Tuple[int, T]]':
        return self._with('enumerate', start)

    def zip(self, other: Iterthing[U], fillvalue: Any = None) -> 'LazyChain[Tuple[Optional[T], Optional[U]]]':
        """
        Pair with ``other``; the shorter side is padded with ``fillvalue``.

        A cursor ``other`` is consumed by the first run; later runs pad
        every slot on that side.
        """
        return self._with('zip', other, fillvalue)

    def pairs(self) -> 'LazyChain[Tuple[T, T]]':
        return self._with('pairs')

    def steps(self, func: Callable[[U, T], U], initial: U) -> 'LazyChain[U]':
        """Running fold, one accumulator value per element."""
        return self._with('steps', func, initial)

    def chain(self, *others: Iterthing[T]) -> 'LazyChain[T]':
        """Append further sources after this one. Cursors among them are single-pass."""
        return self._with('chain', others)

    # ---- Terminal Operations (trigger execution) ----

    def collect(self) -> List[T]:
        return terminals.collect(self._execute())

    def each(self, func: Callable[[T], Any]) -> None:
        terminals.each(self._execute(), func)

    foreach = each

    def first(self) -> T:
        """First element; raises EmptySequence if there is none."""
        return terminals.first(self._execute())

    def last(self) -> T:
        """Last element; raises EmptySequence if there is none."""
        return terminals.last(self._execute())

    def reduce(self, func: Callable[[U, T], U], initial: U) -> U:
        """Fold all elements; an empty chain gives ``initial``."""
        return terminals.reduce(self._execute(), func, initial)

    def sum(self, start: Any = 0) -> Any:
        return terminals.reduce(self._execute(), lambda acc, x: acc + x, start)

    def count(self) -> int:
        return terminals.count(self._execute())

    def __iter__(self) -> Iterator[T]:
        return self._execute()

    def __repr__(self) -> str:
        ops = ', '.join(op_type for op_type, _ in self._operations)
        return f"LazyChain({self._source!r}, ops=[{ops}])"

    # ---- Execution Engine ----

    def _execute(self) -> Iterator:
        """Build the generator pipeline for the recorded operations."""
        operations = self._fuse_operations() if self.fuse_maps else self._operations
        logger.debug(
            "executing chain: %d operations (%d after fusion)",
            len(self._operations), len(operations),
        )

        stream = iter(self._source)
        for op_type, args in operations:
            if op_type == 'map':
                stream = combinators.map(stream, *args)
            elif op_type == 'filter':
                stream = combinators.filter(stream, *args)
            elif op_type == 'take':
                stream = combinators.take(stream, *args)
            elif op_type == 'skip':
                stream = combinators.skip(stream, *args)
            elif op_type == 'flat_map':
                stream = combinators.flat_map(stream, *args)
            elif op_type == 'enumerate':
                stream = combinators.enumerate(stream, *args)
            elif op_type == 'zip':
                other, fillvalue = args
                stream = combinators.zip(stream, other, fillvalue)
            elif op_type == 'pairs':
                stream = combinators.pairs(stream)
            elif op_type == 'steps':
                stream = combinators.steps(stream, *args)
            elif op_type == 'chain':
                stream = combinators.chain(stream, *args[0])
            else:
                raise ValueError(f"Unknown operation: {op_type}")

        return stream

    def _fuse_operations(self) -> List[tuple]:
        """
        Fuse adjacent map operations.

        map(f) -> map(g) becomes map(lambda x: g(f(x))), which keeps the
        one-call-per-element guarantee for each of f and g.
        """
        optimized = []
        pending_maps = []

        for op_type, args in self._operations:
            if op_type == 'map':
                pending_maps.append(args[0])
            else:
                if pending_maps:
                    optimized.append(('map', (self._compose_functions(pending_maps),)))
                    pending_maps = []
                optimized.append((op_type, args))

        if pending_maps:
            optimized.append(('map', (self._compose_functions(pending_maps),)))

        return optimized

    @staticmethod
    def _compose_functions(funcs: List[Callable]) -> Callable:
        if len(funcs) == 1:
            return funcs[0]

        def composed(x):
            result = x
            for f in funcs:
                result = f(result)
            return result

        return composed


def lazy(source: Iterable) -> LazyChain:
    """
    Convenience function to create a lazy chain.

    Usage:
        >>> lazy(range(10)).filter(lambda x: x % 3 == 0).collect()
        [0, 3, 6, 9]
    """
    return LazyChain(source)
