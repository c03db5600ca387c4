"""
Tests for the lazy combinators.

Validates:
  - Each combinator produces the documented values in order
  - Upstream cursors are never advanced further than the consumer demands
  - Exhausted combinators stay exhausted
  - zip keeps going until both sides run out
"""

import pytest
import iterthing as it


class CountingSource:
    """Iterator that records how many values have been pulled from it."""

    def __init__(self, values):
        self._values = iter(values)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        value = next(self._values)
        self.pulled += 1
        return value


class TestMap:
    def test_map(self):
        assert list(it.map([1, 2, 3], lambda x: x * 2)) == [2, 4, 6]

    def test_map_empty(self):
        assert list(it.map([], lambda x: x)) == []

    def test_transform_is_lazy(self):
        calls = []
        mapped = it.map([1, 2, 3], lambda x: calls.append(x) or x)
        assert calls == []
        assert next(mapped) == 1
        assert calls == [1]

    def test_pulls_only_what_is_requested(self):
        source = CountingSource(range(100))
        mapped = it.map(source, lambda x: x + 1)
        assert [next(mapped) for _ in range(3)] == [1, 2, 3]
        assert source.pulled == 3

    def test_consumes_callers_cursor(self):
        gen = (x for x in range(5))
        mapped = it.map(gen, lambda x: x)
        next(mapped)
        next(mapped)
        assert list(gen) == [2, 3, 4]

    def test_callback_error_propagates(self):
        source = CountingSource([1, 0, 2])
        mapped = it.map(source, lambda x: 1 // x)
        assert next(mapped) == 1
        with pytest.raises(ZeroDivisionError):
            next(mapped)
        assert source.pulled == 2
        assert next(source) == 2

    def test_exhausted_map_stays_exhausted(self):
        mapped = it.map([1], lambda x: x)
        assert list(mapped) == [1]
        assert list(mapped) == []
        assert next(mapped, None) is None


class TestFilter:
    def test_filter(self):
        assert list(it.filter(range(10), lambda x: x % 2 == 0)) == [0, 2, 4, 6, 8]

    def test_predicate_called_once_per_element(self):
        seen = []

        def keep_odd(x):
            seen.append(x)
            return x % 2

        assert list(it.filter([1, 2, 3, 4, 5], keep_odd)) == [1, 3, 5]
        assert seen == [1, 2, 3, 4, 5]

    def test_pulls_only_what_is_requested(self):
        source = CountingSource(range(100))
        filtered = it.filter(source, lambda x: x % 10 == 0)
        assert next(filtered) == 0
        assert next(filtered) == 10
        assert source.pulled == 11

    def test_nothing_passes(self):
        assert list(it.filter([1, 2, 3], lambda x: False)) == []

    def test_predicate_error_propagates(self):
        source = CountingSource([2, 4, 'x', 6])
        filtered = it.filter(source, lambda x: x % 2 == 0)
        assert next(filtered) == 2
        assert next(filtered) == 4
        with pytest.raises(TypeError):
            next(filtered)
        assert source.pulled == 3
        assert next(source) == 6

    def test_exhausted_filter_stays_exhausted(self):
        filtered = it.filter([1, 2], lambda x: x > 1)
        assert list(filtered) == [2]
        assert list(filtered) == []
        assert next(filtered, None) is None


class TestChain:
    def test_chain(self):
        assert list(it.chain([1, 2], [3], [], [4])) == [1, 2, 3, 4]

    def test_no_sources(self):
        assert list(it.chain()) == []

    def test_mixed_shapes(self):
        gen = (x for x in 'bc')
        assert list(it.chain('a', gen, ('d',))) == ['a', 'b', 'c', 'd']

    def test_later_source_untouched_until_reached(self):
        first = CountingSource([1, 2])
        second = CountingSource([3, 4])
        chained = it.chain(first, second)
        assert next(chained) == 1
        assert next(chained) == 2
        assert second.pulled == 0
        assert next(chained) == 3
        assert second.pulled == 1

    def test_non_iterable_fails_when_reached(self):
        chained = it.chain([1], 5)
        assert next(chained) == 1
        with pytest.raises(TypeError):
            next(chained)


class TestZip:
    def test_equal_lengths(self):
        assert list(it.zip([1, 2], 'ab')) == [(1, 'a'), (2, 'b')]

    def test_longer_left_side(self):
        assert list(it.zip([1, 2, 3], ['a', 'b'])) == [(1, 'a'), (2, 'b'), (3, None)]

    def test_longer_right_side(self):
        assert list(it.zip([1], 'abc')) == [(1, 'a'), (None, 'b'), (None, 'c')]

    def test_both_empty(self):
        assert list(it.zip([], [])) == []

    def test_one_side_empty(self):
        assert list(it.zip([], [1, 2])) == [(None, 1), (None, 2)]

    def test_fillvalue(self):
        assert list(it.zip([1, 2, 3], 'a', fillvalue='-')) == [(1, 'a'), (2, '-'), (3, '-')]

    def test_absent_is_not_last_value(self):
        pairs = list(it.zip([1, 2, 3], [7]))
        assert pairs[1] == (2, None)
        assert pairs[2] == (3, None)

    def test_exhausted_side_not_advanced_again(self):
        class Strict:
            def __init__(self, n):
                self.n = n
                self.advances_after_done = 0
                self.done = False

            def __iter__(self):
                return self

            def __next__(self):
                if self.done:
                    self.advances_after_done += 1
                    raise StopIteration
                if self.n == 0:
                    self.done = True
                    raise StopIteration
                self.n -= 1
                return self.n

        short = Strict(1)
        assert len(list(it.zip(short, range(5)))) == 5
        assert short.advances_after_done == 0

    def test_exhausted_zip_stays_exhausted(self):
        zipped = it.zip([1], 'ab')
        assert list(zipped) == [(1, 'a'), (None, 'b')]
        assert list(zipped) == []
        assert next(zipped, 'done') == 'done'

    def test_lockstep_laziness(self):
        lhs = CountingSource(range(10))
        rhs = CountingSource(range(10))
        zipped = it.zip(lhs, rhs)
        next(zipped)
        next(zipped)
        assert lhs.pulled == 2
        assert rhs.pulled == 2


class TestPairs:
    def test_empty(self):
        assert list(it.pairs([])) == []

    def test_single(self):
        assert list(it.pairs(['x'])) == []

    def test_two(self):
        assert list(it.pairs(['x', 'y'])) == [('x', 'y')]

    def test_four(self):
        assert list(it.pairs([1, 2, 3, 4])) == [(1, 2), (2, 3), (3, 4)]

    def test_n_minus_one_pairs(self):
        assert len(list(it.pairs(range(50)))) == 49

    def test_cursor_source(self):
        assert list(it.pairs(iter('abc'))) == [('a', 'b'), ('b', 'c')]

    def test_exhausted_pairs_stays_exhausted(self):
        paired = it.pairs([1, 2, 3])
        assert list(paired) == [(1, 2), (2, 3)]
        assert list(paired) == []
        assert next(paired, 'done') == 'done'

    def test_short_source_stays_exhausted(self):
        paired = it.pairs([1])
        assert next(paired, 'done') == 'done'
        assert next(paired, 'done') == 'done'


class TestRepeat:
    def test_value(self):
        assert list(it.repeat(42, 3)) == [42, 42, 42]

    def test_producer(self):
        assert list(it.repeat(lambda: 42, 3)) == [42, 42, 42]

    def test_producer_called_fresh(self):
        counter = iter(range(100))
        assert list(it.repeat(lambda: next(counter), 4)) == [0, 1, 2, 3]

    def test_zero(self):
        assert list(it.repeat('x', 0)) == []

    def test_negative(self):
        assert list(it.repeat('x', -5)) == []

    def test_unbounded(self):
        forever = it.repeat(7)
        assert [next(forever) for _ in range(1000)] == [7] * 1000

    def test_same_object_repeated(self):
        value = []
        repeated = list(it.repeat(value, 2))
        assert repeated[0] is value
        assert repeated[1] is value

    def test_producer_is_lazy(self):
        calls = []
        repeated = it.repeat(lambda: calls.append(1), 3)
        assert calls == []
        next(repeated)
        assert calls == [1]


class TestSteps:
    def test_running_sum(self):
        assert list(it.steps([1, 2, 3], lambda a, b: a + b, 0)) == [1, 3, 6]

    def test_empty(self):
        assert list(it.steps([], lambda a, b: a + b, 0)) == []

    def test_initial_not_yielded(self):
        assert list(it.steps([5], lambda a, b: a * b, 1)) == [5]

    def test_one_value_per_element(self):
        assert list(it.steps('abc', lambda a, b: a + b, '')) == ['a', 'ab', 'abc']

    def test_combine_error_propagates(self):
        source = CountingSource([1, 'x', 3])
        running = it.steps(source, lambda a, b: a + b, 0)
        assert next(running) == 1
        with pytest.raises(TypeError):
            next(running)
        assert source.pulled == 2
        assert next(source) == 3

    def test_exhausted_steps_stays_exhausted(self):
        running = it.steps([1, 2], lambda a, b: a + b, 0)
        assert list(running) == [1, 3]
        assert list(running) == []
        assert next(running, None) is None


class TestTakeSkip:
    def test_take(self):
        assert list(it.take(range(100), 3)) == [0, 1, 2]

    def test_take_more_than_available(self):
        assert list(it.take([1, 2], 5)) == [1, 2]

    def test_take_does_not_overpull(self):
        source = CountingSource(range(100))
        assert list(it.take(source, 3)) == [0, 1, 2]
        assert source.pulled == 3

    def test_take_zero(self):
        source = CountingSource(range(10))
        assert list(it.take(source, 0)) == []
        assert source.pulled == 0

    def test_skip(self):
        assert list(it.skip(range(10), 7)) == [7, 8, 9]

    def test_skip_past_end(self):
        assert list(it.skip([1, 2], 5)) == []

    def test_negative_counts(self):
        with pytest.raises(ValueError):
            it.take([1], -1)
        with pytest.raises(ValueError):
            it.skip([1], -1)


class TestFlatMapEnumerate:
    def test_flat_map(self):
        result = list(it.flat_map([[1, 2], [3, 4], [5]], lambda x: x))
        assert result == [1, 2, 3, 4, 5]

    def test_flat_map_generators(self):
        result = list(it.flat_map([1, 2, 3], lambda n: it.repeat(n, n)))
        assert result == [1, 2, 2, 3, 3, 3]

    def test_enumerate(self):
        assert list(it.enumerate(['a', 'b', 'c'])) == [(0, 'a'), (1, 'b'), (2, 'c')]

    def test_enumerate_start(self):
        assert list(it.enumerate('ab', start=1)) == [(1, 'a'), (2, 'b')]


class TestComposition:
    def test_map_filter_pairs(self):
        result = it.collect(
            it.pairs(it.filter(it.map(range(10), lambda x: x * x), lambda x: x % 2 == 0))
        )
        assert result == [(0, 4), (4, 16), (16, 36), (36, 64)]

    def test_zip_of_chains(self):
        result = list(it.zip(it.chain([1], [2]), it.repeat('z', 3)))
        assert result == [(1, 'z'), (2, 'z'), (None, 'z')]

    def test_steps_over_repeat(self):
        assert list(it.steps(it.repeat(2, 4), lambda a, b: a * b, 1)) == [2, 4, 8, 16]

    def test_pipeline_pulls_minimum(self):
        source = CountingSource(range(1000))
        pipeline = it.map(it.filter(source, lambda x: x % 2 == 0), lambda x: x * 10)
        assert list(it.take(pipeline, 3)) == [0, 20, 40]
        assert source.pulled == 5
