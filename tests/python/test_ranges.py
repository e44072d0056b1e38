"""
Tests for the Range iteration protocol and the four range types.
"""

import pytest
import numpy as np

import matsel
from matsel import (
    AllRange,
    BoundsViolationError,
    IndicesRange,
    IntervalRange,
    InvalidArgumentError,
    PointRange,
    Range,
    RangeStateError,
)


def walk(rng, lower, upper):
    """Drive a range with init/has_more/index/value/next, as the matrix does."""
    rng.init(lower, upper)
    seen_indices = []
    seen_values = []
    while rng.has_more():
        seen_indices.append(rng.index())
        seen_values.append(rng.value())
        rng.next()
    return seen_indices, seen_values


class TestProtocol:
    """Properties shared by every range type."""

    @pytest.mark.parametrize("rng, lower, upper", [
        (PointRange(2), 0, 5),
        (IntervalRange(1, 4), 0, 5),
        (IntervalRange(3, 2), 0, 5),
        (IndicesRange([4, 0, 4, 1]), 0, 5),
        (IndicesRange([]), 0, 5),
        (AllRange(), 0, 5),
        (AllRange(), 2, 2),
    ])
    def test_iteration_yields_length_values(self, rng, lower, upper):
        """Iterating to exhaustion yields exactly length() values."""
        idx, values = walk(rng, lower, upper)
        assert len(values) == rng.length()
        assert idx == list(range(rng.length()))
        assert not rng.has_more()

    def test_is_abstract(self):
        """Range itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Range()

    def test_init_resets_cursor(self):
        """Calling init again restarts iteration."""
        rng = IndicesRange([7, 8, 9])
        _, first = walk(rng, 0, 10)
        _, second = walk(rng, 0, 10)
        assert first == second == [7, 8, 9]

    def test_rebind_all_range_to_other_axis(self):
        """An AllRange can be reused on a domain of a different size."""
        rng = AllRange()
        assert walk(rng, 0, 3)[1] == [0, 1, 2]
        assert walk(rng, 0, 5)[1] == [0, 1, 2, 3, 4]

    def test_value_after_exhaustion_raises(self):
        """value() is only defined while has_more()."""
        rng = PointRange(1)
        walk(rng, 0, 3)
        with pytest.raises(RangeStateError):
            rng.value()

    def test_next_after_exhaustion_raises(self):
        """Advancing past the end is an error."""
        rng = IntervalRange(0, 0)
        walk(rng, 0, 1)
        with pytest.raises(RangeStateError):
            rng.next()

    def test_invalid_domain(self):
        """init rejects lower > upper and non-integer bounds."""
        with pytest.raises(InvalidArgumentError):
            AllRange().init(3, 1)
        with pytest.raises(InvalidArgumentError):
            AllRange().init(0, 2.5)

    def test_iter_yields_pairs(self):
        """Python iteration yields (index, value) pairs and consumes the range."""
        rng = IndicesRange([3, 1])
        rng.init(0, 4)
        assert list(rng) == [(0, 3), (1, 1)]
        assert list(rng) == []

    def test_len(self):
        """len() mirrors length()."""
        assert len(IntervalRange(2, 6)) == 5

    def test_positions(self):
        """positions() binds and collects every value."""
        np.testing.assert_array_equal(
            IntervalRange(1, 3).positions(0, 4), np.array([1, 2, 3])
        )

    def test_domain_property(self):
        """The bound domain is remembered."""
        rng = AllRange()
        assert rng.domain is None
        assert not rng.is_bound
        rng.init(1, 4)
        assert rng.domain == (1, 4)
        assert rng.is_bound


class TestPointRange:
    """Test PointRange."""

    def test_single_position(self):
        """A point yields its position exactly once."""
        assert walk(PointRange(4), 0, 10) == ([0], [4])

    def test_ignores_bounds(self):
        """The position is not validated against the domain by default."""
        assert walk(PointRange(7), 0, 3) == ([0], [7])

    def test_strict_mode_validates(self):
        """Strict mode checks the point against the domain."""
        with matsel.strict():
            with pytest.raises(BoundsViolationError) as info:
                PointRange(7).init(0, 3)
        assert info.value.start == 7
        assert info.value.upper == 3

    def test_rejects_non_integer(self):
        """Only integer positions are accepted."""
        with pytest.raises(InvalidArgumentError):
            PointRange(1.5)
        with pytest.raises(InvalidArgumentError):
            PointRange(True)

    def test_repr(self):
        """repr shows position and cursor."""
        rng = PointRange(2)
        rng.init(0, 3)
        assert repr(rng) == "<PointRange at 2, length 1, index=0, value=2>"


class TestIntervalRange:
    """Test IntervalRange (both ends inclusive)."""

    def test_end_inclusive(self):
        """interval(a, b) yields b - a + 1 positions a..b."""
        rng = IntervalRange(2, 5)
        assert rng.length() == 4
        assert walk(rng, 0, 10) == ([0, 1, 2, 3], [2, 3, 4, 5])

    def test_value_index_offset(self):
        """value() - index() equals start at every step."""
        rng = IntervalRange(3, 6)
        rng.init(0, 7)
        while rng.has_more():
            assert rng.value() - rng.index() == 3
            rng.next()

    def test_fills_domain_exactly(self):
        """An interval up to the last position of the axis is in bounds."""
        assert walk(IntervalRange(0, 2), 0, 3)[1] == [0, 1, 2]

    def test_end_beyond_domain(self):
        """An end at or past upper violates the bounds."""
        with pytest.raises(BoundsViolationError) as info:
            IntervalRange(1, 3).init(0, 3)
        err = info.value
        assert (err.lower, err.upper, err.start, err.end) == (0, 3, 1, 3)
        assert "Bounds 0 to 3" in str(err)
        assert err.code == matsel.MatselError.ERROR_RANGE_ERROR

    def test_start_below_domain(self):
        """A start before lower violates the bounds."""
        with pytest.raises(BoundsViolationError):
            IntervalRange(1, 2).init(2, 10)

    def test_bounds_violation_is_value_error(self):
        """Callers can catch the builtin ValueError."""
        with pytest.raises(ValueError):
            IntervalRange(0, 10).init(0, 5)

    def test_empty_interval(self):
        """b == a - 1 is the empty interval."""
        rng = IntervalRange(2, 1)
        assert rng.length() == 0
        assert walk(rng, 0, 5) == ([], [])

    def test_reversed_interval_rejected(self):
        """b < a - 1 is rejected at construction."""
        with pytest.raises(InvalidArgumentError):
            IntervalRange(5, 2)

    def test_repr(self):
        """repr names the interval."""
        rng = IntervalRange(1, 3)
        rng.init(0, 4)
        assert repr(rng) == "<IntervalRange from 1 to 3, length 3, index=0, value=1>"


class TestIndicesRange:
    """Test IndicesRange."""

    def test_order_and_repeats(self):
        """Positions come back in the given order, repeats included."""
        assert walk(IndicesRange([0, 2, 1, 3, 0]), 0, 4)[1] == [0, 2, 1, 3, 0]

    def test_truncates_toward_zero(self):
        """Non-integer entries are truncated toward zero."""
        rng = IndicesRange(np.array([0.9, 2.5, 1.999]))
        assert walk(rng, 0, 3)[1] == [0, 2, 1]

    def test_not_validated_by_default(self):
        """Out-of-domain positions are not checked at init."""
        assert walk(IndicesRange([0, 9]), 0, 3)[1] == [0, 9]

    def test_strict_mode_validates(self):
        """Strict mode reports the smallest and largest position."""
        matsel.set_strict_ranges(True)
        with pytest.raises(BoundsViolationError) as info:
            IndicesRange([1, 9, 2]).init(0, 3)
        assert (info.value.start, info.value.end) == (1, 9)

    def test_copies_input(self):
        """Later changes to the caller's array do not leak in."""
        source = np.array([1, 2, 3])
        rng = IndicesRange(source)
        source[0] = 99
        assert walk(rng, 0, 100)[1] == [1, 2, 3]

    def test_indices_view_is_read_only(self):
        """The exposed position list cannot be modified."""
        rng = IndicesRange([1, 2])
        with pytest.raises(ValueError):
            rng.indices[0] = 5

    def test_from_nonzero(self):
        """from_nonzero selects ascending nonzero positions."""
        assert walk(IndicesRange.from_nonzero([0, 5, 0, 3]), 0, 4)[1] == [1, 3]

    def test_rejects_non_numeric(self):
        """Strings and booleans are not positions."""
        with pytest.raises(TypeError):
            IndicesRange("abc")
        with pytest.raises(TypeError):
            IndicesRange([True, False])


class TestAllRange:
    """Test AllRange."""

    def test_full_axis(self):
        """all() bound with (0, N) yields 0..N-1."""
        rng = AllRange()
        rng.init(0, 4)
        assert rng.length() == 4
        assert walk(rng, 0, 4)[1] == [0, 1, 2, 3]

    def test_offset_domain(self):
        """Upper is exclusive for any lower bound."""
        assert walk(AllRange(), 2, 5)[1] == [2, 3, 4]

    def test_unbound_length_raises(self):
        """length() is meaningless before init."""
        with pytest.raises(RangeStateError):
            AllRange().length()
        with pytest.raises(RangeStateError):
            AllRange().has_more()

    def test_unbound_repr(self):
        """repr works before init."""
        assert repr(AllRange()) == "<AllRange, unbound>"
