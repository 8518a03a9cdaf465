"""Unit tests for canonical scalar encoding and the distance bound."""

import math

import numpy as np
import pytest

from df_assignments.errors import EncodingError
from df_assignments.primitives.encoding import (
    DISTANCE_SQUARED_BITS,
    distance_bound,
    encode_flag,
    encode_int,
    encode_scalar,
)
from df_assignments.primitives.field import MAX_SIGNED


class TestEncodeInt:
    """Tests for integer encoding."""

    @pytest.mark.parametrize("value,expected", [
        (0, "0"),
        (7, "7"),
        (-4, "-4"),
        (1000000, "1000000"),
        (np.int64(-12), "-12"),
        (np.uint32(42), "42"),
    ])
    def test_decimal(self, value, expected: str) -> None:
        """Plain base-10 with a sign only for negatives."""
        assert encode_int(value) == expected

    def test_field_boundary(self) -> None:
        """The largest signed field value still encodes."""
        assert encode_int(MAX_SIGNED) == str(MAX_SIGNED)
        assert encode_int(-MAX_SIGNED) == str(-MAX_SIGNED)

    def test_beyond_field_rejected(self) -> None:
        """Values outside the field are not wrapped."""
        with pytest.raises(EncodingError):
            encode_int(MAX_SIGNED + 1)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        """NaN and infinities fail as not finite."""
        with pytest.raises(EncodingError, match="not finite"):
            encode_int(value)

    @pytest.mark.parametrize("value", [1.0, 2.5, np.float32(3.0)])
    def test_floats_rejected(self, value) -> None:
        """Finite floats are never truncated or rounded."""
        with pytest.raises(EncodingError, match="not an integer"):
            encode_int(value)

    def test_bool_is_not_an_integer(self) -> None:
        """A flag passed where an integer is expected is a caller bug."""
        with pytest.raises(EncodingError):
            encode_int(True)

    def test_string_rejected(self) -> None:
        """Pre-encoded strings are not re-accepted."""
        with pytest.raises(EncodingError):
            encode_int("7")


class TestEncodeFlag:
    """Tests for mirror flag encoding."""

    def test_true_false(self) -> None:
        """Booleans encode to "1"/"0", never "true"/"false"."""
        assert encode_flag(True) == "1"
        assert encode_flag(False) == "0"

    def test_numpy_bool(self) -> None:
        """numpy booleans are accepted."""
        assert encode_flag(np.bool_(True)) == "1"
        assert encode_flag(np.bool_(False)) == "0"

    @pytest.mark.parametrize("value", [1, 0, "true", None, 1.0])
    def test_non_bool_rejected(self, value) -> None:
        """Only real booleans are flags."""
        with pytest.raises(EncodingError):
            encode_flag(value)

    def test_scalar_dispatch(self) -> None:
        """encode_scalar routes booleans to flags and ints to decimals."""
        assert encode_scalar(True) == "1"
        assert encode_scalar(False) == "0"
        assert encode_scalar(-3) == "-3"


class TestDistanceBound:
    """Tests for the move circuit distance bound."""

    def test_exact_distance(self) -> None:
        """A 3-4-5 triangle needs no rounding."""
        assert distance_bound((0, 0), (3, 4)) == 5

    def test_rounds_up(self) -> None:
        """sqrt(2) rounds up to 2."""
        assert distance_bound((0, 0), (1, 1)) == 2

    def test_symmetric(self) -> None:
        """Direction does not matter."""
        assert distance_bound((5, -7), (-2, 3)) == distance_bound((-2, 3), (5, -7))

    def test_zero(self) -> None:
        """Same point gives zero."""
        assert distance_bound((4, 4), (4, 4)) == 0

    def test_no_float_drift(self) -> None:
        """Just above a perfect square still rounds up at large magnitudes.

        sqrt(10^16 + 1) evaluates to exactly 10^8 in double precision, which
        would make the bound one too small.
        """
        assert math.ceil(math.sqrt(10**16 + 1)) == 10**8
        assert distance_bound((0, 0), (10**8, 1)) == 10**8 + 1

    @pytest.mark.parametrize("a,b", [
        ((0, 0), (2, 3)),
        ((-10, 4), (7, -9)),
        ((123, 456), (-789, 1011)),
        ((0, 0), (99, 0)),
    ])
    def test_smallest_upper_bound(self, a, b) -> None:
        """bound >= distance and bound - 1 < distance."""
        squared = (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2
        bound = distance_bound(a, b)
        assert bound * bound >= squared
        assert (bound - 1) * (bound - 1) < squared

    def test_largest_bound_in_range(self) -> None:
        """distmax^2 may use all 64 bits."""
        limit = (1 << (DISTANCE_SQUARED_BITS // 2)) - 1
        assert distance_bound((0, 0), (limit, 0)) == limit

    def test_bound_out_of_circuit_range(self) -> None:
        """A bound whose square needs 65 bits is rejected."""
        with pytest.raises(EncodingError):
            distance_bound((-(1 << 31), 0), (1 << 31, 0))

    def test_non_integer_coordinate(self) -> None:
        """NaN coordinates fail instead of producing a bound."""
        with pytest.raises(EncodingError, match="not finite"):
            distance_bound((float("nan"), 0), (1, 1))
