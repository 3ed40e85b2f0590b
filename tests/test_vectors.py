"""Tests for the Vector value type and VectorPair model."""

import math

import pytest
from pydantic import ValidationError

from vecangle.exceptions import DimensionMismatchError, ErrorCode
from vecangle.vectors.models import Vector, VectorPair


class TestVectorConstruction:
    """Tests for creating vectors."""

    def test_of_positional(self) -> None:
        """Vector.of stores components in order."""
        v = Vector.of(1, 2, 3)
        assert v.components == (1.0, 2.0, 3.0)
        assert v.dimension == 3
        assert len(v) == 3
        assert v[1] == 2.0

    def test_iterates_components(self) -> None:
        """Iteration yields components, not model fields."""
        v = Vector.of(1, 2)
        assert list(v) == [1.0, 2.0]
        assert 1.0 in v
        assert 3.0 not in v
        assert sum(Vector()) == 0

    def test_ints_become_floats(self) -> None:
        """Integer components are stored as floats."""
        v = Vector(components=[1, 2])
        assert all(isinstance(x, float) for x in v.components)

    def test_empty_vector(self) -> None:
        """Default vector has dimension 0."""
        v = Vector()
        assert v.dimension == 0
        assert v.components == ()

    def test_is_immutable(self) -> None:
        """Components cannot be reassigned."""
        v = Vector.of(1, 2)
        with pytest.raises(ValidationError):
            v.components = (3.0, 4.0)  # type: ignore[misc]


class TestDot:
    """Tests for the dot product."""

    def test_dot(self) -> None:
        """Dot product sums element-wise products."""
        assert Vector.of(1, 2, 3).dot(Vector.of(4, 5, 6)) == 32.0

    def test_dot_empty(self) -> None:
        """Dot product of empty vectors is zero."""
        assert Vector().dot(Vector()) == 0.0

    def test_dot_mismatch(self) -> None:
        """Dot product requires equal dimensions."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            Vector.of(1, 2).dot(Vector.of(1, 2, 3))

        assert exc_info.value.code == ErrorCode.DIMENSION_MISMATCH_OPERATION
        assert exc_info.value.details == {"left": 2, "right": 3}


class TestNorm:
    """Tests for the Euclidean norm."""

    def test_norm(self) -> None:
        """Norm of a 3-4 vector is 5."""
        assert Vector.of(3, 4).norm() == 5.0

    def test_norm_empty(self) -> None:
        """Norm of the empty vector is zero."""
        assert Vector().norm() == 0.0


class TestAngle:
    """Tests for the angle between vectors."""

    def test_right_angle(self) -> None:
        """Orthogonal unit vectors are pi/2 apart."""
        assert Vector.of(1, 0).angle(Vector.of(0, 1)) == pytest.approx(math.pi / 2)

    def test_self_angle_is_zero(self) -> None:
        """A vector is at angle 0 from itself."""
        v = Vector.of(1, 2, 2)
        assert v.angle(v) == pytest.approx(0.0)

    def test_parallel(self) -> None:
        """Scaled vectors are at angle 0."""
        assert Vector.of(3, 4).angle(Vector.of(6, 8)) == pytest.approx(0.0)

    def test_antiparallel(self) -> None:
        """Opposite vectors are pi apart."""
        assert Vector.of(1, 0).angle(Vector.of(-1, 0)) == pytest.approx(math.pi)

    def test_reference_value(self) -> None:
        """Angle matches a precomputed value."""
        angle = Vector.of(1, 2, 3).angle(Vector.of(4, 5, 6))
        assert angle == pytest.approx(0.225726, rel=1e-5)

    def test_zero_vector_is_nan(self) -> None:
        """Angle involving a zero vector is NaN."""
        assert math.isnan(Vector.of(0, 0).angle(Vector.of(1, 0)))
        assert math.isnan(Vector.of(0, 0).angle(Vector.of(0, 0)))

    def test_empty_vectors_are_nan(self) -> None:
        """Angle between empty vectors is NaN."""
        assert math.isnan(Vector().angle(Vector()))

    def test_angle_mismatch(self) -> None:
        """Angle requires equal dimensions."""
        with pytest.raises(DimensionMismatchError):
            Vector.of(1, 0).angle(Vector.of(1, 0, 0))

    def test_angle_bounds(self) -> None:
        """Angles between nonzero vectors lie in [0, pi]."""
        vectors = [
            Vector.of(1, 0, 0),
            Vector.of(-1, 2, 0.5),
            Vector.of(3, -3, 7),
            Vector.of(-2, -2, -2),
        ]
        for a in vectors:
            for b in vectors:
                angle = a.angle(b)
                assert math.isnan(angle) or 0.0 <= angle <= math.pi


class TestEquality:
    """Tests for exact element-wise equality."""

    def test_equal(self) -> None:
        """Same components compare equal."""
        assert Vector.of(1, 2) == Vector(components=[1.0, 2.0])

    def test_different_dimension(self) -> None:
        """Different dimensions are never equal."""
        assert Vector.of(1, 2) != Vector.of(1, 2, 3)

    def test_different_elements(self) -> None:
        """Different elements are not equal."""
        assert Vector.of(1, 2) != Vector.of(1, 3)

    def test_no_tolerance(self) -> None:
        """Equality is exact."""
        assert Vector.of(0.1 + 0.2) != Vector.of(0.3)

    def test_not_equal_to_tuple(self) -> None:
        """A vector is not equal to a bare tuple."""
        assert Vector.of(1, 2) != (1.0, 2.0)

    def test_hash_consistent(self) -> None:
        """Equal vectors hash equally."""
        assert hash(Vector.of(1, 2)) == hash(Vector.of(1.0, 2.0))


class TestRender:
    """Tests for the textual rendering."""

    def test_render(self) -> None:
        """Components are comma-space separated in brackets."""
        assert str(Vector.of(1, 2, 3)) == "[1, 2, 3]"

    def test_render_fractions(self) -> None:
        """Non-integral components keep their fraction."""
        assert str(Vector.of(0.5, -2.25)) == "[0.5, -2.25]"

    def test_render_single(self) -> None:
        """Single component has no separator."""
        assert str(Vector.of(7)) == "[7]"

    def test_render_empty(self) -> None:
        """Empty vector renders as []."""
        assert str(Vector()) == "[]"

    def test_render_large(self) -> None:
        """Large values use exponent notation."""
        assert str(Vector.of(1e20)) == "[1e+20]"


class TestVectorPair:
    """Tests for VectorPair model."""

    def test_create_pair(self) -> None:
        """Pair stores vectors, positions and angle."""
        pair = VectorPair(
            first=Vector.of(1, 0),
            second=Vector.of(0, 1),
            first_index=0,
            second_index=1,
            angle=math.pi / 2,
        )
        assert pair.is_defined is True
        assert pair.as_tuple() == (Vector.of(1, 0), Vector.of(0, 1))

    def test_nan_pair_not_defined(self) -> None:
        """NaN angle marks the pair as undefined."""
        pair = VectorPair(
            first=Vector.of(0, 0),
            second=Vector.of(0, 1),
            first_index=0,
            second_index=1,
            angle=math.nan,
        )
        assert pair.is_defined is False

    def test_positions_must_be_ordered(self) -> None:
        """A pair cannot repeat or reverse positions."""
        with pytest.raises(ValueError):
            VectorPair(
                first=Vector.of(1),
                second=Vector.of(1),
                first_index=2,
                second_index=2,
                angle=0.0,
            )
