"""Angle-sorting of vector pairs."""

import math
from collections.abc import Callable, Sequence

from vecangle.angles.pairing import pairwise_indices
from vecangle.config import NanPosition
from vecangle.logging_config import get_logger
from vecangle.vectors.models import Vector, VectorPair

logger = get_logger(__name__)


def _angle_key(
    nan_position: NanPosition,
) -> Callable[[VectorPair], tuple[int, float]]:
    """Build a total-order sort key over pair angles.

    NaN angles compare equal to each other and sit before or after all
    real angles.
    """
    nan_rank = 1 if nan_position == NanPosition.LAST else -1

    def key(pair: VectorPair) -> tuple[int, float]:
        if math.isnan(pair.angle):
            return (nan_rank, 0.0)
        return (0, pair.angle)

    return key


def theta_sort(
    vectors: Sequence[Vector],
    nan_position: NanPosition = NanPosition.LAST,
) -> list[VectorPair]:
    """Rank every pair of vectors by ascending angle.

    Each angle is computed once. The sort is stable, so pairs with equal
    angles (several NaNs included) keep their pairing order.

    Args:
        vectors: Dataset of equal-dimension vectors.
        nan_position: Placement of pairs whose angle is NaN.

    Returns:
        Pairs in non-decreasing angle order.

    Raises:
        DimensionMismatchError: If two vectors differ in dimension.
    """
    pairs = [
        VectorPair(
            first=vectors[i],
            second=vectors[j],
            first_index=i,
            second_index=j,
            angle=vectors[i].angle(vectors[j]),
        )
        for i, j in pairwise_indices(len(vectors))
    ]

    undefined = sum(1 for p in pairs if not p.is_defined)
    if undefined:
        logger.warning(f"{undefined} of {len(pairs)} pairs have an undefined angle")

    return sorted(pairs, key=_angle_key(nan_position))


def theta_sort_pairs(
    vectors: Sequence[Vector],
    nan_position: NanPosition = NanPosition.LAST,
) -> list[tuple[Vector, Vector]]:
    """Same ranking as theta_sort, as plain (first, second) tuples."""
    return [pair.as_tuple() for pair in theta_sort(vectors, nan_position)]
