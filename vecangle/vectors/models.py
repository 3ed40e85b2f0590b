"""Vector data models."""

import math
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from vecangle.exceptions import DimensionMismatchError


class Vector(BaseModel):
    """A fixed-length sequence of real numbers.

    The components are fixed at construction. Binary operations require
    both operands to have the same dimension and raise
    DimensionMismatchError otherwise.

    Attributes:
        components: The vector components, in order.
    """

    model_config = ConfigDict(frozen=True)

    components: tuple[float, ...] = Field(
        default=(),
        description="Vector components",
    )

    @classmethod
    def of(cls, *values: float) -> "Vector":
        """Create a vector from positional components.

        Args:
            *values: Component values.

        Returns:
            New Vector instance.
        """
        return cls(components=values)

    @property
    def dimension(self) -> int:
        """Number of components."""
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.components)

    def is_compatible(self, other: "Vector") -> bool:
        """Check whether both vectors share one dimension."""
        return self.dimension == other.dimension

    def _check_compatible(self, other: "Vector") -> None:
        if not self.is_compatible(other):
            raise DimensionMismatchError(
                "mismatched vector dimensions",
                details={"left": self.dimension, "right": other.dimension},
            )

    def dot(self, other: "Vector") -> float:
        """Compute the dot product with another vector.

        Args:
            other: Vector of the same dimension.

        Returns:
            Sum of element-wise products (0.0 for empty vectors).

        Raises:
            DimensionMismatchError: If dimensions differ.
        """
        self._check_compatible(other)
        acc = 0.0
        for x, y in zip(self.components, other.components):
            acc += x * y
        return acc

    def norm(self) -> float:
        """Euclidean norm, 0.0 for the empty vector."""
        return math.sqrt(self.dot(self))

    def angle(self, other: "Vector") -> float:
        """Compute the angle to another vector in radians.

        The cosine ratio is not clamped. A ratio pushed outside [-1, 1]
        by rounding, or a zero norm on either side, gives NaN.

        Args:
            other: Vector of the same dimension.

        Returns:
            Angle in [0, pi], or NaN for degenerate input.

        Raises:
            DimensionMismatchError: If dimensions differ.
        """
        self._check_compatible(other)
        denominator = self.norm() * other.norm()
        if denominator == 0.0:
            return math.nan
        ratio = self.dot(other) / denominator
        if not -1.0 <= ratio <= 1.0:
            return math.nan
        return math.acos(ratio)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.components == other.components

    def __hash__(self) -> int:
        return hash(self.components)

    def __str__(self) -> str:
        return "[" + ", ".join(f"{x:g}" for x in self.components) + "]"

    def __repr__(self) -> str:
        return f"Vector({str(self)})"


class VectorPair(BaseModel):
    """Two vectors taken from distinct dataset positions, with their angle.

    Attributes:
        first: Vector at the lower position.
        second: Vector at the higher position.
        first_index: Dataset position of ``first``.
        second_index: Dataset position of ``second``.
        angle: Angle between the vectors in radians (may be NaN).
    """

    model_config = ConfigDict(frozen=True)

    first: Vector = Field(description="Vector at the lower position")
    second: Vector = Field(description="Vector at the higher position")
    first_index: int = Field(ge=0, description="Position of first vector")
    second_index: int = Field(ge=0, description="Position of second vector")
    angle: float = Field(description="Angle in radians")

    def model_post_init(self, __context: Any) -> None:
        """Validate that the pair spans two distinct positions."""
        if self.first_index >= self.second_index:
            raise ValueError("first_index must be less than second_index")

    @property
    def is_defined(self) -> bool:
        """Whether the angle is a real number (not NaN)."""
        return not math.isnan(self.angle)

    def as_tuple(self) -> tuple[Vector, Vector]:
        """Return the pair as a plain (first, second) tuple."""
        return self.first, self.second
