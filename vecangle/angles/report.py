"""Rendering of ranked vector pairs."""

import math
from collections.abc import Sequence
from typing import Any

from vecangle.vectors.models import VectorPair


def format_pair(pair: VectorPair, precision: int = 6) -> str:
    """Render one pair as ``θ(<a>, <b>) = <angle>``.

    Args:
        pair: Ranked pair.
        precision: Digits after the decimal point.

    Returns:
        Single report line without a newline.
    """
    return f"θ({pair.first}, {pair.second}) = {pair.angle:.{precision}f}"


def format_report(pairs: Sequence[VectorPair], precision: int = 6) -> str:
    """Render pairs one per line, with a trailing newline when non-empty."""
    return "".join(format_pair(pair, precision) + "\n" for pair in pairs)


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def report_to_dict(pairs: Sequence[VectorPair]) -> dict[str, Any]:
    """Convert a ranking into a JSON-serialisable dictionary.

    NaN angles and non-finite components (from literals such as ``1e400``)
    become ``None`` so the output is strict JSON.
    """
    return {
        "count": len(pairs),
        "dimension": pairs[0].first.dimension if pairs else None,
        "pairs": [
            {
                "first": [_finite_or_none(x) for x in pair.first],
                "second": [_finite_or_none(x) for x in pair.second],
                "first_index": pair.first_index,
                "second_index": pair.second_index,
                "angle": _finite_or_none(pair.angle),
            }
            for pair in pairs
        ],
    }
