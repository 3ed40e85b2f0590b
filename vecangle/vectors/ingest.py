"""Parsing of newline-delimited numeric records into a vector dataset."""

import re
from collections.abc import Iterable

from vecangle.exceptions import ErrorCode, IngestionError
from vecangle.logging_config import get_logger
from vecangle.vectors.models import Vector

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s*", re.ASCII)
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_line(line: str) -> Vector:
    """Parse one line of whitespace-separated real literals.

    Numbers are extracted left to right. Extraction stops at the first
    position that does not start a number, so anything after the last
    readable number is ignored. A line without numbers yields the empty
    vector.

    Args:
        line: A single input line (a trailing newline is allowed).

    Returns:
        Vector of the extracted numbers.
    """
    values: list[float] = []
    pos = 0
    while True:
        pos = _WHITESPACE.match(line, pos).end()
        match = _NUMBER.match(line, pos)
        if match is None:
            break
        values.append(float(match.group()))
        pos = match.end()
    return Vector(components=tuple(values))


def ingest_vectors(lines: Iterable[str]) -> list[Vector]:
    """Parse a sequence of lines into a dataset of equal-dimension vectors.

    The first line sets the dataset dimension (zero is allowed). Each
    following line is checked against it as soon as it is parsed.

    Args:
        lines: Input lines, in order.

    Returns:
        One vector per line.

    Raises:
        IngestionError: If a line's dimension differs from the first one.
    """
    vectors: list[Vector] = []

    for line_number, line in enumerate(lines, start=1):
        vector = parse_line(line)
        if vectors and vector.dimension != vectors[0].dimension:
            raise IngestionError(
                f"mismatched input vector dimensions on line {line_number}: "
                f"expected {vectors[0].dimension}, got {vector.dimension}",
                code=ErrorCode.DIMENSION_MISMATCH_INPUT,
                details={
                    "line": line_number,
                    "expected": vectors[0].dimension,
                    "actual": vector.dimension,
                },
            )
        vectors.append(vector)

    logger.debug(
        f"Ingested {len(vectors)} vectors of dimension "
        f"{vectors[0].dimension if vectors else 'n/a'}"
    )
    return vectors


def ingest_text(text: str) -> list[Vector]:
    """Ingest vectors from a block of text.

    A final newline does not start an extra line; any other blank line
    yields an empty vector and takes part in the dimension check.
    """
    return ingest_vectors(split_records(text))


def split_records(text: str) -> list[str]:
    """Split text into records on ``\\n`` only.

    Other line-break characters (``\\v``, ``\\f``, ``\\u2028``...) stay inside
    a record, where ``\\v`` and ``\\f`` count as whitespace. A final
    ``\\n`` does not start an extra record; ``\\r`` before it is whitespace.
    """
    if not text:
        return []
    records = text.split("\n")
    if text.endswith("\n"):
        records.pop()
    return records
