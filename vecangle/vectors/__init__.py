"""Vector value type and dataset ingestion module."""

from vecangle.vectors.ingest import (
    ingest_text,
    ingest_vectors,
    parse_line,
    split_records,
)
from vecangle.vectors.loader import (
    StreamVectorLoader,
    TextFileVectorLoader,
    VectorLoader,
)
from vecangle.vectors.models import Vector, VectorPair

__all__ = [
    "StreamVectorLoader",
    "TextFileVectorLoader",
    "Vector",
    "VectorLoader",
    "VectorPair",
    "ingest_text",
    "ingest_vectors",
    "parse_line",
    "split_records",
]
