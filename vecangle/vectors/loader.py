"""Vector dataset loader interface and implementations."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from vecangle.exceptions import ErrorCode, InputUnavailableError
from vecangle.logging_config import get_logger
from vecangle.vectors.ingest import ingest_vectors, split_records
from vecangle.vectors.models import Vector

logger = get_logger(__name__)


class VectorLoader(ABC):
    """Abstract base class for vector dataset loaders.

    Defines the interface for loading datasets from various sources.
    """

    @abstractmethod
    def load(self, source: str | Path) -> list[Vector]:
        """Load a dataset from a source.

        Args:
            source: Path or identifier for the data source.

        Returns:
            Ingested vectors.

        Raises:
            InputUnavailableError: If the source cannot be read.
            IngestionError: If the data has mixed dimensions.
        """
        ...


class TextFileVectorLoader(VectorLoader):
    """Loader for plain text files with one vector per line."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the text file loader.

        Args:
            encoding: Text encoding to use when reading files.
        """
        self.encoding = encoding

    def load(self, source: str | Path) -> list[Vector]:
        """Load a text file as a vector dataset.

        Args:
            source: Path to the text file.

        Returns:
            Ingested vectors, one per line.

        Raises:
            InputUnavailableError: If the file cannot be read.
            IngestionError: If the file has mixed dimensions.
        """
        path = Path(source) if isinstance(source, str) else source

        if not path.exists():
            raise InputUnavailableError(
                f"File not found: {path}",
                code=ErrorCode.INPUT_NOT_FOUND,
                details={"path": str(path)},
            )

        if not path.is_file():
            raise InputUnavailableError(
                f"Not a file: {path}",
                code=ErrorCode.INPUT_READ_ERROR,
                details={"path": str(path)},
            )

        try:
            content = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise InputUnavailableError(
                f"Failed to decode file: {path}",
                code=ErrorCode.INPUT_READ_ERROR,
                details={"path": str(path), "encoding": self.encoding, "error": str(e)},
            ) from e
        except OSError as e:
            raise InputUnavailableError(
                f"Failed to read file: {path}",
                code=ErrorCode.INPUT_READ_ERROR,
                details={"path": str(path), "error": str(e)},
            ) from e

        logger.debug(f"Read {len(content)} characters from {path}")
        return ingest_vectors(split_records(content))


class StreamVectorLoader(VectorLoader):
    """Loader for an already-open text stream such as stdin.

    The stream is owned by the caller and is never closed here.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def load(self, source: str | Path = "<stream>") -> list[Vector]:
        """Ingest every remaining line of the stream.

        Args:
            source: Name used in diagnostics.

        Returns:
            Ingested vectors, one per line.

        Raises:
            InputUnavailableError: If reading the stream fails.
            IngestionError: If the stream has mixed dimensions.
        """
        try:
            content = self.stream.read()
        except UnicodeDecodeError as e:
            raise InputUnavailableError(
                f"Failed to decode stream: {source}",
                code=ErrorCode.INPUT_READ_ERROR,
                details={"source": str(source), "error": str(e)},
            ) from e
        except OSError as e:
            raise InputUnavailableError(
                f"Failed to read stream: {source}",
                code=ErrorCode.INPUT_READ_ERROR,
                details={"source": str(source), "error": str(e)},
            ) from e
        return ingest_vectors(split_records(content))
