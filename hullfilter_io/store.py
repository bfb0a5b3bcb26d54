"""
Hull Document Store
===================

Bounded Context: Reading and writing hull documents on disk.

Design:
- JSON in, JSON out (3-space indent, as the original tool writes)
- Schema validation delegated to HullDocument / HullRecord
- Structured logging of every successful read and write
- Errors propagate to the caller, which logs them
"""

import json
from pathlib import Path
from typing import Optional, Union

from .logging import LogEvent, StructuredLogger
from .schemas import INPUT_KEY, OUTPUT_KEY, HullDocument, SchemaValidationError

DEFAULT_INPUT_PATH = Path("convex_hulls.json")
DEFAULT_OUTPUT_PATH = Path("result_convex_hulls.json")
DEFAULT_INDENT = 3


def load_document(
    path: Union[str, Path] = DEFAULT_INPUT_PATH,
    key: str = INPUT_KEY,
    logger: Optional[StructuredLogger] = None
) -> HullDocument:
    """
    Read a hull document from a JSON file.

    Args:
        path: JSON file path
        key: Top-level key holding the hull list
        logger: Optional structured logger

    Returns:
        Parsed HullDocument

    Raises:
        FileNotFoundError: If path does not exist
        SchemaValidationError: If the JSON is invalid or malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Hull document not found: {path}")

    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaValidationError(f"Invalid JSON in {path}: {e}") from e

    document = HullDocument.from_dict(data, key=key)

    if logger:
        logger.info(
            event=LogEvent.HULLS_LOADED,
            message="Loaded hull document",
            metadata={'path': str(path), 'hull_count': document.hull_count}
        )
    return document


def dump_document(
    document: HullDocument,
    path: Union[str, Path] = DEFAULT_OUTPUT_PATH,
    key: str = OUTPUT_KEY,
    indent: int = DEFAULT_INDENT,
    logger: Optional[StructuredLogger] = None
) -> Path:
    """
    Write a hull document to a JSON file.

    Args:
        document: Hull document to write
        path: Destination file
        key: Top-level key for the hull list
        indent: JSON indent width
        logger: Optional structured logger

    Returns:
        Path written
    """
    path = Path(path)
    with open(path, "w") as f:
        json.dump(document.to_dict(key=key), f, indent=indent)
        f.write("\n")

    if logger:
        logger.info(
            event=LogEvent.HULLS_WRITTEN,
            message="Wrote hull document",
            metadata={'path': str(path), 'hull_count': document.hull_count}
        )
    return path
