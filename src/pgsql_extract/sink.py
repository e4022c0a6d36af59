"""Serialization and placement of extracted records.

The whole record list is rendered to text before the destination is
opened, so a failed write never leaves the in-memory records altered and
never produces a half-serialized document from a serialization error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING

from pgsql_extract.errors import SinkError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pgsql_extract.record import Record

__all__ = ["derive_output_path", "dumps", "write_records"]

logger = logging.getLogger(__name__)


def derive_output_path(path: str | Path, suffix: str = "pgsql") -> Path:
    """Insert ``suffix`` before the extension of ``path``.

    ``captures/run1.json`` -> ``captures/run1.pgsql.json``; a path without
    an extension just gains ``.pgsql``.
    """
    path = Path(path)
    return path.with_name(f"{path.stem}.{suffix}{path.suffix}")


def dumps(records: Iterable[Record], indent: int = 4) -> str:
    """Render records as one JSON array."""
    return json.dumps(
        [record.to_dict() for record in records],
        indent=indent,
        ensure_ascii=False,
    )


def write_records(
    records: Iterable[Record],
    destination: str | Path | IO[str],
    indent: int = 4,
) -> None:
    """Serialize ``records`` and write them to a path or text stream.

    Raises:
        SinkError: The destination could not be written.
    """
    text = dumps(records, indent=indent)
    to_stream = not isinstance(destination, (str, Path))
    try:
        if to_stream:
            destination.write(text)  # type: ignore[union-attr]
            destination.write("\n")  # type: ignore[union-attr]
        else:
            Path(destination).write_text(text, encoding="utf-8")  # type: ignore[arg-type]
    except OSError as exc:
        logger.error("failed to write %s: %s", destination, exc)
        msg = f"Cannot write records to {destination}: {exc}"
        raise SinkError(msg) from exc

    if to_stream:
        logger.info("wrote %d bytes to stream", len(text))
    else:
        logger.info("wrote %s", destination)
