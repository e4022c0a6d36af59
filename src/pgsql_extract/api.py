"""Public API functions for pgsql-extract.

This module provides the user-facing functions: extract_events, iter_records,
extract_file, and dumps.  Each call creates a fresh NamespaceExtractor so no
builder state is shared between documents.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from pgsql_extract.config import ExtractConfig
from pgsql_extract.extractor import NamespaceExtractor
from pgsql_extract.sink import dumps

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from pgsql_extract.record import Record
    from pgsql_extract.tree.events import Event

__all__ = ["dumps", "extract_events", "extract_file", "iter_records"]


def extract_events(
    events: Iterable[Event],
    config: ExtractConfig | None = None,
) -> list[Record]:
    """Build records from an event stream that has already been picked.

    Args:
        events: Events of the namespace objects only, in document order.
        config: Extraction settings.  Defaults to ``ExtractConfig()`` when None.

    Returns:
        One Record per top-level object, in document order.

    Raises:
        StructureError: The event sequence is malformed or truncated.
    """
    return list(NamespaceExtractor(config=config).extract_events(events))


def iter_records(
    fp: IO[bytes],
    config: ExtractConfig | None = None,
) -> Iterator[Record]:
    """Lazily yield records from a binary JSON stream.

    The document is read incrementally; only the object currently being
    rebuilt is held in memory.

    Raises:
        SourceError: The input is not valid JSON.
        StructureError: A picked object produced an inconsistent event stream.
    """
    return NamespaceExtractor(config=config).iter_records(fp)


def extract_file(
    path: str | Path,
    config: ExtractConfig | None = None,
) -> list[Record]:
    """Extract every namespace record from the JSON file at ``path``."""
    with open(path, "rb") as fp:
        return list(iter_records(fp, config=config))
