"""pgsql-extract - rebuild dissector namespace records from large JSON captures."""

from __future__ import annotations

from pgsql_extract.api import dumps, extract_events, extract_file, iter_records
from pgsql_extract.config import ExtractConfig
from pgsql_extract.errors import (
    ExtractError,
    MissingFrameError,
    MissingKeyError,
    SinkError,
    SourceError,
    StructureError,
    UnexpectedEventError,
)
from pgsql_extract.extractor import NamespaceExtractor
from pgsql_extract.normalizer import RecordNormalizer
from pgsql_extract.record import Record
from pgsql_extract.tree import Entry, Event, EventKind, ScalarKind, TreeBuilder

__version__: str = "0.1.0"
__all__: list[str] = [
    "Entry",
    "Event",
    "EventKind",
    "ExtractConfig",
    "ExtractError",
    "MissingFrameError",
    "MissingKeyError",
    "NamespaceExtractor",
    "Record",
    "RecordNormalizer",
    "ScalarKind",
    "SinkError",
    "SourceError",
    "StructureError",
    "TreeBuilder",
    "UnexpectedEventError",
    "dumps",
    "extract_events",
    "extract_file",
    "iter_records",
]
