"""RecordNormalizer: turns one reconstructed object into a Record.

Three well-known fields are pulled out by name and the remainder is
re-encoded as ``(name, value)`` pairs:

- ``type``:     first occurrence, stringified.
- ``length``:   first occurrence, parsed as an integer.
- ``frontend``: first occurrence, numeric truthiness (the field is sent
                as 0/1).

Every occurrence of the three names is removed from ``data``, even though
only the first one populates the field.  Coercion is lenient: a value that
cannot be parsed leaves the field unset instead of failing the record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgsql_extract.record import DataPair, Record

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pgsql_extract.tree.nodes import Entry, EntryValue

__all__ = ["EXTRACTED_FIELDS", "RecordNormalizer", "map_entry"]

EXTRACTED_FIELDS: frozenset[str] = frozenset({"type", "length", "frontend"})


def map_entry(entry: Entry) -> DataPair:
    """Re-encode an Entry as a ``(name, value)`` pair, recursing into objects."""
    if isinstance(entry.value, tuple):
        return (entry.name, tuple(map_entry(e) for e in entry.value))
    return (entry.name, entry.value)


def _find(entries: Sequence[Entry], name: str) -> EntryValue:
    for entry in entries:
        if entry.name == name:
            return entry.value
    return None


def _parse_number(value: EntryValue) -> int | float | None:
    if isinstance(value, bool):
        return int(value)
    if not isinstance(value, str):
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return None


def coerce_type(value: EntryValue) -> str | None:
    # Nested objects have no scalar form.
    if not value or isinstance(value, tuple):
        return None
    if isinstance(value, bool):
        return "true"
    return value


def coerce_length(value: EntryValue) -> int | None:
    """Parse ``length``; empty, zero, and malformed values give None."""
    if not value:
        return None
    number = _parse_number(value)
    if isinstance(number, float):
        if number != number or not number.is_integer():
            return None
        number = int(number)
    return number or None


def coerce_frontend(value: EntryValue) -> bool | None:
    """Non-zero numbers give True; zero, absent, and malformed give None."""
    if not value:
        return None
    number = _parse_number(value)
    if not number or number != number:
        return None
    return True


class RecordNormalizer:
    """Normalizes reconstructed objects into Records.

    Stateless; one instance may be shared across documents.

    Example::

        normalizer = RecordNormalizer()
        record = normalizer.normalize(obj)
        record.type, record.length, record.data
    """

    def normalize(self, entries: Sequence[Entry]) -> Record:
        return Record(
            type=coerce_type(_find(entries, "type")),
            length=coerce_length(_find(entries, "length")),
            frontend=coerce_frontend(_find(entries, "frontend")),
            data=tuple(
                map_entry(e) for e in entries if e.name not in EXTRACTED_FIELDS
            ),
        )

    __call__ = normalize
