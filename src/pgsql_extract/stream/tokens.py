"""Adapter from ijson's low-level parse events to ``Event`` objects.

``ijson.basic_parse`` reads the document incrementally, so memory use does
not depend on document size.  Numbers are requested as ``int``/``Decimal``
(``use_float=False``) and rendered back with ``str()`` to keep their digits.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any

import ijson

from pgsql_extract.errors import SourceError
from pgsql_extract.tree.events import Event

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["iter_events"]

logger = logging.getLogger(__name__)

_STRUCTURAL = {
    "start_map": Event.start_object(),
    "end_map": Event.end_object(),
    "start_array": Event.start_array(),
    "end_array": Event.end_array(),
}

_NUMBER_EVENTS = frozenset({"number", "integer", "double"})


def _to_event(name: str, value: Any) -> Event:
    structural = _STRUCTURAL.get(name)
    if structural is not None:
        return structural
    if name == "map_key":
        return Event.key(value)
    if name == "string":
        return Event.string(value)
    if name in _NUMBER_EVENTS:
        return Event.number(str(value))
    if name == "boolean":
        return Event.boolean(bool(value))
    if name == "null":
        return Event.null()
    msg = f"Unknown tokenizer event {name!r}"
    raise SourceError(msg)


def iter_events(fp: IO[bytes], buf_size: int = 64 * 1024) -> Iterator[Event]:
    """Yield the events of the JSON document read from ``fp``.

    Args:
        fp: Binary file-like object positioned at the start of the document.
        buf_size: Read size handed to ijson.

    Raises:
        SourceError: The document is not valid JSON or ends early.
    """
    try:
        for name, value in ijson.basic_parse(fp, buf_size=buf_size, use_float=False):
            yield _to_event(name, value)
    except ijson.JSONError as exc:
        logger.error("JSON tokenizer failed: %s", exc)
        msg = f"Invalid JSON input: {exc}"
        raise SourceError(msg) from exc
