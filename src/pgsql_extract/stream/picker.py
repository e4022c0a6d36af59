"""NamespacePicker: forwards only the objects stored under a namespace key.

The picker tracks the key path of the current position in the document.
An object whose enclosing key equals the namespace starts a pick; that
START_OBJECT and every event up to its matching close are forwarded
unchanged, everything else is dropped.  While a pick is active the path
is not consulted, so nested objects are passed through whatever their key.

In a tshark JSON export the path to a PostgreSQL message looks like::

    [<index>, "_source", "layers", "pgsql"]

and a layer holding several messages repeats the ``"pgsql"`` key; each
repetition is picked separately.  Objects that are array elements are
never picked, since their enclosing path component is an index.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pgsql_extract.tree.events import Event, EventKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = ["NamespacePicker"]

_OPEN = frozenset({EventKind.START_OBJECT, EventKind.START_ARRAY})
_CLOSE = frozenset({EventKind.END_OBJECT, EventKind.END_ARRAY})

# Path component for an array element.
_ELEMENT = -1


class NamespacePicker:
    """Filters an event stream down to the objects under ``namespace``.

    Example::

        picker = NamespacePicker("pgsql")
        picked = list(picker.filter(iter_events(fp)))
    """

    def __init__(self, namespace: str = "pgsql") -> None:
        self._namespace = namespace
        self._path: list[str | int | None] = []
        self._depth = 0
        self._picks = 0

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def picks(self) -> int:
        """Number of objects picked so far."""
        return self._picks

    @property
    def path(self) -> tuple[str | int | None, ...]:
        return tuple(self._path)

    def matches(self) -> bool:
        """True when an object opened now would be picked."""
        return bool(self._path) and self._path[-1] == self._namespace

    def feed(self, event: Event) -> bool:
        """Update the path with ``event`` and return whether to forward it."""
        kind = event.kind
        if self._depth:
            if kind in _OPEN:
                self._depth += 1
            elif kind in _CLOSE:
                self._depth -= 1
            return True

        if kind is EventKind.START_OBJECT:
            if self.matches():
                self._depth = 1
                self._picks += 1
                return True
            self._path.append(None)
        elif kind is EventKind.START_ARRAY:
            self._path.append(_ELEMENT)
        elif kind in _CLOSE:
            if self._path:
                self._path.pop()
        elif kind is EventKind.KEY_VALUE and self._path:
            self._path[-1] = event.value
        return False

    def filter(self, events: Iterable[Event]) -> Iterator[Event]:
        for event in events:
            if self.feed(event):
                yield event
