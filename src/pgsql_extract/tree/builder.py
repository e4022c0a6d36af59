"""TreeBuilder: rebuilds nested objects from a flat, ordered event stream.

The builder is a push-driven state machine.  It keeps three pieces of
state and never recurses on the call stack, so nesting depth is bounded
only by memory:

- ``keys``:    pending field names, one pushed per KEY_VALUE event and one
               popped per value-bearing event (SCALAR, or END_OBJECT when
               closing a named nested object).
- ``current``: the frame (ordered list of Entry) of the innermost open
               object, or None between matched objects.
- ``stack``:   frames of the enclosing open objects.

Transition table:

    KEY_VALUE(name)   push normalize(name) onto keys
    SCALAR            pop key, append Entry(key, leaf) to current
    START_OBJECT      save current on stack (if any), open a new frame
    END_OBJECT        pop key; named -> attach to the restored parent frame,
                      unnamed -> the matched object is complete, emit it
    anything else     UnexpectedEventError

An END_OBJECT with no pending key is, by construction, the close of the
originally matched object: the namespace picker only starts a match at an
object boundary, so the outermost frame was never entered through a key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from pgsql_extract.errors import (
    MissingFrameError,
    MissingKeyError,
    UnexpectedEventError,
)
from pgsql_extract.tree.events import Event, EventKind, ScalarKind
from pgsql_extract.tree.nodes import Entry, EntryValue

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

__all__ = ["TreeBuilder"]


def _identity(name: str) -> str:
    return name


def coerce_scalar(event: Event) -> EntryValue:
    """Turn a SCALAR event into a typed leaf value.

    Numbers keep their original text; downstream consumers decide if and
    when to parse them.
    """
    kind = event.scalar
    if kind is ScalarKind.STRING or kind is ScalarKind.NUMBER:
        return event.value if event.value is not None else ""
    if kind is ScalarKind.TRUE:
        return True
    if kind is ScalarKind.FALSE:
        return False
    if kind is ScalarKind.NULL:
        return None
    raise UnexpectedEventError(f"Unsupported scalar kind: {kind!r}", event)


@dataclass
class TreeBuilder:
    """Converts a filtered event stream into reconstructed objects.

    One builder processes one document.  ``feed()`` consumes a single event
    and returns the completed object when that event closes a matched
    object, otherwise None.  Between emissions the builder is back in its
    initial state (``is_idle`` is True).

    Attributes:
        key_transform: Applied to every KEY_VALUE name before it is pushed.

    Example::
        builder = TreeBuilder()
        for event in events:
            obj = builder.feed(event)
            if obj is not None:
                handle(obj)
        builder.finish()
    """

    key_transform: Callable[[str], str] = _identity
    _keys: list[str] = field(default_factory=list, init=False, repr=False)
    _current: list[Entry] | None = field(default=None, init=False, repr=False)
    _stack: list[list[Entry]] = field(default_factory=list, init=False, repr=False)

    @property
    def depth(self) -> int:
        """Number of currently open objects."""
        if self._current is None:
            return 0
        return len(self._stack) + 1

    @property
    def is_idle(self) -> bool:
        """True when no object is open and no key is pending."""
        return self._current is None and not self._stack and not self._keys

    def feed(self, event: Event) -> tuple[Entry, ...] | None:
        """Process one event.

        Returns:
            The completed top-level object when ``event`` closes it,
            otherwise None.

        Raises:
            MissingKeyError:      A scalar arrived with no pending key.
            MissingFrameError:    A value arrived with no open object, or a
                                  named close found an empty frame stack.
            UnexpectedEventError: The event kind is not handled here.
        """
        kind = event.kind
        if kind is EventKind.KEY_VALUE:
            self._keys.append(self.key_transform(event.value or ""))
            return None
        if kind is EventKind.SCALAR:
            self._add_scalar(event)
            return None
        if kind is EventKind.START_OBJECT:
            if self._current is not None:
                self._stack.append(self._current)
            self._current = []
            return None
        if kind is EventKind.END_OBJECT:
            return self._close_object(event)
        raise UnexpectedEventError(f"Unexpected event {kind!s}", event)

    def feed_all(self, events: Iterable[Event]) -> Iterator[tuple[Entry, ...]]:
        """Feed every event in order, yielding each completed object."""
        for event in events:
            obj = self.feed(event)
            if obj is not None:
                yield obj

    def finish(self) -> None:
        """Check that the stream ended on an object boundary.

        Raises:
            MissingFrameError: An object was still open.
            MissingKeyError:   A key was pushed but never consumed.
        """
        if self._current is not None:
            msg = f"Stream ended with {self.depth} unclosed object(s)"
            raise MissingFrameError(msg)
        if self._keys:
            msg = f"Stream ended with unconsumed keys: {self._keys!r}"
            raise MissingKeyError(msg)

    def reset(self) -> None:
        """Discard any partially built state."""
        self._keys.clear()
        self._current = None
        self._stack.clear()

    def _add_scalar(self, event: Event) -> None:
        if not self._keys:
            raise MissingKeyError("Expected a key before scalar value", event)
        if self._current is None:
            raise MissingFrameError("Expected a current object for scalar value", event)
        name = self._keys.pop()
        self._current.append(Entry(name, coerce_scalar(event)))

    def _close_object(self, event: Event) -> tuple[Entry, ...] | None:
        closed = self._current
        if closed is None:
            raise MissingFrameError("Expected a current object to close", event)
        name = self._keys.pop() if self._keys else None

        if name is None:
            self._current = None
            return tuple(closed)

        if not self._stack:
            raise MissingFrameError("Expected an object on the stack", event)
        self._current = self._stack.pop()
        self._current.append(Entry(name, tuple(closed)))
        return None
