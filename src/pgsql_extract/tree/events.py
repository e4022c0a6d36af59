"""Event and EventKind: the low-level parse events consumed by TreeBuilder.

An ``Event`` is one atomic notification from the tokenizer: a key name, a
scalar value, or an object/array boundary.  Events are ephemeral; the
builder consumes them in arrival order and never looks ahead.

Array boundaries are part of ``EventKind`` so the namespace picker can keep
its path stack accurate, but ``TreeBuilder`` rejects them: dissector field
objects never contain arrays.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class EventKind(StrEnum):
    """The kinds of parse event a tokenizer can deliver.

    - KEY_VALUE    -> "key_value"    : an object key (name in ``Event.value``)
    - SCALAR       -> "scalar"       : a leaf value (see ``ScalarKind``)
    - START_OBJECT -> "start_object" : ``{``
    - END_OBJECT   -> "end_object"   : ``}``
    - START_ARRAY  -> "start_array"  : ``[``
    - END_ARRAY    -> "end_array"    : ``]``
    """

    KEY_VALUE = auto()
    SCALAR = auto()
    START_OBJECT = auto()
    END_OBJECT = auto()
    START_ARRAY = auto()
    END_ARRAY = auto()


class ScalarKind(StrEnum):
    """The JSON type of a SCALAR event."""

    STRING = auto()
    NUMBER = auto()
    NULL = auto()
    TRUE = auto()
    FALSE = auto()


@dataclass(frozen=True, slots=True)
class Event:
    """One parse event.

    Attributes:
        kind:   Which kind of event this is (see EventKind).
        value:  Key name for KEY_VALUE; raw text for STRING and NUMBER
                scalars; None for everything else.
        scalar: The scalar's JSON type for SCALAR events; None otherwise.

    Use the classmethod constructors rather than filling the fields by hand::

        Event.key("pgsql.type")
        Event.string("Query")
        Event.number("42")
        Event.start_object()
    """

    kind: EventKind
    value: str | None = None
    scalar: ScalarKind | None = None

    @classmethod
    def key(cls, name: str) -> Event:
        return cls(EventKind.KEY_VALUE, value=name)

    @classmethod
    def string(cls, raw: str) -> Event:
        return cls(EventKind.SCALAR, value=raw, scalar=ScalarKind.STRING)

    @classmethod
    def number(cls, raw: str) -> Event:
        return cls(EventKind.SCALAR, value=raw, scalar=ScalarKind.NUMBER)

    @classmethod
    def boolean(cls, flag: bool) -> Event:
        return cls(EventKind.SCALAR, scalar=ScalarKind.TRUE if flag else ScalarKind.FALSE)

    @classmethod
    def null(cls) -> Event:
        return cls(EventKind.SCALAR, scalar=ScalarKind.NULL)

    @classmethod
    def start_object(cls) -> Event:
        return cls(EventKind.START_OBJECT)

    @classmethod
    def end_object(cls) -> Event:
        return cls(EventKind.END_OBJECT)

    @classmethod
    def start_array(cls) -> Event:
        return cls(EventKind.START_ARRAY)

    @classmethod
    def end_array(cls) -> Event:
        return cls(EventKind.END_ARRAY)
