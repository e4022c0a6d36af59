"""Entry dataclass and the EntryValue union for reconstructed objects.

A reconstructed object is an ordered tuple of ``Entry`` values.  Order is
arrival order and is significant: lookups by name are linear and the first
occurrence of a repeated name wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Leaf values: str (JSON strings and numbers kept as text), bool, None.
# Nested objects: tuple of Entry.
EntryValue = Union[str, bool, None, tuple["Entry", ...]]


@dataclass(frozen=True, slots=True)
class Entry:
    """An ordered (name, value) pair inside a reconstructed object.

    Attributes:
        name:  Key name, after the namespace prefix has been stripped.
        value: A leaf scalar, or a tuple of Entry for a nested object.
    """

    name: str
    value: EntryValue

    @property
    def is_nested(self) -> bool:
        """True when ``value`` is a nested object rather than a leaf."""
        return isinstance(self.value, tuple)

    @classmethod
    def from_pair(cls, pair: tuple[str, object]) -> Entry:
        """Rebuild an Entry from a normalized ``(name, value)`` pair.

        Nested values (sequences of pairs) are converted recursively, so
        ``Record.data`` can be fed back through ``RecordNormalizer``.
        """
        name, value = pair
        if isinstance(value, (list, tuple)):
            return cls(name, tuple(cls.from_pair(p) for p in value))
        if value is None or isinstance(value, (str, bool)):
            return cls(name, value)
        raise TypeError(f"Unsupported entry value type: {type(value)!r}")
