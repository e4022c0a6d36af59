"""Tree subpackage for event-stream-to-tree reconstruction primitives.

Re-exports the public API for the tree module:
- Event: one low-level parse event; EventKind / ScalarKind tag it
- Entry: ordered (name, value) pair of a reconstructed object
- NamespaceKeyNormalizer: strips the dissector namespace from key names
- TreeBuilder: rebuilds nested objects from a flat event stream
"""

from pgsql_extract.tree.builder import TreeBuilder
from pgsql_extract.tree.events import Event, EventKind, ScalarKind
from pgsql_extract.tree.nodes import Entry, EntryValue
from pgsql_extract.tree.normalizer import NamespaceKeyNormalizer

__all__ = [
    "Entry",
    "EntryValue",
    "Event",
    "EventKind",
    "NamespaceKeyNormalizer",
    "ScalarKind",
    "TreeBuilder",
]
