"""Stream subpackage: turns a JSON byte stream into picked parse events.

- iter_events: ijson-backed tokenizer producing ``Event`` objects
- NamespacePicker: keeps only the events of objects under a namespace key
"""

from pgsql_extract.stream.picker import NamespacePicker
from pgsql_extract.stream.tokens import iter_events

__all__ = ["NamespacePicker", "iter_events"]
