"""NamespaceExtractor: orchestrator that wires picker + TreeBuilder + RecordNormalizer.

This is the central wiring layer between the event stream and the public
API.  Events flow strictly one at a time:

- the ``NamespacePicker`` drops everything outside the namespace objects
  (skipped by ``extract_events`` for streams that are already picked),
- the ``TreeBuilder`` rebuilds each picked object, with the namespace
  prefix stripped from its field names,
- the ``RecordNormalizer`` turns each completed object into a ``Record``.

Each extractor owns a fresh builder and picker and handles exactly one
document.  A structural error aborts the document: it propagates to the
caller and no partial record is produced.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from pgsql_extract.config import ExtractConfig
from pgsql_extract.normalizer import RecordNormalizer
from pgsql_extract.stream.picker import NamespacePicker
from pgsql_extract.stream.tokens import iter_events
from pgsql_extract.tree.builder import TreeBuilder
from pgsql_extract.tree.normalizer import NamespaceKeyNormalizer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pgsql_extract.record import Record
    from pgsql_extract.tree.events import Event

__all__ = ["NamespaceExtractor"]

logger = logging.getLogger(__name__)


class NamespaceExtractor:
    """Extracts normalized records for one dissector namespace.

    Example::

        from pgsql_extract.extractor import NamespaceExtractor

        with open("capture.json", "rb") as fp:
            records = list(NamespaceExtractor().iter_records(fp))
    """

    def __init__(self, config: ExtractConfig | None = None) -> None:
        """Initialise the extractor.

        Args:
            config: Extraction settings.  Defaults to ``ExtractConfig()``.
        """
        self._config: ExtractConfig = config if config is not None else ExtractConfig()
        key_normalizer = NamespaceKeyNormalizer(
            self._config.namespace, enabled=self._config.strip_prefix
        )
        self._picker = NamespacePicker(self._config.namespace)
        self._builder = TreeBuilder(key_transform=key_normalizer.normalize)
        self._normalizer = RecordNormalizer()
        self._emitted = 0
        self._used = False

    @property
    def config(self) -> ExtractConfig:
        return self._config

    @property
    def emitted(self) -> int:
        """Number of records produced so far."""
        return self._emitted

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def iter_records(self, fp: IO[bytes]) -> Iterator[Record]:
        """Lazily extract records from a binary JSON stream.

        Raises:
            SourceError: The document is not valid JSON.
            StructureError: A picked object produced an inconsistent
                event sequence.
        """
        return self.extract_events(self._picker.filter(iter_events(fp)))

    def extract_events(self, events: Iterable[Event]) -> Iterator[Record]:
        """Build and normalize records from an already-picked event stream."""
        self._claim()
        for obj in self._builder.feed_all(events):
            record = self._normalizer.normalize(obj)
            self._emitted += 1
            logger.debug(
                "record %d: type=%r length=%r fields=%d",
                self._emitted,
                record.type,
                record.length,
                len(record.data),
            )
            yield record
        self._builder.finish()
        logger.info(
            "extracted %d %s record(s)", self._emitted, self._config.namespace
        )

    def _claim(self) -> None:
        if self._used:
            msg = "NamespaceExtractor handles a single document; create a new one"
            raise RuntimeError(msg)
        self._used = True
