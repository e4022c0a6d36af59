"""pytest plugin for pgsql-extract.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import io
import json
from typing import Any

import pytest

from pgsql_extract import ExtractConfig, extract_events, iter_records
from pgsql_extract.stream import NamespacePicker, iter_events


def _to_stream(document: Any) -> io.BytesIO:
    # Text is used verbatim so tests can express duplicate keys.
    if isinstance(document, bytes):
        return io.BytesIO(document)
    if isinstance(document, str):
        return io.BytesIO(document.encode("utf-8"))
    return io.BytesIO(json.dumps(document).encode("utf-8"))


@pytest.fixture(scope="session")
def pgsql_events() -> Any:
    """Fixture that returns a callable producing picked events for a document.

    Usage in tests::

        def test_builder(pgsql_events):
            events = pgsql_events({"layers": {"pgsql": {"pgsql.type": "Query"}}})
            assert events[0].kind == EventKind.START_OBJECT

    Returns:
        A callable ``_events(document, namespace="pgsql") -> list[Event]``.
        ``document`` is a JSON value, JSON text, or UTF-8 bytes.
    """

    def _events(document: Any, namespace: str = "pgsql") -> list[Any]:
        picker = NamespacePicker(namespace)
        return list(picker.filter(iter_events(_to_stream(document))))

    return _events


@pytest.fixture(scope="session")
def extract_pgsql() -> Any:
    """Fixture that returns a callable running the full extraction pipeline.

    Usage in tests::

        def test_query(extract_pgsql):
            doc = {"layers": {"pgsql": {"pgsql.type": "Query"}}}
            assert extract_pgsql(doc) == [{"type": "Query", "data": []}]

    Returns:
        A callable ``_extract(document, config=None) -> list[dict]`` giving the
        serialisable form of every record, in document order.
    """

    def _extract(document: Any, config: ExtractConfig | None = None) -> list[dict[str, Any]]:
        return [r.to_dict() for r in iter_records(_to_stream(document), config=config)]

    return _extract


@pytest.fixture(scope="session")
def build_records() -> Any:
    """Fixture that returns ``extract_events`` for already-picked event lists."""
    return extract_events
