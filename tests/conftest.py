"""Deterministic capture documents shared across the test suite.

The documents mimic ``tshark -T json`` exports: a top-level array of
packets, each with ``_source.layers`` holding one object per dissector.
A layer object may repeat the ``"pgsql"`` key when one TCP segment carries
several PostgreSQL messages, so the fixtures are JSON text rather than
Python dicts.
"""

from __future__ import annotations

from pathlib import Path

import pytest

CAPTURE_TEXT = """\
[
  {
    "_index": "packets-2024-01-01",
    "_source": {
      "layers": {
        "frame": {"frame.number": "1", "frame.len": "74"},
        "tcp": {"tcp.srcport": "50432", "tcp.dstport": "5432"},
        "pgsql": {
          "pgsql.type": "Startup message",
          "pgsql.length": "41",
          "pgsql.frontend": "1",
          "pgsql.version_major": "3",
          "pgsql.parameter_name": "user",
          "pgsql.parameter_value": "postgres"
        }
      }
    }
  },
  {
    "_index": "packets-2024-01-01",
    "_source": {
      "layers": {
        "frame": {"frame.number": "2", "frame.len": "120"},
        "pgsql": {
          "pgsql.type": "Authentication request",
          "pgsql.length": "8",
          "pgsql.frontend": "0",
          "pgsql.authtype": "0"
        },
        "pgsql": {
          "pgsql.type": "Parameter status",
          "pgsql.length": "22",
          "pgsql.frontend": "0",
          "pgsql.parameter_name": "TimeZone",
          "pgsql.parameter_value": "UTC"
        }
      }
    }
  },
  {
    "_index": "packets-2024-01-01",
    "_source": {
      "layers": {
        "frame": {"frame.number": "3", "frame.len": "90"},
        "pgsql": {
          "pgsql.type": "Simple query",
          "pgsql.length": "14",
          "pgsql.frontend": "1",
          "pgsql.query": "SELECT 1;",
          "pgsql.query_tree": {
            "pgsql.text": "SELECT 1;",
            "pgsql.flags": {"pgsql.flag": "0x0000"}
          }
        }
      }
    }
  }
]
"""

EXPECTED_RECORDS = [
    {
        "type": "Startup message",
        "frontend": True,
        "length": 41,
        "data": [
            ["version_major", "3"],
            ["parameter_name", "user"],
            ["parameter_value", "postgres"],
        ],
    },
    {
        "type": "Authentication request",
        "length": 8,
        "data": [["authtype", "0"]],
    },
    {
        "type": "Parameter status",
        "length": 22,
        "data": [["parameter_name", "TimeZone"], ["parameter_value", "UTC"]],
    },
    {
        "type": "Simple query",
        "frontend": True,
        "length": 14,
        "data": [
            ["query", "SELECT 1;"],
            ["query_tree", [["text", "SELECT 1;"], ["flags", [["flag", "0x0000"]]]]],
        ],
    },
]


@pytest.fixture
def capture_text() -> str:
    """A three-packet capture with four pgsql messages."""
    return CAPTURE_TEXT


@pytest.fixture
def expected_records() -> list[dict]:
    """Serialized records for ``capture_text``, in document order."""
    return EXPECTED_RECORDS


@pytest.fixture
def capture_file(tmp_path: Path) -> Path:
    """``capture_text`` written to ``<tmp>/capture.json``."""
    path = tmp_path / "capture.json"
    path.write_text(CAPTURE_TEXT, encoding="utf-8")
    return path
