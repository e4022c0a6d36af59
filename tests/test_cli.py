"""Tests for the pgsql-extract command line."""

from __future__ import annotations

import io
import json
import logging
from pathlib import Path

import pytest

from pgsql_extract.cli import build_parser, logger, main


@pytest.fixture(autouse=True)
def _reset_cli_logger():  # type: ignore[no-untyped-def]
    """main() attaches a stderr handler; detach it so later tests start clean."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestMain:
    def test_writes_derived_path(
        self, capture_file: Path, expected_records: list[dict]
    ) -> None:
        assert main([str(capture_file), "-q"]) == 0
        out = capture_file.with_name("capture.pgsql.json")
        assert json.loads(out.read_text(encoding="utf-8")) == expected_records

    def test_four_space_indent(self, capture_file: Path) -> None:
        main([str(capture_file), "-q"])
        text = capture_file.with_name("capture.pgsql.json").read_text(encoding="utf-8")
        assert text.startswith('[\n    {\n        "type": "Startup message"')

    def test_explicit_output(self, capture_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "records.json"
        assert main([str(capture_file), "-o", str(out), "-q"]) == 0
        assert len(json.loads(out.read_text(encoding="utf-8"))) == 4

    def test_stdout(
        self,
        capture_file: Path,
        expected_records: list[dict],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main([str(capture_file), "-o", "-", "-q"]) == 0
        assert json.loads(capsys.readouterr().out) == expected_records

    def test_indent_option(
        self, capture_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([str(capture_file), "-o", "-", "--indent", "0", "-q"])
        assert capsys.readouterr().out.startswith('[\n{\n"type"')

    def test_no_strip_prefix(
        self, capture_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([str(capture_file), "-o", "-", "--no-strip-prefix", "-q"])
        records = json.loads(capsys.readouterr().out)
        assert records[0]["data"][0] == ["pgsql.type", "Startup message"]

    def test_namespace_option(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        src = tmp_path / "c.json"
        src.write_text('{"mysql": {"mysql.type": "Q", "mysql.x": "1"}}', encoding="utf-8")
        assert main([str(src), "-n", "mysql", "-q"]) == 0
        out = tmp_path / "c.mysql.json"
        assert json.loads(out.read_text(encoding="utf-8")) == [
            {"type": "Q", "data": [["x", "1"]]}
        ]

    def test_missing_input(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.json"), "-q"]) == 1

    def test_invalid_json(self, tmp_path: Path) -> None:
        src = tmp_path / "bad.json"
        src.write_text('{"pgsql": {"pgsql.type": ', encoding="utf-8")
        assert main([str(src), "-q"]) == 1
        assert not (tmp_path / "bad.pgsql.json").exists()

    def test_unwritable_output(self, capture_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "no-such-dir" / "out.json"
        assert main([str(capture_file), "-o", str(out), "-q"]) == 1

    def test_broken_stdout(
        self,
        capture_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        class _ClosedPipe(io.StringIO):
            def write(self, s: str) -> int:
                raise BrokenPipeError(32, "Broken pipe")

        monkeypatch.setattr("sys.stdout", _ClosedPipe())
        with caplog.at_level(logging.ERROR, logger="pgsql_extract"):
            assert main([str(capture_file), "-o", "-", "-q"]) == 1
        assert "Cannot write records" in caplog.text
        assert "cannot read" not in caplog.text

    def test_bad_namespace_is_usage_error(self, capture_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(capture_file), "-n", "a.b"])
        assert exc_info.value.code == 2


class TestParser:
    def test_path_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["x.json"])
        assert args.namespace == "pgsql"
        assert args.indent == 4
        assert args.output is None
        assert not args.no_strip_prefix

    def test_verbose_and_quiet_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["x.json", "-v", "-q"])
