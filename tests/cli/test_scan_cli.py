from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dupblocks import __version__
from dupblocks.cli.main import app

FIRST_MATCH = "\n".join(
    ["aaaa", "bbbb", "cccc", "dddd", "eeee", "ffff", "------", "aaaa", "bbbb"]
)


@pytest.fixture
def document(tmp_path: Path, two_block_lines: list[str]) -> Path:
    path = tmp_path / "doc.txt"
    path.write_text("\n".join(two_block_lines) + "\n", encoding="utf-8")
    return path


def _invoke(*args: str):
    return CliRunner().invoke(app, list(args), prog_name="dupblocks")


def test_scan_prints_matches(document: Path) -> None:
    result = _invoke("scan", "--file", str(document), "--no-progress")
    assert result.exit_code == 0, result.output
    assert FIRST_MATCH in result.stdout
    assert result.stdout.count("------\n------") == 2
    assert "Scan completed" in result.output


def test_scan_with_progress_bar(document: Path) -> None:
    result = _invoke("scan", "-f", str(document), "-t", "0.9")
    assert result.exit_code == 0, result.output
    assert FIRST_MATCH in result.stdout


def test_scan_min_length_suppresses_matches(document: Path) -> None:
    result = _invoke("scan", "--file", str(document), "--no-progress", "--min-length", "6")
    assert result.exit_code == 0, result.output
    assert "------" not in result.stdout
    assert "0 match(es) reported" in result.output


def test_scan_writes_json(document: Path, tmp_path: Path) -> None:
    out_json = tmp_path / "out" / "matches.json"
    result = _invoke("scan", "--file", str(document), "--no-progress", "--out-json", str(out_json))
    assert result.exit_code == 0, result.output
    payload = json.loads(out_json.read_text())
    assert payload["match_count"] == 2
    assert payload["threshold"] == 0.9
    assert payload["matches"][0]["range1"] == {"start": 1, "end": 6}
    assert payload["matches"][0]["range2"] == {"start": 9, "end": 14}


def test_scan_appends_telemetry(document: Path, tmp_path: Path) -> None:
    log = tmp_path / "telemetry" / "runs.jsonl"
    for _ in range(2):
        result = _invoke("scan", "--file", str(document), "--no-progress", "--telemetry-log", str(log))
        assert result.exit_code == 0, result.output
    records = [json.loads(line) for line in log.read_text().splitlines()]
    assert len(records) == 2
    metrics = records[0]["metrics"]
    assert metrics["lines"] == 17
    assert metrics["seeds"] == 7
    assert metrics["leaves"] == 5
    assert metrics["reported"] == 2
    assert records[0]["config"]["threshold"] == 0.9
    assert records[0]["run_id"] != records[1]["run_id"]


def test_scan_config_file(document: Path, tmp_path: Path) -> None:
    config = tmp_path / "scan.yaml"
    config.write_text("threshold: 1.5\nshow_progress: false\n")
    result = _invoke("scan", "--file", str(document), "--config", str(config))
    assert result.exit_code == 0, result.output
    assert "------" not in result.stdout


def test_scan_cli_flag_overrides_config(document: Path, tmp_path: Path) -> None:
    config = tmp_path / "scan.yaml"
    config.write_text("threshold: 1.5\nshow_progress: false\n")
    result = _invoke("scan", "--file", str(document), "--config", str(config), "-t", "0.9")
    assert result.exit_code == 0, result.output
    assert FIRST_MATCH in result.stdout


def test_scan_invalid_config(document: Path, tmp_path: Path) -> None:
    config = tmp_path / "scan.yaml"
    config.write_text("min_block_length: -1\n")
    result = _invoke("scan", "--file", str(document), "--config", str(config))
    assert result.exit_code == 2


def test_scan_missing_file(tmp_path: Path) -> None:
    result = _invoke("scan", "--file", str(tmp_path / "missing.txt"))
    assert result.exit_code == 2


def test_scan_requires_file() -> None:
    result = _invoke("scan")
    assert result.exit_code == 2


def test_version() -> None:
    result = _invoke("version")
    assert result.exit_code == 0
    assert result.stdout.strip() == __version__
