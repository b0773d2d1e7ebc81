"""Integration tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from lagrange_pkg.cli import main_entry

ROOT = Path(__file__).resolve().parents[1]
ENV = {**os.environ, "PYTHONIOENCODING": "utf-8"}
SAMPLE = "1 1\n2 2\n3 3\n4 4\n5 98756\n5\n"


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "points.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def _run(*args):
    return subprocess.run(
        [sys.executable, "-m", "lagrange_pkg.cli", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=ENV,
        cwd=ROOT,
        timeout=60,
    )


def test_cli_version():
    """Test --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_health_check():
    """Test --health-check command."""
    result = _run("--health-check")
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()
    assert "[FAIL]" not in result.stdout


def test_cli_human_output(sample_file):
    """Test interpolation with human output."""
    result = _run(str(sample_file))
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines[0].startswith("ip ≡ [")
    assert any(line.startswith("Expanded: ") for line in lines)
    assert "ip(5) = 9875" in result.stdout
    assert "Done in" in result.stdout


def test_cli_json_output(sample_file):
    """Test interpolation with JSON output."""
    result = _run(str(sample_file), "--format", "json", "--rational")
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["ok"] is True
    assert data["degree"] == 4
    assert len(data["rational"]) == 5
    assert abs(data["value"] - 98756) < 1e-6


def test_cli_precision(sample_file):
    """Test --precision changes displayed digits."""
    result = _run(str(sample_file), "--at", "1/2", "-p", "3")
    assert result.returncode == 0
    assert "ip(0.5) = " in result.stdout


def test_cli_reads_stdin():
    """Test '-' reads points from standard input."""
    result = subprocess.run(
        [sys.executable, "-m", "lagrange_pkg", "-", "--format", "json"],
        input="0 1\n1 3\n2\n",
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=ENV,
        cwd=ROOT,
        timeout=60,
    )
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert abs(data["value"] - 5) < 1e-9


class TestMainEntry:
    """Run the CLI in-process."""

    def test_rational_display(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("0 0.5\n1 1\n", encoding="utf-8")
        assert main_entry([str(path), "--rational", "--at", "2"]) == 0
        out = capsys.readouterr().out
        assert "ip ≡ [1/2, 1/2]" in out
        assert "ip(2) = 1.5" in out

    def test_max_denominator(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("0 0.333333\n1 1\n", encoding="utf-8")
        assert main_entry([str(path), "--rational", "-d", "1000"]) == 0
        assert "ip ≡ [1/3, 2/3]" in capsys.readouterr().out

    def test_duplicate_abscissa_exit_code(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("1 5\n1 9\n", encoding="utf-8")
        assert main_entry([str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_insufficient_points_exit_code(self, tmp_path, capsys):
        path = tmp_path / "points.txt"
        path.write_text("1 5\n", encoding="utf-8")
        assert main_entry([str(path)]) == 1

    def test_missing_file_exit_code(self, tmp_path, capsys):
        assert main_entry([str(tmp_path / "missing.txt")]) == 2
        assert "could not be read" in capsys.readouterr().out

    def test_missing_input_argument(self, capsys):
        assert main_entry([]) == 2

    def test_bad_target(self, sample_file, capsys):
        assert main_entry([str(sample_file), "--at", "y"]) == 2

    def test_bad_denominator(self, sample_file, capsys):
        assert main_entry([str(sample_file), "-d", "0"]) == 2
