"""
Command-level tests for every tool, run through typer's CliRunner.
"""

import re
import sys
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tinytools.cli.colors_cli import app as colors_app
from tinytools.cli.dateadd_cli import app as dateadd_app
from tinytools.cli.datediff_cli import app as datediff_app
from tinytools.cli.dirsize_cli import app as dirsize_app
from tinytools.cli.estimate_cli import app as estimate_app
from tinytools.cli.extract_cli import app as extract_app
from tinytools.cli.ftree_cli import app as ftree_app
from tinytools.cli.killport_cli import app as killport_app
from tinytools.cli.main_cli import main_app
from tinytools.ports.killport import ProcessInfo
from tinytools.terminal.colors import RESET

runner = CliRunner()

NODE = ProcessInfo(1234, "node", "alice", "tcp", "LISTEN")


def test_colors_default_sections():
    result = runner.invoke(colors_app, [])
    assert result.exit_code == 0
    assert "Basic Colors (0-7)" in result.output
    assert "Text Formatting" in result.output
    assert result.output.endswith(RESET)


def test_colors_256_only():
    result = runner.invoke(colors_app, ["-2"])
    assert result.exit_code == 0
    assert "256 Color Mode" in result.output
    assert "Basic Colors" not in result.output


def test_colors_unknown_option():
    result = runner.invoke(colors_app, ["--bogus"])
    assert result.exit_code == 2


def test_datediff_default_days():
    result = runner.invoke(datediff_app, ["2024-01-01", "2025-01-01"])
    assert result.exit_code == 0
    assert result.output == "366.00 days\n"


def test_datediff_simple_unit():
    result = runner.invoke(datediff_app, ["-u", "days", "-s", "2024-01-01", "2024-02-01"])
    assert result.exit_code == 0
    assert result.output.strip() == "31"


def test_datediff_detailed():
    result = runner.invoke(datediff_app, ["-f", "2024-01-01 12:00:00", "2024-01-02 15:30:45"])
    assert result.output.strip() == "1 days, 3 hours, 30 minutes, 45 seconds"


def test_datediff_bad_date():
    result = runner.invoke(datediff_app, ["2024-02-30", "2024-03-01"])
    assert result.exit_code == 1
    assert "Error parsing first date" in result.output


def test_datediff_bad_unit():
    result = runner.invoke(datediff_app, ["-u", "fortnights", "2024-01-01"])
    assert result.exit_code == 2


def test_dateadd():
    result = runner.invoke(dateadd_app, ["2024-01-31", "+", "1", "month"])
    assert result.exit_code == 0
    assert result.output.strip() == "2024-03-02"


def test_dateadd_subtract_and_format():
    result = runner.invoke(dateadd_app, ["-f", "%Y/%m/%d %H:%M", "2024-03-01", "-", "1", "d"])
    assert result.exit_code == 0
    assert result.output.strip() == "2024/02/29 00:00"


def test_dateadd_invalid_unit():
    result = runner.invoke(dateadd_app, ["2024-01-01", "+", "1", "eons"])
    assert result.exit_code == 1
    assert "Invalid unit: eons" in result.output


def test_estimate_simple_output():
    result = runner.invoke(estimate_app, ["-s", "-q", "-n", "2", "-w", "0", sys.executable, "-c", "pass"])
    assert result.exit_code == 0
    assert re.fullmatch(r"min=\S+ max=\S+ avg=\S+ total=\S+ success=2 fail=0\n", result.output)


def test_estimate_passes_options_to_command():
    """Options after the command name belong to the command."""
    result = runner.invoke(
        estimate_app,
        ["-s", "-q", "-n", "2", sys.executable, "-c", "import sys; sys.exit(1)"],
    )
    assert result.exit_code == 0
    assert result.output.rstrip().endswith("success=0 fail=2")


def test_estimate_summary():
    result = runner.invoke(estimate_app, ["-n", "1", "-w", "0", sys.executable, "-c", "pass"])
    assert result.exit_code == 0
    assert "Execution Summary" in result.output
    assert "Successful: 1" in result.output
    assert "Average" in result.output


def test_estimate_missing_command():
    result = runner.invoke(estimate_app, ["-q", "definitely-not-a-real-command-xyz"])
    assert result.exit_code == 1
    assert "Error executing command" in result.output


def test_estimate_rejects_zero_iterations():
    result = runner.invoke(estimate_app, ["-n", "0", "true"])
    assert result.exit_code == 2


def test_extract_missing_archive(tmp_path):
    result = runner.invoke(extract_app, [str(tmp_path / "missing.zip")])
    assert result.exit_code == 1
    assert "Archive file not found" in result.output


def test_extract_unsupported(tmp_path):
    path = tmp_path / "notes.gz"
    path.write_text("x")
    result = runner.invoke(extract_app, [str(path)])
    assert result.exit_code == 1
    assert "Unsupported archive format" in result.output


def test_extract_success_message(tmp_path):
    path = tmp_path / "a.zip"
    path.write_text("x")
    with patch("tinytools.cli.extract_cli.ArchiveExtractor.run", return_value=("inflating: a\n", True)):
        result = runner.invoke(extract_app, [str(path)])
    assert result.exit_code == 0
    assert "inflating: a" in result.output
    assert "Extraction completed successfully." in result.output


def test_ftree(tmp_path):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "mod.py").write_text("")
    (tmp_path / ".env").write_text("")

    result = runner.invoke(ftree_app, [str(tmp_path)])
    assert result.exit_code == 0
    assert "└── pkg\n    └── mod.py" in result.output
    assert ".env" not in result.output
    assert "1 directories" in result.output
    assert "1 files" in result.output

    result = runner.invoke(ftree_app, ["-h", "-L", "1", str(tmp_path)])
    assert ".env" in result.output
    assert "mod.py" not in result.output


def test_ftree_missing_directory(tmp_path):
    result = runner.invoke(ftree_app, [str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "Directory not found" in result.output


def test_dirsize(tmp_path):
    (tmp_path / "f.bin").write_bytes(b"\0" * 4096)
    result = runner.invoke(dirsize_app, ["-u", str(tmp_path), str(tmp_path / "missing")])
    assert result.exit_code == 0
    assert "Warning: path does not exist" in result.output
    assert "Directory sizes:" in result.output
    assert "4.0 KB" in result.output


def test_killport_kills():
    with patch("tinytools.cli.killport_cli.find_all", return_value={8080: [NODE]}), \
            patch("tinytools.cli.killport_cli.kill_process", return_value=True) as kill:
        result = runner.invoke(killport_app, ["-f", "8080"])

    assert result.exit_code == 0
    assert "Port 8080: node (PID: 1234, User: alice)" in result.output
    assert "Successfully terminated process node (PID: 1234)" in result.output
    kill.assert_called_once_with(1234, True)


def test_killport_list_only():
    with patch("tinytools.cli.killport_cli.find_all", return_value={8080: [NODE]}), \
            patch("tinytools.cli.killport_cli.kill_process") as kill:
        result = runner.invoke(killport_app, ["-l", "8080"])

    assert result.exit_code == 0
    kill.assert_not_called()


def test_killport_failure_exit_code():
    with patch("tinytools.cli.killport_cli.find_all", return_value={8080: [NODE]}), \
            patch("tinytools.cli.killport_cli.kill_process", return_value=False):
        result = runner.invoke(killport_app, ["8080"])

    assert result.exit_code == 1
    assert "Failed to terminate process node (PID: 1234)" in result.output


def test_killport_nothing_found():
    with patch("tinytools.cli.killport_cli.find_all", return_value={}):
        result = runner.invoke(killport_app, ["9999"])
    assert result.exit_code == 0
    assert "No processes found for specified ports" in result.output


def test_killport_low_port_needs_root():
    with patch("tinytools.cli.killport_cli.is_root", return_value=False), \
            patch("tinytools.cli.killport_cli.find_all") as find_all:
        result = runner.invoke(killport_app, ["80"])
    assert result.exit_code == 1
    assert "Root privileges required" in result.output
    find_all.assert_not_called()


@pytest.mark.parametrize("port", ["70000", "http"])
def test_killport_invalid_port(port):
    result = runner.invoke(killport_app, [port])
    assert result.exit_code == 2


def test_main_app_dispatches():
    result = runner.invoke(main_app, ["datediff", "2024-01-01", "2024-01-02"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.00 days"

    result = runner.invoke(main_app, ["--help"])
    assert result.exit_code == 0
    for tool in ("colors", "datediff", "dateadd", "estimate", "extract", "ftree", "dirsize", "killport"):
        assert tool in result.output


def test_datediff_superscript_digit():
    result = runner.invoke(datediff_app, ["2024-0²-01", "2024-01-01"])
    assert result.exit_code == 1
    assert "Error parsing first date: Invalid month" in result.output


def test_dateadd_past_year_9999():
    result = runner.invoke(dateadd_app, ["9999-12-31", "+", "1", "day"])
    assert result.exit_code == 0
    assert result.output.strip() == "10000-01-01"


def test_estimate_unbalanced_quote():
    result = runner.invoke(estimate_app, ["echo 'a"])
    assert result.exit_code == 1
    assert "Cannot parse command: No closing quotation" in result.output


def test_dirsize_all_paths_missing(tmp_path):
    result = runner.invoke(dirsize_app, [str(tmp_path / "missing")])
    assert result.exit_code == 0
    assert "Warning: path does not exist" in result.output
    assert "Directory sizes:" not in result.output
