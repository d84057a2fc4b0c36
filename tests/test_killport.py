"""
Tests for port owner discovery and termination.
"""

import subprocess
from unittest.mock import patch

import pytest

from tinytools.ports.killport import (
    ProcessInfo,
    find_processes,
    format_process,
    kill_process,
    lookup_process,
    needs_root,
    parse_ss_output,
)

SS_OUTPUT = """\
Netid State  Recv-Q Send-Q Local Address:Port  Peer Address:Port Process
udp   UNCONN 0      0      127.0.0.53%lo:53    0.0.0.0:*         users:(("systemd-resolve",pid=500,fd=13))
tcp   LISTEN 0      511    0.0.0.0:8080        0.0.0.0:*         users:(("node",pid=1234,fd=20))
tcp   LISTEN 0      511    [::]:8080           [::]:*            users:(("node",pid=1234,fd=21))
tcp   LISTEN 0      128    0.0.0.0:18080       0.0.0.0:*         users:(("python3",pid=77,fd=3),("python3",pid=78,fd=3))
tcp   LISTEN 0      128    0.0.0.0:22          0.0.0.0:*
"""


def completed(stdout="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr="")


def test_parse_merges_duplicate_pids():
    assert parse_ss_output(SS_OUTPUT, 8080) == [(1234, "tcp", "LISTEN")]


def test_parse_port_is_not_a_substring_match():
    assert parse_ss_output(SS_OUTPUT, 18080) == [(77, "tcp", "LISTEN"), (78, "tcp", "LISTEN")]
    assert parse_ss_output(SS_OUTPUT, 80) == []


def test_parse_udp_and_missing_process_column():
    assert parse_ss_output(SS_OUTPUT, 53) == [(500, "udp", "UNCONN")]
    assert parse_ss_output(SS_OUTPUT, 22) == []


def test_lookup_process():
    with patch("tinytools.ports.killport._run", return_value=completed("node alice\n")) as run:
        assert lookup_process(1234) == ("node", "alice")
    run.assert_called_once_with(["ps", "-p", "1234", "-o", "comm=,user="])


def test_lookup_process_gone():
    with patch("tinytools.ports.killport._run", return_value=completed("", returncode=1)):
        assert lookup_process(1234) is None


def test_find_processes():
    def fake_run(argv):
        if argv[0] == "ss":
            return completed(SS_OUTPUT)
        return completed("node alice\n")

    with patch("tinytools.ports.killport.command_exists", return_value=True), \
            patch("tinytools.ports.killport._run", side_effect=fake_run):
        processes = find_processes(8080)

    assert processes == [ProcessInfo(1234, "node", "alice", "tcp", "LISTEN")]


def test_find_processes_without_ss():
    with patch("tinytools.ports.killport.command_exists", return_value=False):
        with pytest.raises(RuntimeError, match="Required command 'ss' not found"):
            find_processes(8080)


def test_kill_process_signals():
    with patch("tinytools.ports.killport._run", return_value=completed()) as run:
        assert kill_process(1234, force=True) is True
        run.assert_called_with(["kill", "-9", "1234"])
        assert kill_process(1234) is True
        run.assert_called_with(["kill", "-15", "1234"])

    with patch("tinytools.ports.killport._run", return_value=completed(returncode=1)):
        assert kill_process(1234) is False


def test_needs_root():
    assert needs_root([80, 8080])
    assert not needs_root([1024, 8080])


def test_format_process():
    proc = ProcessInfo(1234, "node", "alice", "tcp", "LISTEN")
    assert format_process(proc, 8080) == ["Port 8080: node (PID: 1234, User: alice)"]
    verbose = format_process(proc, 8080, verbose=True)
    assert verbose[0] == "Port 8080 (tcp):"
    assert "  State:    LISTEN" in verbose


def test_find_processes_without_ps():
    with patch("tinytools.ports.killport.command_exists", side_effect=lambda name: name != "ps"), \
            patch("tinytools.ports.killport._run") as run:
        with pytest.raises(RuntimeError, match="Required command 'ps' not found"):
            find_processes(8080)
    run.assert_not_called()
