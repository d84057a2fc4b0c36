"""
Tests for the command timing logic.
"""

import sys

import pytest

from tinytools.timing.estimate import ExecutionStats, estimate, format_duration, run_command, split_command


def fake_runner(results):
    """Return a runner that replays (duration, success) pairs."""
    it = iter(results)
    return lambda argv: next(it)


def test_warmup_runs_are_discarded():
    runner = fake_runner([(5.0, True), (0.1, True), (0.3, True), (0.2, True)])
    stats = estimate(["cmd"], iterations=3, warmup=1, runner=runner)

    assert stats.times == [0.1, 0.3, 0.2]
    assert stats.min == 0.1
    assert stats.max == 0.3
    assert stats.avg == pytest.approx(0.2)
    assert stats.total_time == pytest.approx(0.6)


def test_success_and_failure_counts():
    runner = fake_runner([(0.1, True), (0.1, False), (0.1, True)])
    stats = estimate(["cmd"], iterations=3, warmup=0, runner=runner)
    assert stats.success_count == 2
    assert stats.fail_count == 1


def test_progress_reports_every_run():
    calls = []
    runner = fake_runner([(0.1, True)] * 4)
    estimate(["cmd"], iterations=2, warmup=2, runner=runner, on_progress=lambda done, total: calls.append((done, total)))
    assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]


@pytest.mark.parametrize("kwargs,message", [
    ({"iterations": 0}, "at least 1"),
    ({"warmup": -1}, "must not be negative"),
])
def test_invalid_counts(kwargs, message):
    with pytest.raises(ValueError, match=message):
        estimate(["cmd"], runner=fake_runner([]), **kwargs)


def test_empty_command():
    with pytest.raises(ValueError, match="No command specified"):
        estimate([])


def test_stats_start_empty():
    stats = ExecutionStats()
    assert stats.times == []
    assert stats.success_count == stats.fail_count == 0


@pytest.mark.parametrize("seconds,expected", [
    (1.5, "1.500s"),
    (1.0, "1.000s"),
    (0.25, "250ms"),
    (0.0005, "0ms"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


def test_split_command():
    assert split_command(["sleep 1"]) == ["sleep", "1"]
    assert split_command(["ls", "-la"]) == ["ls", "-la"]
    assert split_command(["echo 'a b'"]) == ["echo", "a b"]


def test_run_command_reports_exit_status():
    elapsed, ok = run_command([sys.executable, "-c", "pass"])
    assert ok is True
    assert elapsed > 0

    _, ok = run_command([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert ok is False


def test_run_command_missing_program():
    with pytest.raises(OSError):
        run_command(["definitely-not-a-real-command-xyz"])
