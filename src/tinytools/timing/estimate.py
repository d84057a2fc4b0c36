"""
Repeated command execution with timing statistics.

A run consists of `warmup` executions whose durations are discarded (to keep
cold caches out of the averages) followed by `iterations` measured ones.
"""

import shlex
import logging
import subprocess
import time
from typing import Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


class ExecutionStats:
    """Running min/max/average over measured executions."""

    def __init__(self):
        self.times: List[float] = []
        self.min = 0.0
        self.max = 0.0
        self.avg = 0.0
        self.total_time = 0.0
        self.success_count = 0
        self.fail_count = 0

    def add_execution(self, duration: float, success: bool):
        self.times.append(duration)
        self.total_time += duration

        if success:
            self.success_count += 1
        else:
            self.fail_count += 1

        if len(self.times) == 1 or duration < self.min:
            self.min = duration
        if len(self.times) == 1 or duration > self.max:
            self.max = duration

        self.avg = self.total_time / len(self.times)


def format_duration(seconds: float) -> str:
    """Seconds with three decimals from one second up, whole milliseconds below."""
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    return f"{int(seconds * 1000)}ms"


def split_command(command: Sequence[str]) -> List[str]:
    """
    Normalize the command words. A single argument containing whitespace
    ("sleep 1") is split shell-style.

    Raises:
        ValueError: If the quoting of that argument is unbalanced
    """
    command = list(command)
    if len(command) == 1 and any(ch.isspace() for ch in command[0]):
        return shlex.split(command[0])
    return command


def run_command(argv: Sequence[str]) -> Tuple[float, bool]:
    """
    Run `argv` once with output discarded.

    Returns:
        (elapsed seconds, whether the exit status was zero)

    Raises:
        OSError: If the command cannot be started
    """
    start = time.perf_counter()
    result = subprocess.run(
        list(argv),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
    elapsed = time.perf_counter() - start
    return elapsed, result.returncode == 0


def estimate(
    argv: Sequence[str],
    iterations: int = 3,
    warmup: int = 1,
    on_progress: Optional[Callable[[int, int], None]] = None,
    runner: Callable[[Sequence[str]], Tuple[float, bool]] = run_command,
) -> ExecutionStats:
    """
    Time `argv` over warmup + iterations runs.

    Args:
        argv: Command and arguments
        iterations: Measured runs, at least 1
        warmup: Discarded runs executed first
        on_progress: Called with (completed, total) after each run
        runner: Executes one run; replaced in tests

    Raises:
        ValueError: If iterations < 1, warmup < 0 or argv is empty
        OSError: If the command cannot be started
    """
    if not argv:
        raise ValueError("No command specified")
    if iterations < 1:
        raise ValueError("Iterations must be at least 1")
    if warmup < 0:
        raise ValueError("Warmup must not be negative")

    total_runs = warmup + iterations
    stats = ExecutionStats()

    for i in range(total_runs):
        duration, success = runner(argv)
        logger.debug("Run %d/%d: %.6fs success=%s", i + 1, total_runs, duration, success)
        if i >= warmup:
            stats.add_execution(duration, success)
        if on_progress:
            on_progress(i + 1, total_runs)

    return stats
