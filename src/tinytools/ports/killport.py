"""
Finding and terminating the processes bound to network ports.

Socket ownership comes from `ss -tupln`, process details from `ps`, and
termination goes through `kill`.
"""

import os
import re
import logging
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from tinytools.core.utils import command_exists

logger = logging.getLogger(__name__)

PID_PATTERN = re.compile(r"pid=(\d+)")


@dataclass
class ProcessInfo:
    pid: int
    name: str
    user: str
    protocol: str
    state: str


def _run(argv: Sequence[str]) -> subprocess.CompletedProcess:
    logger.debug("Running %s", " ".join(argv))
    return subprocess.run(list(argv), capture_output=True, text=True)


def parse_ss_output(output: str, port: int) -> List[Tuple[int, str, str]]:
    """
    Pick the sockets bound to `port` out of `ss -tupln` output.

    Returns:
        (pid, protocol, state) per owning process, first occurrence only
    """
    suffix = f":{port}"
    found = []
    seen = set()

    # First line is the column header
    for line in output.splitlines()[1:]:
        fields = line.split()
        if len(fields) < 6:
            continue
        # Netid State Recv-Q Send-Q Local:Port Peer:Port [Process]
        protocol, state, local_address = fields[0], fields[1], fields[4]
        if not local_address.endswith(suffix):
            continue
        for pid_str in PID_PATTERN.findall(fields[-1]):
            pid = int(pid_str)
            if pid in seen:
                continue
            seen.add(pid)
            found.append((pid, protocol, state))
    return found


def lookup_process(pid: int) -> Optional[Tuple[str, str]]:
    """Return (command name, user) for `pid`, or None if it is gone."""
    result = _run(["ps", "-p", str(pid), "-o", "comm=,user="])
    fields = result.stdout.split()
    if result.returncode != 0 or len(fields) < 2:
        return None
    return fields[0], fields[1]


def find_processes(port: int) -> List[ProcessInfo]:
    """
    List processes with a socket bound to `port`.

    Raises:
        RuntimeError: If `ss` or `ps` is not available
    """
    for required in ("ss", "ps"):
        if not command_exists(required):
            raise RuntimeError(f"Required command '{required}' not found")

    result = _run(["ss", "-tupln"])
    processes = []
    for pid, protocol, state in parse_ss_output(result.stdout, port):
        details = lookup_process(pid)
        if details is None:
            logger.info("PID %d exited before it could be inspected", pid)
            continue
        name, user = details
        processes.append(ProcessInfo(pid, name, user, protocol, state))
    return processes


def find_all(ports: Sequence[int]) -> Dict[int, List[ProcessInfo]]:
    """Map each port that has owners to its processes, in the order given."""
    port_processes = {}
    for port in ports:
        processes = find_processes(port)
        if processes:
            port_processes[port] = processes
    return port_processes


def kill_process(pid: int, force: bool = False) -> bool:
    """Send SIGKILL (force) or SIGTERM to `pid` via kill(1)."""
    signal_flag = "-9" if force else "-15"
    try:
        result = _run(["kill", signal_flag, str(pid)])
    except OSError as e:
        logger.error("Could not run kill: %s", e)
        return False
    return result.returncode == 0


def is_root() -> bool:
    return os.geteuid() == 0


def needs_root(ports: Sequence[int]) -> bool:
    return any(port < 1024 for port in ports)


def format_process(proc: ProcessInfo, port: int, verbose: bool = False) -> List[str]:
    if verbose:
        return [
            f"Port {port} ({proc.protocol}):",
            f"  PID:      {proc.pid}",
            f"  Name:     {proc.name}",
            f"  User:     {proc.user}",
            f"  State:    {proc.state}",
            "",
        ]
    return [f"Port {port}: {proc.name} (PID: {proc.pid}, User: {proc.user})"]
