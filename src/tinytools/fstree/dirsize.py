"""
Directory size calculation.

Each root is scanned independently, so roots are sized in parallel in a
thread pool. Within a root the walk is sequential.
"""

import os
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from tinytools.core.utils import format_size

logger = logging.getLogger(__name__)


class SizeReport:
    """Total size of one root plus the files found under it."""

    def __init__(self, root: Path):
        self.root = root
        self.total = 0
        self.files: List[Tuple[Path, int]] = []


def scan(root, show_all: bool = False, max_depth: Optional[int] = None) -> SizeReport:
    """
    Sum regular-file sizes under `root`.

    Args:
        root: Directory (or single file) to size
        show_all: Include dot files and dot directories
        max_depth: Files directly in root are depth 0; subdirectories deeper
            than this are not entered. None for unlimited.
    """
    root = Path(root)
    report = SizeReport(root)

    if root.is_file():
        size = root.stat().st_size
        report.total = size
        report.files.append((root, size))
        return report

    pending = [(root, 0)]
    while pending:
        directory, depth = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.warning("Skipping %s: %s", directory, e)
            continue

        for entry in entries:
            if not show_all and entry.name.startswith("."):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    if max_depth is None or depth + 1 <= max_depth:
                        pending.append((Path(entry.path), depth + 1))
                elif entry.is_file(follow_symlinks=False):
                    size = entry.stat(follow_symlinks=False).st_size
                    report.total += size
                    report.files.append((Path(entry.path), size))
            except OSError as e:
                logger.warning("Skipping %s: %s", entry.path, e)

    return report


def scan_all(
    roots: Sequence,
    show_all: bool = False,
    max_depth: Optional[int] = None,
    threads: int = 4,
) -> List[SizeReport]:
    """Scan several roots concurrently; results keep the order of `roots`."""
    with ThreadPoolExecutor(max_workers=max(1, threads)) as pool:
        return list(pool.map(lambda r: scan(r, show_all, max_depth), roots))


def display_size(size: int, human: bool) -> str:
    return format_size(size) if human else str(size)


def report_lines(
    reports: Sequence[SizeReport],
    summarize: bool = False,
    threshold: int = 0,
    human: bool = False,
    sort_output: bool = True,
) -> List[str]:
    """
    Format scan results.

    Args:
        reports: Output of scan/scan_all
        summarize: Only print per-root totals
        threshold: Minimum size in bytes for a line to be printed
        human: Use KB/MB/... instead of raw bytes
        sort_output: Largest first
    """
    lines = []

    if not summarize:
        for report in reports:
            files = [(path, size) for path, size in report.files if size >= threshold]
            if sort_output:
                files.sort(key=lambda item: item[1], reverse=True)
            for path, size in files:
                name = path.name if path == report.root else str(path.relative_to(report.root))
                lines.append(f"{display_size(size, human):>15}  {name}")

    if not reports:
        return lines

    totals = [(report.root, report.total) for report in reports]
    if sort_output:
        totals.sort(key=lambda item: item[1], reverse=True)

    lines.append("")
    lines.append("Directory sizes:")
    for root, total in totals:
        if total >= threshold:
            lines.append(f"{display_size(total, human):>15}  {root}")
    return lines
