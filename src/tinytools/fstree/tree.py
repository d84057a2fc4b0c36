"""
Directory tree rendering.

This module walks a directory and yields the lines of a `tree`-style drawing,
counting directories, files and bytes as it goes.
"""

import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from tinytools.core.utils import format_size

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


class TreeOptions:
    """Display and filter options for a tree walk."""

    def __init__(
        self,
        max_depth: Optional[int] = None,
        show_size: bool = False,
        show_hidden: bool = False,
        dirs_only: bool = False,
        pattern: Optional[str] = None,
        ignore: Optional[str] = None,
    ):
        """
        Args:
            max_depth: Deepest level shown (children of the root are level 1);
                None for unlimited
            show_size: Append " [size]" or " [DIR]" to each entry
            show_hidden: Include dot files
            dirs_only: Skip regular files
            pattern: Files must match this to be shown
            ignore: Entries matching this are skipped
        """
        self.max_depth = max_depth
        self.show_size = show_size
        self.show_hidden = show_hidden
        self.dirs_only = dirs_only
        self.pattern = pattern
        self.ignore = ignore


class TreeStats:
    """Totals collected while walking. The root itself is not counted."""

    def __init__(self):
        self.total_dirs = 0
        self.total_files = 0
        self.total_size = 0


def matches_pattern(name: str, pattern: str) -> bool:
    """
    "*.ext" matches names ending in ".ext"; anything else is a substring test.
    """
    if pattern.startswith("*."):
        return name.endswith(pattern[1:])
    return pattern in name


def should_include(name: str, is_dir: bool, options: TreeOptions) -> bool:
    if not options.show_hidden and name.startswith("."):
        return False
    if options.dirs_only and not is_dir:
        return False
    # The include pattern only filters files so matches deeper down stay reachable
    if options.pattern and not is_dir and not matches_pattern(name, options.pattern):
        return False
    if options.ignore and matches_pattern(name, options.ignore):
        return False
    return True


def _entry_size(entry: os.DirEntry) -> int:
    try:
        return entry.stat().st_size
    except OSError as e:
        # Broken symlinks and the like
        logger.warning("Cannot stat %s: %s", entry.path, e)
        return 0


def _list_entries(path: Path, options: TreeOptions) -> List[os.DirEntry]:
    try:
        with os.scandir(path) as it:
            entries = [e for e in it if should_include(e.name, e.is_dir(), options)]
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", path, e)
        return []
    entries.sort(key=lambda e: (not e.is_dir(), e.name))
    return entries


def _walk(path: Path, prefix: str, depth: int, options: TreeOptions, stats: TreeStats) -> Iterator[str]:
    if options.max_depth is not None and depth + 1 > options.max_depth:
        return

    entries = _list_entries(path, options)
    for index, entry in enumerate(entries):
        last = index == len(entries) - 1
        is_dir = entry.is_dir()
        line = prefix + (LAST_BRANCH if last else BRANCH) + entry.name

        if is_dir:
            stats.total_dirs += 1
            if options.show_size:
                line += " [DIR]"
            yield line
            # Symlinked directories are listed but not followed
            if not entry.is_symlink():
                yield from _walk(Path(entry.path), prefix + (SPACE if last else PIPE), depth + 1, options, stats)
        else:
            size = _entry_size(entry)
            stats.total_files += 1
            stats.total_size += size
            if options.show_size:
                line += f" [{format_size(size)}]"
            yield line


def render_tree(root, options: Optional[TreeOptions] = None, stats: Optional[TreeStats] = None) -> Iterator[str]:
    """
    Yield the tree drawing for `root`, starting with the root path itself.

    Args:
        root: Directory to draw
        options: Display options (defaults to TreeOptions())
        stats: Filled in while the generator is consumed

    Raises:
        FileNotFoundError: If root does not exist
    """
    root = Path(root)
    options = options or TreeOptions()
    stats = stats if stats is not None else TreeStats()

    if not root.exists():
        raise FileNotFoundError("Directory not found")

    yield str(root)
    if root.is_dir():
        yield from _walk(root, "", 0, options, stats)
    else:
        stats.total_files += 1
        stats.total_size += root.stat().st_size


def summary_lines(stats: TreeStats, show_size: bool = False) -> List[str]:
    lines = [
        "",
        "Summary:",
        f"  {stats.total_dirs} directories",
        f"  {stats.total_files} files",
    ]
    if show_size:
        lines.append(f"  Total size: {format_size(stats.total_size)}")
    return lines
