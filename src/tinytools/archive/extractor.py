"""Archive extractor component.

This module detects an archive's format from its file name and runs the
matching external program (tar, unzip, 7z, unrar) to extract or list it.
"""

import os
import logging
import subprocess
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple

from tinytools.core.utils import command_exists

logger = logging.getLogger(__name__)


class ExtractError(RuntimeError):
    """Raised when an archive cannot be extracted or listed."""


class ArchiveType(str, Enum):
    """Archive formats recognized from the file name."""
    ZIP = "zip"
    TAR = "tar"
    TAR_GZ = "tar.gz"
    TAR_BZ2 = "tar.bz2"
    TAR_XZ = "tar.xz"
    TAR_ZST = "tar.zst"
    SEVEN_ZIP = "7z"
    RAR = "rar"
    UNKNOWN = "unknown"

    @classmethod
    def from_path(cls, path) -> "ArchiveType":
        """Detect the type from the name; compound suffixes win over plain ones."""
        name = Path(path).name.lower()
        for suffix, archive_type in COMPOUND_SUFFIXES:
            if name.endswith(suffix):
                return archive_type
        return SIMPLE_SUFFIXES.get(Path(name).suffix, cls.UNKNOWN)


COMPOUND_SUFFIXES = [
    (".tar.gz", ArchiveType.TAR_GZ),
    (".tar.bz2", ArchiveType.TAR_BZ2),
    (".tar.xz", ArchiveType.TAR_XZ),
    (".tar.zst", ArchiveType.TAR_ZST),
]

SIMPLE_SUFFIXES = {
    ".tgz": ArchiveType.TAR_GZ,
    ".tbz2": ArchiveType.TAR_BZ2,
    ".txz": ArchiveType.TAR_XZ,
    ".zip": ArchiveType.ZIP,
    ".tar": ArchiveType.TAR,
    ".7z": ArchiveType.SEVEN_ZIP,
    ".rar": ArchiveType.RAR,
}

EXTRACT_COMMANDS = {
    ArchiveType.ZIP: ("unzip", ["-q"]),
    ArchiveType.TAR: ("tar", ["-xf"]),
    ArchiveType.TAR_GZ: ("tar", ["-xzf"]),
    ArchiveType.TAR_BZ2: ("tar", ["-xjf"]),
    ArchiveType.TAR_XZ: ("tar", ["-xJf"]),
    ArchiveType.TAR_ZST: ("tar", ["--zstd", "-xf"]),
    ArchiveType.SEVEN_ZIP: ("7z", ["x"]),
    ArchiveType.RAR: ("unrar", ["x"]),
}

LIST_COMMANDS = {
    ArchiveType.ZIP: ("unzip", ["-l"]),
    ArchiveType.TAR: ("tar", ["-tf"]),
    ArchiveType.TAR_GZ: ("tar", ["-tzf"]),
    ArchiveType.TAR_BZ2: ("tar", ["-tjf"]),
    ArchiveType.TAR_XZ: ("tar", ["-tJf"]),
    ArchiveType.TAR_ZST: ("tar", ["--zstd", "-tf"]),
    ArchiveType.SEVEN_ZIP: ("7z", ["l"]),
    ArchiveType.RAR: ("unrar", ["l"]),
}


class ArchiveExtractor:
    """Extract or list one archive through the matching external tool."""

    def __init__(
        self,
        archive_path,
        destination=None,
        list_only: bool = False,
        force: bool = False,
        quiet: bool = False,
        keep: bool = False,
    ):
        """
        Args:
            archive_path: Archive to process
            destination: Directory to extract into (created if missing);
                defaults to the current directory
            list_only: List contents instead of extracting
            force: Overwrite existing files
            quiet: Ask the tool to suppress its own output
            keep: Keep the archive after a successful extraction

        Raises:
            FileNotFoundError: If the archive does not exist
        """
        self.archive_path = Path(archive_path)
        self.destination = Path(destination) if destination else None
        self.list_only = list_only
        self.force = force
        self.quiet = quiet
        self.keep = keep

        if not self.archive_path.exists():
            raise FileNotFoundError(f"Archive file not found: {self.archive_path}")

        self.archive_type = ArchiveType.from_path(self.archive_path)

    def build_command(self) -> List[str]:
        """
        Assemble the argv for the external tool.

        Raises:
            ExtractError: If the archive format is not supported
        """
        table = LIST_COMMANDS if self.list_only else EXTRACT_COMMANDS
        if self.archive_type not in table:
            raise ExtractError("Unsupported archive format")

        program, base_args = table[self.archive_type]
        argv = [program] + list(base_args)

        if program == "unzip":
            if self.force:
                argv.append("-o")
            if self.quiet:
                argv.append("-qq")
        elif program == "7z":
            if self.quiet:
                argv.append("-bd")
            if self.force:
                argv.append("-y")
        elif program == "unrar":
            if self.force:
                argv.append("-o+")
            if self.quiet:
                argv.append("-inul")

        # Absolute, since the tool may run inside the destination directory
        argv.append(str(self.archive_path.resolve()))
        return argv

    def _working_directory(self) -> Optional[Path]:
        if self.list_only or self.destination is None:
            return None
        try:
            self.destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExtractError(f"Failed to create destination directory: {e}")
        return self.destination

    def run(self) -> Tuple[str, bool]:
        """
        Run the tool and clean up the archive.

        Returns:
            (tool stdout, whether the archive was removed)

        Raises:
            ExtractError: On unsupported format, missing tool or tool failure
        """
        argv = self.build_command()
        program = argv[0]
        if not command_exists(program):
            raise ExtractError(f"Required command '{program}' not found")

        cwd = self._working_directory()
        logger.debug("Running %s in %s", argv, cwd or os.getcwd())

        try:
            result = subprocess.run(argv, cwd=cwd, capture_output=True, text=True)
        except OSError as e:
            raise ExtractError(f"Failed to execute command: {e}")

        if result.returncode != 0:
            raise ExtractError(f"Extraction failed: {result.stderr.strip()}")

        removed = False
        if not self.keep and not self.list_only:
            try:
                self.archive_path.unlink()
            except OSError as e:
                raise ExtractError(f"Failed to remove archive: {e}")
            removed = True
            logger.info("Removed %s", self.archive_path)

        return result.stdout, removed
