"""Archive extraction by dispatch to external tools."""

from tinytools.archive.extractor import ArchiveType, ArchiveExtractor, ExtractError

__all__ = ["ArchiveType", "ArchiveExtractor", "ExtractError"]
