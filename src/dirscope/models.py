# src/dirscope/models.py
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

@dataclass(frozen=True)
class AttributeFlags:
    read_only: bool = False
    archive: bool = False
    hidden: bool = False
    system: bool = False

@dataclass(frozen=True)
class FileEntry:
    """Immutable snapshot of one file, taken when its directory was listed."""
    path: Path
    name: str
    size: int
    modified: datetime
    attributes: AttributeFlags

@dataclass(frozen=True)
class DirectoryEntry:
    """Immutable snapshot of one subdirectory. `item_count` covers immediate children only."""
    path: Path
    name: str
    item_count: int
    attributes: AttributeFlags

@dataclass(frozen=True)
class OldestFile:
    name: str
    modified: datetime
