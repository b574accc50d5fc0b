# src/dirscope/core/reader.py
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Union

import pathspec

from dirscope.core.attributes import read_attributes
from dirscope.core.ignore import is_path_ignored
from dirscope.errors import AccessError
from dirscope.models import DirectoryEntry, FileEntry

logger = logging.getLogger(__name__)


@dataclass
class DirectoryListing:
    """Immediate children of one directory, each group in enumeration order."""
    files: List[FileEntry] = field(default_factory=list)
    directories: List[Path] = field(default_factory=list)


class DirectoryReader:
    """
    Single point of contact with the filesystem. Every OSError raised while
    listing, stat-ing or counting surfaces as AccessError.
    """

    def __init__(self, root_dir: Union[str, Path], ignore_spec: Optional[pathspec.PathSpec] = None):
        self.root_dir = Path(root_dir)
        self.ignore_spec = ignore_spec

    def _is_ignored(self, path: Path, is_directory: bool) -> bool:
        if self.ignore_spec is None:
            return False
        try:
            rel_path = path.relative_to(self.root_dir)
        except ValueError:
            return False
        return is_path_ignored(self.ignore_spec, rel_path, is_directory=is_directory)

    def _scan(self, directory: Path) -> Iterator[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            raise AccessError.from_os_error(directory, e) from e

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            if self._is_ignored(Path(entry.path), is_dir):
                continue
            yield entry

    def should_descend(self, directory: Union[str, Path]) -> bool:
        # Symlinked directories are listed but not followed, matching os.walk's default
        return not Path(directory).is_symlink()

    def count_children(self, directory: Union[str, Path]) -> int:
        return sum(1 for _ in self._scan(Path(directory)))

    def list_directory(self, directory: Union[str, Path]) -> DirectoryListing:
        directory = Path(directory)
        listing = DirectoryListing()

        for entry in self._scan(directory):
            entry_path = Path(entry.path)
            try:
                if entry.is_dir():
                    listing.directories.append(entry_path)
                elif entry.is_file():
                    st = entry.stat()
                    listing.files.append(
                        FileEntry(
                            path=entry_path,
                            name=entry.name,
                            size=st.st_size,
                            modified=datetime.fromtimestamp(st.st_mtime),
                            attributes=read_attributes(entry.name, st),
                        )
                    )
                else:
                    logger.debug("Skipping special entry: %s", entry_path)
            except OSError as e:
                raise AccessError.from_os_error(entry_path, e) from e

        return listing

    def read_directory_entry(self, directory: Union[str, Path]) -> DirectoryEntry:
        """Stats a subdirectory and counts its immediate children."""
        directory = Path(directory)
        try:
            st = directory.lstat()
        except OSError as e:
            raise AccessError.from_os_error(directory, e) from e

        return DirectoryEntry(
            path=directory,
            name=directory.name,
            item_count=self.count_children(directory),
            attributes=read_attributes(directory.name, st),
        )
