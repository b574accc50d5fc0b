# src/dirscope/core/oldest.py
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from dirscope.core.reader import DirectoryReader
from dirscope.errors import AccessError
from dirscope.models import FileEntry, OldestFile

logger = logging.getLogger(__name__)


def iter_all_files(directory: Union[str, Path], reader: Optional[DirectoryReader] = None) -> Iterator[FileEntry]:
    """Yields every file at every depth; unreadable subtrees are logged and skipped."""
    directory = Path(directory)
    if reader is None:
        reader = DirectoryReader(directory)

    try:
        listing = reader.list_directory(directory)
    except AccessError as e:
        logger.warning("Skipping unreadable directory %s: %s", directory, e.reason)
        return

    yield from listing.files
    for sub_dir in listing.directories:
        if reader.should_descend(sub_dir):
            yield from iter_all_files(sub_dir, reader)


def select_oldest(files: Iterable[FileEntry]) -> Optional[OldestFile]:
    """
    Picks the file with the smallest modification time. Only a strictly older
    file replaces the current pick, so the first one seen wins a tie.
    """
    oldest: Optional[FileEntry] = None
    for file in files:
        if oldest is None or file.modified < oldest.modified:
            oldest = file

    if oldest is None:
        return None
    return OldestFile(name=oldest.name, modified=oldest.modified)


def find_oldest_file(directory: Union[str, Path], reader: Optional[DirectoryReader] = None) -> Optional[OldestFile]:
    return select_oldest(iter_all_files(directory, reader))
