# src/dirscope/core/tree.py
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from dirscope.config import DIRECTORY_LINE, FILE_LINE, INDENT_WIDTH, LISTING_ERROR_LINE
from dirscope.core.attributes import format_attributes
from dirscope.core.reader import DirectoryReader
from dirscope.errors import AccessError

logger = logging.getLogger(__name__)


def get_indent(level: int) -> str:
    return " " * (level * INDENT_WIDTH)


def iter_directory_tree(
    directory: Union[str, Path],
    reader: Optional[DirectoryReader] = None,
    depth: int = 0,
) -> Iterator[str]:
    """
    Depth-first walk yielding one line per entry: a directory's files first,
    then each subdirectory followed by its own contents one level deeper.

    An unreadable directory yields an error line in place of its contents;
    the walk carries on with its siblings. Symlinked directories get a
    header line but are not entered.
    """
    directory = Path(directory)
    if reader is None:
        reader = DirectoryReader(directory)
    indent = get_indent(depth)

    try:
        listing = reader.list_directory(directory)
    except AccessError as e:
        logger.debug("Cannot list %s: %s", directory, e.reason)
        yield LISTING_ERROR_LINE.format(indent=indent, message=e)
        return

    for file in listing.files:
        yield FILE_LINE.format(
            indent=indent,
            name=file.name,
            size=file.size,
            attributes=format_attributes(file.attributes),
        )

    for sub_dir in listing.directories:
        try:
            entry = reader.read_directory_entry(sub_dir)
        except AccessError as e:
            logger.debug("Cannot read %s: %s", sub_dir, e.reason)
            yield LISTING_ERROR_LINE.format(indent=indent, message=e)
            continue

        yield DIRECTORY_LINE.format(
            indent=indent,
            name=entry.name,
            count=entry.item_count,
            attributes=format_attributes(entry.attributes),
        )
        if reader.should_descend(sub_dir):
            yield from iter_directory_tree(sub_dir, reader, depth + 1)
