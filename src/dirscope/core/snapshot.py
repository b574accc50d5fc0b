# src/dirscope/core/snapshot.py
import bisect
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from dirscope.core.ordering import name_order_key
from dirscope.core.reader import DirectoryReader
from dirscope.errors import AccessError, DuplicateKeyError

logger = logging.getLogger(__name__)


class OrderedSnapshot(Mapping):
    """
    Read-only mapping of entry name to size (files) or item count
    (directories). Iteration follows length-then-ordinal name order no
    matter how entries were added. Adding an existing name raises
    DuplicateKeyError instead of overwriting.
    """

    def __init__(self, items: Optional[Iterable[Tuple[str, int]]] = None):
        self._values: Dict[str, int] = {}
        self._keys: List[str] = []
        if items is not None:
            for name, value in items:
                self.add(name, value)

    def add(self, name: str, value: int) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Snapshot keys must be str, got {type(name).__name__}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Snapshot value for {name!r} must be an int, got {value!r}")
        if value < 0:
            raise ValueError(f"Snapshot value for {name!r} must be non-negative, got {value}")
        if name in self._values:
            raise DuplicateKeyError(name)

        bisect.insort(self._keys, name, key=name_order_key)
        self._values[name] = value

    def __getitem__(self, name: str) -> int:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        body = ", ".join(f"{name!r}: {value}" for name, value in self.items())
        return f"OrderedSnapshot({{{body}}})"


def build_snapshot(directory: Union[str, Path], reader: Optional[DirectoryReader] = None) -> OrderedSnapshot:
    """
    Snapshot of a directory's immediate children only. AccessError from the
    listing itself propagates to the caller; a subdirectory whose children
    cannot be counted is left out with a warning.
    """
    directory = Path(directory)
    if reader is None:
        reader = DirectoryReader(directory)

    listing = reader.list_directory(directory)
    snapshot = OrderedSnapshot()

    for file in listing.files:
        snapshot.add(file.name, file.size)

    for sub_dir in listing.directories:
        try:
            count = reader.count_children(sub_dir)
        except AccessError as e:
            logger.warning("Leaving %s out of the snapshot: %s", sub_dir, e.reason)
            continue
        snapshot.add(sub_dir.name, count)

    return snapshot
