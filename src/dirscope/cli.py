# src/dirscope/cli.py
import sys
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from dirscope.config import (
    NO_FILES_LINE,
    OLDEST_FILE_LINE,
    SNAPSHOT_HEADER,
    SNAPSHOT_LINE,
    TIMESTAMP_FORMAT,
    TREE_HEADER,
    USAGE_MESSAGE,
)
from dirscope.core.codec import decode_snapshot, encode_snapshot
from dirscope.core.ignore import load_ignore_spec
from dirscope.core.oldest import find_oldest_file
from dirscope.core.reader import DirectoryReader
from dirscope.core.snapshot import OrderedSnapshot, build_snapshot
from dirscope.core.tree import iter_directory_tree
from dirscope.errors import AccessError, DecodeError
from dirscope.log import configure_logging
from dirscope.models import OldestFile

logger = logging.getLogger(__name__)

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Print a directory tree with DOS-style attributes, find the oldest file "
        "and round-trip a sorted snapshot of the directory's immediate children."
    )
    parser.add_argument("root_dir", type=str, nargs="?", default=None, help="Directory to inspect")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="gitignore-style pattern to hide from every report (repeatable)",
    )
    parser.add_argument("--ignore-file", type=str, default=None, help="File with gitignore-style patterns")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser

def format_oldest(oldest: Optional[OldestFile]) -> str:
    if oldest is None:
        return NO_FILES_LINE
    return OLDEST_FILE_LINE.format(name=oldest.name, timestamp=oldest.modified.strftime(TIMESTAMP_FORMAT))

def round_trip(snapshot: OrderedSnapshot) -> OrderedSnapshot:
    """Encodes then decodes the snapshot; DecodeError propagates."""
    payload = encode_snapshot(snapshot)
    logger.debug("Encoded snapshot: %d entries, %d bytes", len(snapshot), len(payload))
    return decode_snapshot(payload)

def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)
        configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

        if args.root_dir is None:
            print(USAGE_MESSAGE)
            return 1

        root_dir = Path(args.root_dir)
        if not root_dir.is_dir():
            print(f"Error: Invalid directory '{root_dir}'", file=sys.stderr)
            return 1

        ignore_file = Path(args.ignore_file) if args.ignore_file else None
        ignore_spec = load_ignore_spec(ignore_file, extra_patterns=args.exclude)
        reader = DirectoryReader(root_dir, ignore_spec)

        # 2. Tree
        print(TREE_HEADER.format(path=args.root_dir))
        for line in iter_directory_tree(root_dir, reader):
            print(line)
        print()

        # 3. Snapshot of immediate children
        try:
            snapshot = build_snapshot(root_dir, reader)
        except AccessError as e:
            print(f"Error: Could not build snapshot: {e}", file=sys.stderr)
            snapshot = None

        # 4. Oldest file
        print(format_oldest(find_oldest_file(root_dir, reader)))

        # 5. Serialization round-trip
        if snapshot is None:
            return 1
        try:
            restored = round_trip(snapshot)
        except DecodeError as e:
            print(f"Error: Snapshot round-trip failed: {e}", file=sys.stderr)
            return 1

        print(SNAPSHOT_HEADER)
        for name, value in restored.items():
            print(SNAPSHOT_LINE.format(name=name, value=value))
        return 0

    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        return 1

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
