# src/dirscope/core/codec.py
import json
from typing import Any, List

from dirscope.config import SNAPSHOT_FORMAT, SNAPSHOT_VERSION
from dirscope.core.ordering import compare_names
from dirscope.core.snapshot import OrderedSnapshot
from dirscope.errors import DecodeError


def encode_snapshot(snapshot: OrderedSnapshot) -> bytes:
    """
    Serializes entries positionally, in iteration order, as JSON. Non-ASCII
    characters are escaped, so undecodable filenames (lone surrogates from
    os.fsdecode) survive the trip.
    """
    document = {
        "format": SNAPSHOT_FORMAT,
        "version": SNAPSHOT_VERSION,
        "entries": [[name, value] for name, value in snapshot.items()],
    }
    return json.dumps(document, separators=(",", ":")).encode("ascii")


def _check_entry(position: int, raw: Any) -> List[Any]:
    if not isinstance(raw, list) or len(raw) != 2:
        raise DecodeError("Entry is not a [name, value] pair", position)
    name, value = raw
    if not isinstance(name, str):
        raise DecodeError("Entry name is not a string", position)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise DecodeError("Entry value is not a non-negative integer", position)
    return raw


def decode_snapshot(data: bytes) -> OrderedSnapshot:
    """
    Rebuilds a snapshot from encode_snapshot output. Anything short of a
    complete, well-ordered document raises DecodeError; no partial
    snapshot is ever returned.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"Expected bytes, got {type(data).__name__}")

    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Snapshot is not valid UTF-8: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Snapshot is malformed or truncated: {e.msg} at offset {e.pos}") from e

    if not isinstance(document, dict):
        raise DecodeError("Snapshot document is not an object")
    if document.get("format") != SNAPSHOT_FORMAT:
        raise DecodeError(f"Unknown snapshot format: {document.get('format')!r}")
    if document.get("version") != SNAPSHOT_VERSION:
        raise DecodeError(f"Unsupported snapshot version: {document.get('version')!r}")

    entries = document.get("entries")
    if not isinstance(entries, list):
        raise DecodeError("Snapshot has no entry list")

    snapshot = OrderedSnapshot()
    previous = None
    for position, raw in enumerate(entries):
        name, value = _check_entry(position, raw)
        # Strictly ascending also rules out duplicates
        if previous is not None and compare_names(previous, name) >= 0:
            raise DecodeError(f"Entry {name!r} is out of order or duplicated", position)
        snapshot.add(name, value)
        previous = name

    return snapshot
