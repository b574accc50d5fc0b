# src/dirscope/core/attributes.py
import os
import stat

from dirscope.models import AttributeFlags


def read_attributes(name: str, st: os.stat_result) -> AttributeFlags:
    """
    Derives the DOS-style flags for an entry from its stat result.

    Windows exposes the real flags through `st_file_attributes`. Elsewhere,
    read-only is a missing owner-write bit and hidden is a leading dot;
    archive and system have no POSIX counterpart and stay clear.
    """
    win_attrs = getattr(st, "st_file_attributes", None)
    if win_attrs is not None:
        return AttributeFlags(
            read_only=bool(win_attrs & stat.FILE_ATTRIBUTE_READONLY),
            archive=bool(win_attrs & stat.FILE_ATTRIBUTE_ARCHIVE),
            hidden=bool(win_attrs & stat.FILE_ATTRIBUTE_HIDDEN),
            system=bool(win_attrs & stat.FILE_ATTRIBUTE_SYSTEM),
        )

    return AttributeFlags(
        read_only=not (st.st_mode & stat.S_IWUSR),
        hidden=name.startswith("."),
    )


def format_attributes(flags: AttributeFlags) -> str:
    """Returns the fixed 4-character code, e.g. 'r-h-'."""
    return (
        ("r" if flags.read_only else "-")
        + ("a" if flags.archive else "-")
        + ("h" if flags.hidden else "-")
        + ("s" if flags.system else "-")
    )
