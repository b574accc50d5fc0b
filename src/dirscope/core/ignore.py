# src/dirscope/core/ignore.py
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from dirscope.config import DEFAULT_IGNORE_PATTERNS

logger = logging.getLogger(__name__)


def load_ignore_spec(
    ignore_file: Optional[Path] = None, extra_patterns: Optional[Iterable[str]] = None
) -> pathspec.PathSpec:
    """
    Builds a gitwildmatch PathSpec from an optional ignore file plus any
    patterns given on the command line. Unparseable rules degrade to an
    empty spec with a warning.
    """
    lines: List[str] = list(DEFAULT_IGNORE_PATTERNS)

    if ignore_file is not None:
        try:
            with open(ignore_file, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())
        except OSError as e:
            logger.warning("Could not read ignore file %s: %s", ignore_file, e)

    if extra_patterns:
        lines.extend(extra_patterns)

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception as e:
        logger.warning("Error parsing ignore rules: %s", e)
        return pathspec.PathSpec.from_lines("gitwildmatch", [])


def is_path_ignored(spec: Optional[pathspec.PathSpec], rel_path: Path, is_directory: bool = False) -> bool:
    """Matches a root-relative path; directories get a trailing slash so 'build/' rules apply."""
    if spec is None:
        return False
    candidate = rel_path.as_posix()
    if is_directory:
        candidate += "/"
    return spec.match_file(candidate)
