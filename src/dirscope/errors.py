# src/dirscope/errors.py
from pathlib import Path
from typing import Optional, Union


class DirscopeError(Exception):
    """Base class for errors raised by dirscope."""


class AccessError(DirscopeError):
    """A directory could not be listed, or one of its entries could not be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

    @classmethod
    def from_os_error(cls, path: Union[str, Path], error: OSError) -> "AccessError":
        return cls(path, error.strerror or str(error))


class DecodeError(DirscopeError):
    """Snapshot bytes are malformed or truncated."""

    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} (entry {position})"
        super().__init__(message)


class DuplicateKeyError(DirscopeError, KeyError):
    """A name that orders equal to an existing key was added to a snapshot."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Duplicate snapshot key: {self.name!r}"
