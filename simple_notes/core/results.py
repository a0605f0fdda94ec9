from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, TypeAlias, Union


@dataclass(frozen=True)
class Loaded:
    path: Path
    text: str
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Saved:
    path: Path
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Revealed:
    """`target` is the file itself when selected, otherwise its parent folder."""
    path: Path
    target: Path
    selected: bool
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class NotFound:
    """Nothing saved at `path` yet. Expected, not an error for the user."""
    path: Path
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class Cancelled:
    """The user declined to pick a location."""
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class ReadError:
    path: Path
    reason: str
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class WriteError:
    path: Path | None
    reason: str
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class RevealError:
    path: Path
    reason: str
    ok: ClassVar[bool] = False


LoadResult: TypeAlias = Union[Loaded, NotFound, ReadError]
SaveResult: TypeAlias = Union[Saved, WriteError]
SaveAsResult: TypeAlias = Union[Saved, Cancelled, WriteError]
RevealResult: TypeAlias = Union[Revealed, RevealError]


def describe_os_error(exc: BaseException) -> str:
    """Short human-readable reason for a failed I/O call."""
    if isinstance(exc, UnicodeDecodeError):
        return f"not valid UTF-8 ({exc.reason})"
    if isinstance(exc, UnicodeEncodeError):
        return f"cannot be encoded as UTF-8 ({exc.reason})"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc) or exc.__class__.__name__
