"""A single open file with C-stdio style operations."""

from __future__ import annotations

import logging
import os
from typing import BinaryIO, Optional, Union

__all__ = ["FileHandle"]

_log = logging.getLogger(__name__)

_FALLBACK_PERMISSION = "a+"
_WHENCES = (os.SEEK_SET, os.SEEK_CUR, os.SEEK_END)


def _binary_mode(permission: str) -> str:
    """Turn a stdio mode such as ``"r+"`` or ``"wb"`` into a binary Python mode."""
    if not permission or permission[0] not in "rwa":
        raise ValueError(f"invalid permission {permission!r}")
    extra = permission[1:]
    if any(ch not in "+bt" for ch in extra):
        raise ValueError(f"invalid permission {permission!r}")
    return permission[0] + ("+" if "+" in extra else "") + "b"


class FileHandle:
    """Wraps one file opened by name and permission, like an stdio stream.

    When the file cannot be opened with the requested permission it is first
    created with ``"a+"`` and the requested permission is tried once more.
    """

    def __init__(self) -> None:
        self.filename: Optional[str] = None
        self.permission: Optional[str] = None
        self._fp: Optional[BinaryIO] = None

    @property
    def is_open(self) -> bool:
        return self._fp is not None

    def _require(self) -> BinaryIO:
        if self._fp is None:
            raise ValueError("file is not open")
        return self._fp

    def open(self, filename: Union[str, os.PathLike], permission: str) -> None:
        """Open ``filename`` with the stdio-style ``permission``.

        Raises OSError when the file can neither be opened nor created.
        """
        if self._fp is not None:
            raise ValueError("a file is already open; close it first")
        mode = _binary_mode(permission)
        name = os.fspath(filename)
        try:
            fp = open(name, mode)
        except OSError as first_error:
            _log.warning("error opening file %s: %s", name, first_error)
            with open(name, _binary_mode(_FALLBACK_PERMISSION)):
                _log.info("created file %s", name)
            fp = open(name, mode)
        self._fp = fp
        self.filename = name
        self.permission = permission
        _log.info("opening file %s", name)

    def close(self) -> None:
        """Close the file."""
        fp = self._require()
        self._fp = None
        fp.close()

    def putc(self, c: Union[int, str]) -> int:
        """Write one byte and return the byte value written."""
        fp = self._require()
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("a single character is required")
            c = ord(c)
        value = c & 0xFF
        fp.write(bytes((value,)))
        return value

    def puts(self, s: str) -> int:
        """Write ``s`` (UTF-8, no newline added); return the number of bytes written."""
        fp = self._require()
        return fp.write(s.encode("utf-8"))

    def read(self, size: int, nmemb: int) -> bytes:
        """Read up to ``nmemb`` items of ``size`` bytes each."""
        if size < 0 or nmemb < 0:
            raise ValueError("size and nmemb must not be negative")
        fp = self._require()
        return fp.read(size * nmemb)

    def write(self, data: Union[bytes, bytearray, str]) -> int:
        """Write ``data`` and return the number of bytes written."""
        fp = self._require()
        if isinstance(data, str):
            data = data.encode("utf-8")
        return fp.write(data)

    def rewind(self) -> None:
        """Move back to the start of the file."""
        self._require().seek(0, os.SEEK_SET)

    def seek(self, whence: int, offset: int) -> int:
        """Move to ``offset`` relative to ``whence`` and return the new position."""
        if whence not in _WHENCES:
            raise ValueError(f"invalid whence {whence!r}")
        fp = self._require()
        position = fp.seek(offset, whence)
        _log.debug("at position %d", position)
        return position

    def fileno(self) -> int:
        """Operating-system file descriptor of the open file."""
        return self._require().fileno()

    def __enter__(self) -> "FileHandle":
        return self

    def __exit__(self, *args: object) -> None:
        if self._fp is not None:
            self.close()