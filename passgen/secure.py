"""
Secret-handling helpers.

Python strings are immutable and cannot be scrubbed, so every buffer that
holds password or charset characters is a ``bytearray`` owned by a
``SecretBuffer``. Buffers are overwritten with zero bytes through
``ctypes.memset`` when they go out of scope.
"""

from __future__ import annotations

import ctypes
from typing import Iterable


def wipe(buffer: bytearray) -> None:
    """
    Overwrite a bytearray in place with zero bytes.

    memset runs outside the interpreter, so the write cannot be skipped
    the way an unused Python-level assignment loop might be.
    """
    size = len(buffer)
    if not size:
        return

    raw = (ctypes.c_char * size).from_buffer(buffer)
    try:
        ctypes.memset(ctypes.addressof(raw), 0, size)
    finally:
        # Release the buffer export so the bytearray can be resized again.
        del raw


class SecretBuffer:
    """
    Exclusively owned, fixed-size byte buffer that is zeroed on release.

    Use as a context manager; the buffer is wiped on every exit path,
    including exceptions raised while it is being filled.
    """

    def __init__(self, size: int = 0) -> None:
        # Marked closed until allocation succeeds so __del__ is a no-op
        # if bytearray() raises MemoryError.
        self._closed = True
        self._data = bytearray(size)
        self._closed = False

    @classmethod
    def concat(cls, parts: Iterable[bytes]) -> "SecretBuffer":
        """
        Build a buffer holding the concatenation of parts, copied directly
        into the secret storage without an intermediate joined object.
        """
        parts = list(parts)
        buf = cls(sum(len(part) for part in parts))
        offset = 0
        for part in parts:
            buf._data[offset : offset + len(part)] = part
            offset += len(part)
        return buf

    # --- public API ---

    @property
    def data(self) -> bytearray:
        """The underlying storage. All zeros once the buffer is closed."""
        return self._data

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Wipe the buffer. Safe to call more than once."""
        if self._closed:
            return
        wipe(self._data)
        self._closed = True

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._data[index] = value

    def __enter__(self) -> "SecretBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    def __repr__(self) -> str:
        # Never expose contents.
        state = "closed" if self._closed else "open"
        return f"<SecretBuffer size={len(self._data)} {state}>"
