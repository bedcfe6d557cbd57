"""A byte buffer that either wraps an existing bytearray or owns a copy."""

from __future__ import annotations

import struct
from typing import Any


class BufferOverflowError(ValueError):
    """Raised when a read or write reaches past the end of a buffer."""


class WrapperBuffer:
    """Byte storage with offset-checked reads and writes.

    A ``bytearray`` given to the constructor is shared, not copied.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytearray | bytes | None = None) -> None:
        if data is None or isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data)

    @classmethod
    def copy(cls, data: Any) -> WrapperBuffer:
        """A buffer holding its own copy of ``data`` (bytes-like or buffer)."""
        if isinstance(data, WrapperBuffer):
            data = data.data() or b""
        return cls(bytearray(data))

    def allocate(self, size: int) -> None:
        """Replace the contents with ``size`` zero bytes."""
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._data = bytearray(size) if size else None

    def zero_initialize(self) -> None:
        if self._data is not None:
            self._data[:] = bytes(len(self._data))

    def write(self, data: Any, offset: int = 0) -> None:
        """Copy ``data`` into the buffer at ``offset``."""
        payload = bytes(data)
        end = offset + len(payload)
        if offset < 0 or end > self.size():
            raise BufferOverflowError(f"write of {len(payload)} bytes at {offset} exceeds size {self.size()}")
        if payload:
            self._data[offset:end] = payload

    def read(self, fmt: str, offset: int = 0) -> Any:
        """Unpack a :mod:`struct` format at ``offset``; one field comes back bare."""
        needed = struct.calcsize(fmt)
        if offset < 0 or offset + needed > self.size():
            raise BufferOverflowError(f"read of {needed} bytes at {offset} exceeds size {self.size()}")
        values = struct.unpack_from(fmt, self._data, offset)
        return values[0] if len(values) == 1 else values

    def destroy(self) -> None:
        """Release the storage, emptying it for every holder."""
        if self._data is not None:
            self._data.clear()
        self.reset()

    def reset(self) -> None:
        """Drop the reference to the storage without touching it."""
        self._data = None

    def __bool__(self) -> bool:
        return self._data is not None

    def _storage(self) -> bytearray:
        if self._data is None:
            raise IndexError("buffer holds no data")
        return self._data

    def __getitem__(self, index: int | slice) -> Any:
        return self._storage()[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:
        self._storage()[index] = value

    def data(self) -> bytearray | None:
        return self._data

    def size(self) -> int:
        return len(self._data) if self._data is not None else 0