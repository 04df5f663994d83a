"""Byte-buffer primitives: filling, searching, comparing, copying, resizing.

Buffers are ``bytearray`` objects, or writable ``memoryview`` objects over
bytes. Read-only arguments may be any bytes-like object. Sizes are checked
against the buffers they apply to, and an out-of-range size raises
``ValueError`` rather than touching memory past the end.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_size(size: int, *buffers: ReadableBuffer) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    for buffer in buffers:
        if size > len(buffer):
            raise ValueError(
                f"size {size} exceeds buffer length {len(buffer)}"
            )


def memset(block: Buffer, value: int, size: int) -> Buffer:
    """Set the first ``size`` bytes of ``block`` to ``value`` and return ``block``.

    Only the low eight bits of ``value`` are used.
    """
    _check_size(size, block)
    block[:size] = bytes([value & 0xFF]) * size
    return block


def bzero(block: Buffer, size: int) -> Buffer:
    """Set the first ``size`` bytes of ``block`` to zero and return ``block``."""
    return memset(block, 0, size)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer large enough for ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(block: ReadableBuffer, value: int, size: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within the first
    ``size`` bytes of ``block``, or ``None`` if there is none.

    Only the low eight bits of ``value`` are used.
    """
    _check_size(size, block)
    index = bytes(block[:size]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, size: int) -> int:
    """Compare the first ``size`` bytes of two buffers.

    Returns 0 when they match, otherwise the difference between the first
    pair of bytes that differ, taken as unsigned values.
    """
    _check_size(size, first, second)
    for a, b in zip(bytes(first[:size]), bytes(second[:size])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, size: int) -> Buffer:
    """Copy the first ``size`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_size(size, dest, src)
    dest[:size] = bytes(src[:size])
    return dest


def memmove(block: Buffer, dest_offset: int, src_offset: int, size: int) -> Buffer:
    """Copy ``size`` bytes within ``block`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns ``block``.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    end = max(dest_offset, src_offset) + size
    if end > len(block):
        raise ValueError(f"range ends at {end}, past buffer length {len(block)}")
    block[dest_offset:dest_offset + size] = bytes(block[src_offset:src_offset + size])
    return block


def realloc(
    block: Optional[ReadableBuffer], old_size: int, new_size: int
) -> Optional[ReadableBuffer]:
    """Resize a buffer of ``old_size`` bytes to ``new_size`` bytes.

    A ``new_size`` of zero releases the buffer and gives ``None``. An
    unchanged size gives ``block`` itself. Otherwise a new zero-filled buffer
    is returned holding as many leading bytes of ``block`` as fit.
    """
    if old_size < 0 or new_size < 0:
        raise ValueError("sizes must not be negative")
    if new_size == 0:
        return None
    if new_size == old_size:
        return block
    resized = bytearray(new_size)
    if block is not None:
        keep = min(old_size, new_size)
        _check_size(keep, block)
        resized[:keep] = bytes(block[:keep])
    return resized