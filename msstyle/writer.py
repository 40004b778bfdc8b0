"""Serializing properties back into a property block."""

from __future__ import annotations

import struct
from collections.abc import Iterable

from msstyle.identifiers import Identifier
from msstyle.property import FIXED_SIZE_TYPES, StyleProperty

_ALIGNMENT = 8


def pad_to_multiple_of(buffer: bytearray, start: int, align: int) -> int:
    """Append zero bytes until ``len(buffer) - start`` is a multiple of ``align``.

    Returns the new length of ``buffer``.
    """
    if align <= 0:
        raise ValueError(f"alignment must be positive, got {align}")
    remainder = (len(buffer) - start) % align
    if remainder:
        buffer.extend(bytes(align - remainder))
    return len(buffer)


def _pack_ints(values: Iterable[int]) -> bytes:
    return b"".join(struct.pack("<I", value & 0xFFFFFFFF) for value in values)


def _fit(payload: bytes, size: int) -> bytes:
    if size <= 0:
        return b""
    return bytes(payload[:size]).ljust(size, b"\0")


def write_property(prop: StyleProperty) -> bytes:
    """Serialize ``prop``, padded to a multiple of eight bytes."""
    header = prop.header
    out = bytearray(header.to_bytes())
    type_id = header.type_id

    if type_id == Identifier.INTLIST:
        if header.size_in_bytes != 0:
            out += prop.data[0:4]
            out += _pack_ints(prop.intlist)
    elif type_id == Identifier.COLORLIST:
        out += _pack_ints(prop.intlist)
    elif type_id == Identifier.STRING:
        out += prop.text.encode("utf-16-le", "surrogatepass")
    elif type_id in FIXED_SIZE_TYPES:
        if header.short_flag == 0:
            out += _fit(prop.data, header.size_in_bytes)
    elif header.short_flag == 0:
        out += _fit(prop.unknown or b"", header.size_in_bytes)

    pad_to_multiple_of(out, 0, _ALIGNMENT)
    return bytes(out)