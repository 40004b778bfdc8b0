"""Reading properties out of a serialized property block."""

from __future__ import annotations

import struct
from enum import Enum

from msstyle.identifiers import Identifier
from msstyle.property import (
    FIXED_SIZE_TYPES,
    HEADER_SIZE,
    SELF_NAMED_TYPES,
    StyleProperty,
    unpack_header,
)

_MAX_PADDING = 4


class ReadResult(Enum):
    """Outcome of reading one property."""

    OK = "ok"
    SKIPPED_BYTES = "skipped_bytes"
    UNKNOWN_TYPE = "unknown_type"
    BAD_PROPERTY = "bad_property"
    END = "end"


def _take(data: bytes, start: int, size: int) -> bytes:
    if size < 0 or start + size > len(data):
        raise ValueError(f"payload of {size} bytes at {start} runs past the end")
    return bytes(data[start:start + size])


class PropertyReader:
    """Reads properties whose class ids lie within ``num_classes``."""

    def __init__(self, num_classes: int) -> None:
        self.num_classes = num_classes

    def is_probably_valid_header(self, data: bytes, offset: int = 0) -> bool:
        """Range-check the header at ``offset`` without looking up its ids."""
        if offset < 0 or len(data) - offset < HEADER_SIZE:
            return False
        header = unpack_header(data, offset)
        if not StyleProperty(header).is_property_valid():
            return False
        if header.name_id == header.type_id and header.type_id in SELF_NAMED_TYPES:
            return True
        return 0 <= header.class_id <= self.num_classes

    def read_next_property(
        self, data: bytes, offset: int = 0
    ) -> tuple[ReadResult, StyleProperty | None, int]:
        """Read the property at or shortly after ``offset``.

        Returns the result, the property (``None`` when none was read) and the
        offset to continue reading from. More than four bytes before a valid
        header give ``SKIPPED_BYTES``; no valid header before the end gives
        ``END``; a payload running past the end gives ``BAD_PROPERTY``.
        """
        cursor = offset
        while True:
            if len(data) - cursor < HEADER_SIZE:
                return ReadResult.END, None, len(data)
            if self.is_probably_valid_header(data, cursor):
                break
            cursor += 1

        if cursor - offset > _MAX_PADDING:
            return ReadResult.SKIPPED_BYTES, None, cursor

        prop = StyleProperty(unpack_header(data, cursor))
        cursor += HEADER_SIZE
        try:
            return self._read_payload(data, cursor, prop)
        except ValueError:
            return ReadResult.BAD_PROPERTY, prop, cursor

    def _read_payload(
        self, data: bytes, cursor: int, prop: StyleProperty
    ) -> tuple[ReadResult, StyleProperty, int]:
        header = prop.header
        size = header.size_in_bytes
        type_id = header.type_id

        if type_id == Identifier.INTLIST:
            if size == 0:
                prop.data[0:4] = bytes(4)
            else:
                prop.data[0:4] = _take(data, cursor, 4)
                cursor += 4
                prop.bytes_after_header += 4
            count = prop.num_ints
            if count < 0:
                raise ValueError(f"negative integer count {count}")
            raw = _take(data, cursor, count * 4)
            prop.intlist = list(struct.unpack(f"<{count}i", raw))
            cursor += count * 4
            prop.bytes_after_header += count * 4
            return ReadResult.OK, prop, cursor

        if type_id == Identifier.COLORLIST:
            count = max(size, 0) // 4
            raw = _take(data, cursor, count * 4)
            prop.intlist = list(struct.unpack(f"<{count}i", raw))
            cursor += count * 4
            prop.bytes_after_header += size
            return ReadResult.OK, prop, cursor

        if type_id == Identifier.STRING:
            # the trailing null terminator is not consumed
            chars = max(max(size, 0) // 2 - 1, 0)
            raw = _take(data, cursor, chars * 2)
            prop.text = raw.decode("utf-16-le", "surrogatepass")
            cursor += chars * 2
            prop.bytes_after_header += size
            return ReadResult.OK, prop, cursor

        if type_id in FIXED_SIZE_TYPES:
            if header.short_flag == 0 and 0 < size <= len(prop.data):
                prop.data[0:size] = _take(data, cursor, size)
                cursor += size
                prop.bytes_after_header += size
            return ReadResult.OK, prop, cursor

        if header.short_flag == 0 and size > 0:
            prop.unknown = _take(data, cursor, size)
            cursor += size
            prop.bytes_after_header += size
        return ReadResult.UNKNOWN_TYPE, prop, cursor