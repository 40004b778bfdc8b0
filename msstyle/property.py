"""A single style property: its header, payload and display helpers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from msstyle.identifiers import Identifier
from msstyle.lookup import find_property_name, find_type_name, get_enum_as_string

_HEADER_FORMAT = struct.Struct("<8i")

HEADER_SIZE = _HEADER_FORMAT.size
"""Size in bytes of a serialized property header."""

DATA_SIZE = 16
"""Size in bytes of the inline payload of fixed-size properties."""

FIXED_SIZE_TYPES = frozenset(
    {
        Identifier.FILENAME,
        Identifier.FILENAME_LITE,
        Identifier.DISKSTREAM,
        Identifier.FONT,
        Identifier.INT,
        Identifier.SIZE,
        Identifier.BOOLTYPE,
        Identifier.COLOR,
        Identifier.ENUM,
        Identifier.POSITION,
        Identifier.HIGHCONTRASTCOLORTYPE,
        Identifier.RECTTYPE,
        Identifier.MARGINS,
    }
)
"""Types whose payload fits in the inline data block."""

SELF_NAMED_TYPES = frozenset(
    {Identifier.COLOR, Identifier.FONT, Identifier.DISKSTREAM, Identifier.STREAM}
)
"""Types that also appear as their own property name id."""

_INITIAL_SIZES = {
    Identifier.ENUM: 0x4,
    Identifier.INT: 0x4,
    Identifier.BOOLTYPE: 0x4,
    Identifier.COLOR: 0x4,
    Identifier.MARGINS: 0x10,
    Identifier.FILENAME: 0x10,
    Identifier.SIZE: 0x4,
    Identifier.POSITION: 0x8,
    Identifier.RECTTYPE: 0x10,
    Identifier.FONT: 0x5C,
}

_REGULAR_SIZES = {
    Identifier.FILENAME: 32,
    Identifier.DISKSTREAM: 32,
    Identifier.FONT: 32,
    Identifier.INT: 40,
    Identifier.SIZE: 40,
    Identifier.BOOLTYPE: 40,
    Identifier.COLOR: 40,
    Identifier.RECTTYPE: 48,
    Identifier.MARGINS: 48,
    Identifier.ENUM: 40,
    Identifier.POSITION: 40,
    Identifier.HIGHCONTRASTCOLORTYPE: 40,
}


@dataclass
class PropertyHeader:
    """The fixed 32-byte header in front of every property."""

    name_id: int = 0
    type_id: int = 0
    class_id: int = 0
    part_id: int = 0
    state_id: int = 0
    short_flag: int = 0
    reserved: int = 0
    size_in_bytes: int = 0

    def to_bytes(self) -> bytes:
        """Serialize the header as eight little-endian 32-bit integers."""
        return _HEADER_FORMAT.pack(
            self.name_id,
            self.type_id,
            self.class_id,
            self.part_id,
            self.state_id,
            self.short_flag,
            self.reserved,
            self.size_in_bytes,
        )


def unpack_header(data: bytes, offset: int = 0) -> PropertyHeader:
    """Read a property header from ``data`` at ``offset``."""
    if offset < 0 or len(data) - offset < HEADER_SIZE:
        raise ValueError(
            f"need {HEADER_SIZE} bytes for a property header at offset {offset}"
        )
    return PropertyHeader(*_HEADER_FORMAT.unpack_from(data, offset))


@dataclass(eq=False)
class StyleProperty:
    """A property with its header and decoded payload.

    ``data`` holds the inline payload block shared by the fixed-size types;
    list, string and opaque payloads live in ``intlist``, ``text`` and
    ``unknown``.
    """

    header: PropertyHeader = field(default_factory=PropertyHeader)
    data: bytearray = field(default_factory=lambda: bytearray(DATA_SIZE))
    intlist: list[int] = field(default_factory=list)
    text: str = ""
    unknown: bytes | None = None
    bytes_after_header: int = 0

    def __post_init__(self) -> None:
        self.data = bytearray(self.data).ljust(DATA_SIZE, b"\0")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleProperty):
            return NotImplemented
        return (
            self.header.name_id == other.header.name_id
            and self.header.type_id == other.header.type_id
            and self.value_as_string() == other.value_as_string()
        )

    # -- payload helpers ---------------------------------------------------

    def _int(self, index: int) -> int:
        return struct.unpack_from("<i", self.data, index * 4)[0]

    def _set_ints(self, *values: int) -> None:
        try:
            struct.pack_into(f"<{len(values)}i", self.data, 0, *values)
        except struct.error as exc:
            raise ValueError(f"value out of 32-bit range: {values}") from exc

    def _require_type(self, *types: Identifier) -> None:
        if self.header.type_id not in types:
            expected = ", ".join(t.name for t in types)
            raise ValueError(
                f"property has type {self.header.type_id}, expected {expected}"
            )

    @property
    def num_ints(self) -> int:
        """Element count stored in an integer-list payload."""
        return self._int(0)

    @property
    def resource_id(self) -> int:
        """Resource id referenced by image, atlas and font properties."""
        return self.header.short_flag

    # -- inspection --------------------------------------------------------

    def is_property_valid(self) -> bool:
        """Range-check the header ids; unknown ids may still pass."""
        header = self.header
        if not Identifier.ENUM <= header.type_id < Identifier.COLORSCHEMES:
            return False
        if header.name_id == header.type_id and header.type_id in SELF_NAMED_TYPES:
            return True
        if not Identifier.COLORSCHEMES <= header.name_id <= 25000:
            return False
        if not 0 <= header.part_id <= 199:
            return False
        if not 0 <= header.state_id <= 199:
            return False
        return True

    def regular_property_size(self) -> int:
        """Size in bytes the property normally occupies, padding included."""
        type_id = self.header.type_id
        if type_id == Identifier.INTLIST:
            return 20 + 12 + 4 + self.num_ints * 4
        if type_id == Identifier.STRING:
            return 20 + 8 + 4 + self.header.size_in_bytes
        return _REGULAR_SIZES.get(type_id, 40)

    def lookup_name(self) -> str:
        """Name of the property's name id, or ``"UNKNOWN"``."""
        return find_property_name(self.header.name_id)

    def lookup_type_name(self) -> str:
        """Name of the property's type id, or ``"UNKNOWN"``."""
        return find_type_name(self.header.type_id)

    def value_as_string(self) -> str:
        """Render the value for display."""
        type_id = self.header.type_id
        if type_id in (Identifier.ENUM, Identifier.HIGHCONTRASTCOLORTYPE):
            name = get_enum_as_string(self.header.name_id, self._int(0))
            return name if name is not None else "UNKNOWN ENUM"
        if type_id == Identifier.STRING:
            return self.text
        if type_id in (Identifier.INT, Identifier.SIZE):
            return str(self._int(0))
        if type_id == Identifier.BOOLTYPE:
            return "true" if self._int(0) > 0 else "false"
        if type_id == Identifier.COLOR:
            return f"{self.data[0]}, {self.data[1]}, {self.data[2]}"
        if type_id in (Identifier.MARGINS, Identifier.RECTTYPE):
            return ", ".join(str(self._int(i)) for i in range(4))
        if type_id in (Identifier.FILENAME, Identifier.DISKSTREAM, Identifier.FONT):
            return str(self.header.short_flag)
        if type_id == Identifier.POSITION:
            return f"{self._int(0)}, {self._int(1)}"
        if type_id == Identifier.INTLIST:
            count = self.num_ints
            if count >= 3 and len(self.intlist) >= 3:
                first, second, third = self.intlist[:3]
                return f"Len: {count}, Values: {first}, {second}, {third}, ..."
            return f"Len: {count}, Values omitted"
        return "Unsupported"

    # -- modification ------------------------------------------------------

    def initialize(self, type_id: int, name_id: int) -> None:
        """Set the ids and the payload size that the type uses."""
        self.header.name_id = int(name_id)
        self.header.type_id = int(type_id)
        size = _INITIAL_SIZES.get(type_id)
        if size is not None:
            self.header.size_in_bytes = size

    def update_image_link(self, image_id: int) -> None:
        """Point an image or atlas property at another resource id."""
        self._require_type(Identifier.FILENAME, Identifier.DISKSTREAM)
        self.header.short_flag = image_id

    def update_integer(self, value: int) -> None:
        """Set the value of an integer property."""
        self._require_type(Identifier.INT)
        self._set_ints(value)

    def update_integer_unchecked(self, value: int) -> None:
        """Store an integer in the payload whatever the property type."""
        self._set_ints(value)

    def update_size(self, size: int) -> None:
        """Set the value of a size property."""
        self._require_type(Identifier.SIZE)
        self._set_ints(size)

    def update_enum(self, value: int) -> None:
        """Set the value of an enumeration property."""
        self._require_type(Identifier.ENUM)
        self._set_ints(value)

    def update_boolean(self, value: bool) -> None:
        """Set the value of a boolean property."""
        self._require_type(Identifier.BOOLTYPE)
        self._set_ints(1 if value else 0)

    def update_color(self, r: int, g: int, b: int) -> None:
        """Set the red, green and blue channels of a color property."""
        self._require_type(Identifier.COLOR)
        self.data[0:3] = bytes((r, g, b))

    def update_rectangle(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set the edges of a rectangle property."""
        self._require_type(Identifier.RECTTYPE)
        self._set_ints(left, top, right, bottom)

    def update_margin(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set the edges of a margins property."""
        self._require_type(Identifier.MARGINS)
        self._set_ints(left, top, right, bottom)

    def update_position(self, x: int, y: int) -> None:
        """Set the coordinates of a position property."""
        self._require_type(Identifier.POSITION)
        self._set_ints(x, y)

    def update_font(self, font_id: int) -> None:
        """Point a font property at another font resource id."""
        self._require_type(Identifier.FONT)
        self.header.short_flag = font_id