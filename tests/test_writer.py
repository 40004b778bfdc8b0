import struct

import pytest

from msstyle.identifiers import Identifier
from msstyle.property import HEADER_SIZE, PropertyHeader, StyleProperty
from msstyle.reader import PropertyReader, ReadResult
from msstyle.writer import pad_to_multiple_of, write_property


def header(name_id, type_id, size, short_flag=0):
    return PropertyHeader(
        name_id=name_id, type_id=type_id, part_id=1, short_flag=short_flag, size_in_bytes=size
    ).to_bytes()


def read_one(data):
    result, prop, _ = PropertyReader(3).read_next_property(data)
    assert result in (ReadResult.OK, ReadResult.UNKNOWN_TYPE)
    return prop


def test_pad_appends_zeros():
    buffer = bytearray(b"abc")
    end = pad_to_multiple_of(buffer, 0, 8)
    assert end == len(buffer)
    assert buffer == bytearray(b"abc" + bytes(5))


def test_pad_relative_to_start():
    buffer = bytearray(b"xxabcdefgh")
    assert pad_to_multiple_of(buffer, 2, 8) == len(b"xxabcdefgh")


def test_pad_rejects_bad_alignment():
    with pytest.raises(ValueError):
        pad_to_multiple_of(bytearray(), 0, 0)


def test_int_property_occupies_forty_bytes():
    prop = StyleProperty(PropertyHeader(name_id=Identifier.IMAGECOUNT, part_id=1))
    prop.initialize(Identifier.INT, Identifier.IMAGECOUNT)
    prop.update_integer(9)
    raw = write_property(prop)
    assert len(raw) == 40
    assert len(raw) == prop.regular_property_size()
    assert raw[:HEADER_SIZE] == prop.header.to_bytes()
    assert struct.unpack_from("<i", raw, HEADER_SIZE)[0] == 9


@pytest.mark.parametrize(
    "data",
    [
        header(Identifier.IMAGECOUNT, Identifier.INT, 4) + struct.pack("<i", 5) + bytes(4),
        header(Identifier.ATLASRECT, Identifier.RECTTYPE, 16) + struct.pack("<4i", 1, 2, 3, 4),
        header(Identifier.TRANSITIONDURATIONS, Identifier.INTLIST, 16) + struct.pack("<4i", 3, -1, 2, 3),
        header(Identifier.SOMECOLORLIST, Identifier.COLORLIST, 8) + struct.pack("<2i", 7, 8),
        header(Identifier.ATLASIMAGE, Identifier.STREAM, 5) + b"abcde" + bytes(3),
        header(Identifier.GLYPHFONT, Identifier.FONT, 0x5C, short_flag=4),
    ],
)
def test_read_write_round_trip(data):
    assert write_property(read_one(data)) == data


def test_rect_occupies_regular_size():
    data = header(Identifier.ATLASRECT, Identifier.RECTTYPE, 16) + struct.pack("<4i", 1, 2, 3, 4)
    prop = read_one(data)
    assert len(write_property(prop)) == prop.regular_property_size()


def test_string_written_and_read_back():
    prop = StyleProperty(PropertyHeader(name_id=Identifier.TEXT, part_id=1))
    prop.initialize(Identifier.STRING, Identifier.TEXT)
    prop.text = "Hi"
    prop.header.size_in_bytes = (len(prop.text) + 1) * 2
    raw = write_property(prop)
    assert len(raw) % 8 == 0
    assert raw[HEADER_SIZE:HEADER_SIZE + 4] == "Hi".encode("utf-16-le")
    assert read_one(raw).text == "Hi"


def test_unknown_payload_padded_to_declared_size():
    prop = StyleProperty(
        PropertyHeader(name_id=Identifier.ATLASIMAGE, type_id=Identifier.STREAM, part_id=1, size_in_bytes=6)
    )
    prop.unknown = b"ab"
    raw = write_property(prop)
    assert raw[HEADER_SIZE:HEADER_SIZE + 6] == b"ab" + bytes(4)
    assert len(raw) % 8 == 0


def test_empty_intlist_writes_header_only():
    prop = StyleProperty(
        PropertyHeader(name_id=Identifier.TRANSITIONDURATIONS, type_id=Identifier.INTLIST, part_id=1)
    )
    prop.intlist = [1, 2]
    assert write_property(prop) == prop.header.to_bytes()