import struct

from msstyle.identifiers import Identifier
from msstyle.property import HEADER_SIZE, PropertyHeader
from msstyle.reader import PropertyReader, ReadResult


def header(name_id, type_id, size, short_flag=0, class_id=0, part_id=1, state_id=0):
    return PropertyHeader(
        name_id=name_id,
        type_id=type_id,
        class_id=class_id,
        part_id=part_id,
        state_id=state_id,
        short_flag=short_flag,
        size_in_bytes=size,
    ).to_bytes()


def int_property(value):
    return header(Identifier.IMAGECOUNT, Identifier.INT, 4) + struct.pack("<i", value) + bytes(4)


def test_read_int_property():
    data = int_property(5)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.value_as_string() == "5"
    assert offset == HEADER_SIZE + 4
    assert prop.bytes_after_header == 4
    assert prop.header.part_id == 1


def test_small_padding_is_skipped_silently():
    data = bytes(4) + int_property(6)
    result, prop, _ = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.value_as_string() == "6"


def test_large_gap_reports_skipped_bytes():
    data = bytes(8) + int_property(6)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.SKIPPED_BYTES
    assert prop is None
    assert offset == 8
    result, prop, _ = PropertyReader(3).read_next_property(data, offset)
    assert result is ReadResult.OK


def test_end_of_data():
    reader = PropertyReader(3)
    assert reader.read_next_property(b"")[0] is ReadResult.END
    result, prop, offset = reader.read_next_property(bytes(40))
    assert result is ReadResult.END
    assert prop is None
    assert offset == 40


def test_read_string_property():
    text = "Hi".encode("utf-16-le") + bytes(2)
    data = header(Identifier.TEXT, Identifier.STRING, len(text)) + text + bytes(2)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.text == "Hi"
    assert prop.value_as_string() == "Hi"
    assert prop.bytes_after_header == len(text)
    # the terminator is left for the next read to skip
    assert offset == HEADER_SIZE + len(text) - 2


def test_read_intlist_property():
    payload = struct.pack("<4i", 3, 1, 2, 3)
    data = header(Identifier.TRANSITIONDURATIONS, Identifier.INTLIST, len(payload)) + payload
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.intlist == [1, 2, 3]
    assert prop.num_ints == 3
    assert offset == HEADER_SIZE + len(payload)
    assert prop.bytes_after_header == len(payload)


def test_read_empty_intlist():
    data = header(Identifier.TRANSITIONDURATIONS, Identifier.INTLIST, 0)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.intlist == []
    assert offset == HEADER_SIZE


def test_read_colorlist_property():
    payload = struct.pack("<2i", 0x00112233, 0x00445566)
    data = header(Identifier.SOMECOLORLIST, Identifier.COLORLIST, len(payload)) + payload
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.intlist == [0x00112233, 0x00445566]
    assert offset == len(data)


def test_unknown_type_keeps_opaque_payload():
    payload = b"abcde"
    data = header(Identifier.ATLASIMAGE, Identifier.STREAM, len(payload)) + payload + bytes(3)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.UNKNOWN_TYPE
    assert prop.unknown == payload
    assert offset == HEADER_SIZE + len(payload)


def test_truncated_intlist_is_bad():
    payload = struct.pack("<2i", 5, 1)
    data = header(Identifier.TRANSITIONDURATIONS, Identifier.INTLIST, 24) + payload
    result, prop, _ = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.BAD_PROPERTY
    assert prop.header.type_id == Identifier.INTLIST


def test_font_with_short_flag_has_no_payload():
    data = header(Identifier.GLYPHFONT, Identifier.FONT, 0x5C, short_flag=12)
    result, prop, offset = PropertyReader(3).read_next_property(data)
    assert result is ReadResult.OK
    assert prop.value_as_string() == "12"
    assert offset == HEADER_SIZE


def test_header_validity_checks_class_range():
    reader = PropertyReader(3)
    assert reader.is_probably_valid_header(header(Identifier.IMAGECOUNT, Identifier.INT, 4, class_id=3))
    assert not reader.is_probably_valid_header(header(Identifier.IMAGECOUNT, Identifier.INT, 4, class_id=4))
    assert reader.is_probably_valid_header(header(Identifier.COLOR, Identifier.COLOR, 4, class_id=99))
    assert not reader.is_probably_valid_header(header(Identifier.IMAGECOUNT, Identifier.INT, 4)[:-1])