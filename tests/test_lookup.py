import pytest

from msstyle import enums
from msstyle.identifiers import Identifier
from msstyle.lookup import (
    find_enums,
    find_property_name,
    find_type_name,
    get_enum_as_string,
)


def test_find_enums_bgtype():
    assert find_enums(Identifier.BGTYPE) == enums.ENUM_BGTYPE


def test_content_alignment_uses_horizontal_alignment():
    assert find_enums(Identifier.CONTENTALIGNMENT) == find_enums(Identifier.HALIGN)
    assert find_enums(Identifier.HALIGN) == enums.ENUM_ALIGNMENT_H


@pytest.mark.parametrize("name_id", range(5110, 5123))
def test_high_contrast_range(name_id):
    assert find_enums(name_id) == enums.ENUM_HIGHCONTRASTTYPE


@pytest.mark.parametrize("name_id", [5109, 5123, Identifier.TEXTSHADOWTYPE, 0])
def test_find_enums_unknown_is_empty(name_id):
    assert find_enums(name_id) == ()


def test_get_enum_as_string_known_values():
    assert get_enum_as_string(Identifier.BGTYPE, 1) == "BORDERFILL"
    assert get_enum_as_string(Identifier.VALIGN, 2) == "BOTTOM"
    assert get_enum_as_string(Identifier.OFFSETTYPE, 12) == "BELOWLASTBUTTON"


def test_get_enum_as_string_matches_entries():
    for entry in enums.ENUM_OFFSET:
        assert get_enum_as_string(Identifier.OFFSETTYPE, entry.key) == entry.value


def test_get_enum_as_string_out_of_range():
    assert get_enum_as_string(Identifier.BGTYPE, len(enums.ENUM_BGTYPE)) is None
    assert get_enum_as_string(Identifier.BGTYPE, -1) is None


def test_get_enum_as_string_unknown_name():
    assert get_enum_as_string(Identifier.IMAGEFILE, 0) is None


def test_find_property_name():
    assert find_property_name(3001) == "IMAGEFILE"
    assert find_property_name(2201) == "TRANSPARENT"
    assert find_property_name(5110) == "BORDERCOLOR_HIGHCONTRAST"


def test_find_property_name_aliases_keep_first_name():
    assert find_property_name(601) == "DISPLAYNAME"
    assert find_property_name(1201) == "SIZINGBORDERWIDTH"


def test_find_property_name_unknown():
    assert find_property_name(12345) == "UNKNOWN"


def test_find_type_name():
    assert find_type_name(213) == "DISKSTREAM"
    assert find_type_name(203) == "BOOL"
    assert find_type_name(243) == "COMPOSEDIMAGETYPE"


def test_find_type_name_unknown():
    assert find_type_name(401) == "UNKNOWN"
    assert find_type_name(-5) == "UNKNOWN"