"""Name lookups for property ids, type ids and enumeration values."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from msstyle import enums
from msstyle.enums import EnumEntry
from msstyle.identifiers import Identifier
from msstyle.propinfo import DATATYPE_NAMES, PROPERTY_INFO

UNKNOWN = "UNKNOWN"

_ENUMS_BY_NAME: Mapping[int, tuple[EnumEntry, ...]] = MappingProxyType(
    {
        Identifier.BGTYPE: enums.ENUM_BGTYPE,
        Identifier.BORDERTYPE: enums.ENUM_BORDERTYPE,
        Identifier.FILLTYPE: enums.ENUM_FILLTYPE,
        Identifier.SIZINGTYPE: enums.ENUM_SIZINGTYPE,
        Identifier.HALIGN: enums.ENUM_ALIGNMENT_H,
        # content alignment shares its values with horizontal alignment
        Identifier.CONTENTALIGNMENT: enums.ENUM_ALIGNMENT_H,
        Identifier.VALIGN: enums.ENUM_ALIGNMENT_V,
        Identifier.OFFSETTYPE: enums.ENUM_OFFSET,
        Identifier.IMAGELAYOUT: enums.ENUM_IMAGELAYOUT,
        Identifier.ICONEFFECT: enums.ENUM_ICONEFFECT,
        Identifier.GLYPHTYPE: enums.ENUM_GLYPHTYPE,
        Identifier.IMAGESELECTTYPE: enums.ENUM_IMAGESELECT,
        Identifier.GLYPHFONTSIZINGTYPE: enums.ENUM_GLYPHFONTSCALING,
        Identifier.TRUESIZESCALINGTYPE: enums.ENUM_TRUESIZESCALING,
    }
)

_HIGH_CONTRAST_RANGE = range(
    Identifier.UNKNOWN_5110_HC, Identifier.UNKNOWN_5122_HC + 1
)


def find_enums(name_id: int) -> tuple[EnumEntry, ...]:
    """Return the enumeration values a property name uses; empty if none."""
    found = _ENUMS_BY_NAME.get(name_id)
    if found is not None:
        return found
    if name_id in _HIGH_CONTRAST_RANGE:
        return enums.ENUM_HIGHCONTRASTTYPE
    return ()


def get_enum_as_string(name_id: int, enum_value: int) -> str | None:
    """Return the display name of ``enum_value`` for ``name_id``, or ``None``."""
    entries = find_enums(name_id)
    if 0 <= enum_value < len(entries):
        return entries[enum_value].value
    return None


def find_property_name(name_id: int) -> str:
    """Return the name of a property name id, or ``"UNKNOWN"``."""
    info = PROPERTY_INFO.get(name_id)
    return info.name if info is not None else UNKNOWN


def find_type_name(type_id: int) -> str:
    """Return the name of a data type id, or ``"UNKNOWN"``."""
    return DATATYPE_NAMES.get(type_id, UNKNOWN)