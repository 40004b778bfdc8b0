"""Names for the values of enumeration-typed style properties."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnumEntry:
    """One value of an enumeration and its display name."""

    key: int
    value: str


def _entries(*names: str) -> tuple[EnumEntry, ...]:
    return tuple(EnumEntry(key, name) for key, name in enumerate(names))


ENUM_BGTYPE = _entries("IMAGEFILE", "BORDERFILL", "NONE")

ENUM_IMAGELAYOUT = _entries("VERTICAL", "HORIZONTAL")

ENUM_BORDERTYPE = _entries("RECT", "ROUNDRECT", "ELLIPSE")

ENUM_FILLTYPE = _entries(
    "SOLID", "VERTGRADIENT", "HORIZONTALGRADIENT", "RADIALGRADIENT", "TILEIMAGE"
)

ENUM_SIZINGTYPE = _entries("TRUESIZE", "STRETCH", "TILE")

ENUM_ALIGNMENT_H = _entries("LEFT", "RIGHT", "CENTER")

ENUM_ALIGNMENT_V = _entries("TOP", "CENTER", "BOTTOM")

ENUM_OFFSET = _entries(
    "TOPLEFT",
    "TOPRIGHT",
    "TOPMIDDLE",
    "BOTTOMLEFT",
    "BOTTOMRIGHT",
    "BOTTOMMIDDLE",
    "MIDDLERIGHT",
    "LEFTOFCAPTION",
    "RIGHTOFCAPTION",
    "LEFTOFLASTBUTTON",
    "RIGHTOFLASTBUTTON",
    "ABOVELASTBUTTON",
    "BELOWLASTBUTTON",
)

ENUM_ICONEFFECT = _entries("NONE", "GLOW", "SHADOW", "PULSE", "ALPHA")

ENUM_TEXTSHADOW = _entries("NONE", "SINGLE", "CONTINUOUS")

ENUM_GLYPHTYPE = _entries("NONE", "IMAGEGLYPH", "FONTGLYPH")

ENUM_IMAGESELECT = _entries("NONE", "SIZE", "DPI")

ENUM_TRUESIZESCALING = _entries("NONE", "SIZE", "DPI")

ENUM_GLYPHFONTSCALING = _entries("NONE", "SIZE", "DPI")

ENUM_HIGHCONTRASTTYPE = _entries(
    "ACTIVECAPTION",
    "CAPTIONTEXT",
    "BTNFACE",
    "BTNTEXT",
    "DESKTOP",
    "GRAYTEXT",
    "HOTLIGHT",
    "INACTIVECAPTION",
    "INACTIVECAPTIONTEXT",
    "HIGHLIGHT",
    "HIGHLIGHTTEXT",
    "WINDOW",
    "WINDOWTEXT",
)