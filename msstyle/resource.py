"""Image and atlas resources embedded in a visual style."""

from dataclasses import dataclass
from enum import IntEnum


class StyleResourceType(IntEnum):
    """Kind of embedded resource."""

    NONE = 0
    IMAGE = 1
    ATLAS = 2


@dataclass(frozen=True)
class StyleResource:
    """A resource blob with its name id and kind.

    Equal when name, kind, size and data all match; usable as a mapping key.
    """

    data: bytes | None = None
    size: int = 0
    name_id: int = 0
    type: StyleResourceType = StyleResourceType.IMAGE