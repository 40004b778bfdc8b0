"""The class, part and state hierarchy that holds style properties."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from msstyle.property import StyleProperty


@dataclass(eq=False)
class StyleState:
    """A state of a part and the properties defined for it, in order."""

    state_id: int = 0
    state_name: str = ""
    properties: list[StyleProperty] = field(default_factory=list)

    def add_property(self, prop: StyleProperty) -> StyleProperty:
        """Append ``prop`` and return it."""
        self.properties.append(prop)
        return prop

    def find_property_by_value(self, prop: StyleProperty) -> StyleProperty | None:
        """Return the first property equal in name, type and value to ``prop``."""
        return next((candidate for candidate in self.properties if candidate == prop), None)

    def remove_property(self, prop: StyleProperty) -> None:
        """Remove ``prop`` itself; a property not held here is ignored."""
        for index, candidate in enumerate(self.properties):
            if candidate is prop:
                del self.properties[index]
                return

    def sort_properties(self) -> None:
        """Order the properties by ascending name id, keeping ties stable."""
        self.properties.sort(key=lambda p: p.header.name_id)

    def __iter__(self) -> Iterator[StyleProperty]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __getitem__(self, index: int) -> StyleProperty:
        return self.properties[index]


@dataclass(eq=False)
class StylePart:
    """A part of a class and its states, keyed by state id."""

    part_id: int = 0
    part_name: str = ""
    states: dict[int, StyleState] = field(default_factory=dict)

    def add_state(self, state: StyleState) -> StyleState:
        """Add ``state`` unless its id is taken; return the state held for that id."""
        return self.states.setdefault(state.state_id, state)

    def find_state(self, state_id: int) -> StyleState | None:
        """Return the state with ``state_id``, or ``None``."""
        return self.states.get(state_id)

    def __iter__(self) -> Iterator[StyleState]:
        """Yield the states in ascending id order."""
        for state_id in sorted(self.states):
            yield self.states[state_id]

    def __len__(self) -> int:
        return len(self.states)


@dataclass(eq=False)
class StyleClass:
    """A style class and its parts, keyed by part id."""

    class_id: int = 0
    class_name: str = ""
    parts: dict[int, StylePart] = field(default_factory=dict)

    def add_part(self, part: StylePart) -> StylePart:
        """Add ``part`` unless its id is taken; return the part held for that id."""
        return self.parts.setdefault(part.part_id, part)

    def find_part(self, part_id: int) -> StylePart | None:
        """Return the part with ``part_id``, or ``None``."""
        return self.parts.get(part_id)

    def __iter__(self) -> Iterator[StylePart]:
        """Yield the parts in ascending id order."""
        for part_id in sorted(self.parts):
            yield self.parts[part_id]

    def __len__(self) -> int:
        return len(self.parts)