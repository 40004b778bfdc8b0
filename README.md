# msstyle

A pure-Python library for the property records stored inside Windows visual
style files (`.msstyles`). It decodes property records from raw bytes, gives
names to their numeric identifiers, lets you change their values with type
checks, and encodes them back into the binary layout, padded to eight bytes.

It has no dependencies outside the standard library.

## Reading properties

`msstyle.reader.PropertyReader` reads one record at a time from a property
block. It is built with the number of classes in the style; headers whose
class id is beyond that are not accepted.

```python
from msstyle.reader import PropertyReader, ReadResult

reader = PropertyReader(num_classes)
offset = 0
properties = []
while True:
    result, prop, offset = reader.read_next_property(data, offset)
    if result is ReadResult.END:
        break
    if result is ReadResult.BAD_PROPERTY:
        raise ValueError(f"bad property before offset {offset}")
    if prop is not None:  # None when SKIPPED_BYTES
        properties.append(prop)
```

`read_next_property` returns the result, the property (or `None`) and the
offset to continue from:

- `OK`: a property of a known type was read.
- `UNKNOWN_TYPE`: the header was valid but the type is unknown; its payload is
  kept as raw bytes in `prop.unknown`.
- `SKIPPED_BYTES`: more than four bytes had to be skipped to find the next
  valid header; continue from the returned offset.
- `BAD_PROPERTY`: the payload runs past the end of the data.
- `END`: no valid header remains.

`is_probably_valid_header(data, offset)` performs only the range checks.

## Inspecting and editing properties

A `msstyle.property.StyleProperty` has a `header` (a `PropertyHeader` with
`name_id`, `type_id`, `class_id`, `part_id`, `state_id`, `short_flag`,
`reserved` and `size_in_bytes`) and its payload: the inline `data` block,
`intlist`, `text` or `unknown`.

```python
print(prop.lookup_name(), prop.lookup_type_name(), prop.value_as_string())
```

Values are changed with `update_integer`, `update_size`, `update_enum`,
`update_boolean`, `update_color`, `update_margin`, `update_rectangle`,
`update_position`, `update_image_link` and `update_font`. Each raises
`ValueError` if the property does not have the matching type.
`update_integer_unchecked` writes an integer whatever the type.

Two properties compare equal when their name id, type id and displayed value
match.

## Writing properties

```python
from msstyle.identifiers import Identifier
from msstyle.property import StyleProperty
from msstyle.writer import write_property

prop = StyleProperty()
prop.initialize(Identifier.COLOR, Identifier.BORDERCOLOR)
prop.update_color(255, 0, 0)
prop.value_as_string()      # "255, 0, 0"
blob = write_property(prop) # 40 bytes: header, payload, zero padding
```

`pad_to_multiple_of(buffer, start, align)` appends zero bytes to a
`bytearray` and returns its new length.

## Organizing properties

`msstyle.tree` provides `StyleClass`, `StylePart` and `StyleState`. A class
holds parts keyed by part id, a part holds states keyed by state id, and a
state holds its properties in order. `add_part` and `add_state` keep an
existing entry with the same id and return the one held. Iterating a class or
a part yields its children in ascending id order; `StyleState.sort_properties`
orders properties by name id.

## Lookups

```python
from msstyle.lookup import find_enums, find_property_name, find_type_name, get_enum_as_string

find_property_name(3001)        # "IMAGEFILE"
find_type_name(204)             # "COLOR"
get_enum_as_string(4001, 1)     # "BORDERFILL"
```

Unknown ids give `"UNKNOWN"`; an unknown enumeration value gives `None`.
`msstyle.propinfo` holds `PROPERTY_INFO`, `DATATYPE_NAMES` and
`find_property_info`, `msstyle.identifiers` the `Identifier` and `Platform`
enumerations, and `msstyle.enums` the enumeration value tables.

`msstyle.resource` has `StyleResource` and `StyleResourceType` (`NONE`,
`IMAGE`, `ATLAS`), a hashable record of an embedded image or atlas.

## What it does not do

The package works on property records only. It does not open `.msstyles`
files or extract or write their PE resources, does not decode the class map
or build a whole style from it, does not handle string tables, and does not
replace embedded images. Supply the property bytes yourself and store the
written bytes with a PE resource tool of your choice.