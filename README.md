# heifbox

A pure-Python reader for the boxes of the ISO base media file format, the
container used by HEIF/HEIC images and MP4 media. It decodes the box tree
of a file into Python objects that you can inspect or print.

## Installation

```
pip install heifbox
```

The package has no runtime dependencies.

## Supported boxes

| Box    | Class    | Module                |
|--------|----------|-----------------------|
| `meta` | `META`   | `heifbox.meta`        |
| `pitm` | `PITM`   | `heifbox.pitm`        |
| `iloc` | `ILOC`   | `heifbox.iloc`        |
| `infe` | `INFE`   | `heifbox.infe`        |
| `iref` | `IREF`   | `heifbox.iref`        |
| `ipco` | `IPCO`   | `heifbox.ipco`        |
| `ipma` | `IPMA`   | `heifbox.ipma`        |
| `irot` | `IROT`   | `heifbox.properties`  |
| `ispe` | `ISPE`   | `heifbox.properties`  |
| `pixi` | `PIXI`   | `heifbox.properties`  |
| `mvhd` | `MVHD`   | `heifbox.mvhd`        |
| `mdhd` | `MDHD`   | `heifbox.mdhd`        |
| `mp4a` | `MP4A`   | `heifbox.mp4a`        |

The transformation matrix inside `mvhd` is decoded by `heifbox.matrix.Matrix`.

The plain container types `moov`, `trak`, `mdia`, `minf`, `stbl`, `dinf`,
`edts`, `udta`, `iprp`, `mvex`, `moof` and `traf` are read as
`heifbox.box.ContainerBox`, whose children are in its `boxes` list.

Any other box type is read as a generic `heifbox.box.Box`; its payload is
kept as raw bytes in its `data` attribute.

## Usage

Import the modules for the boxes you want decoded so that they register
themselves, then hand the bytes of a file to a `Parser`:

```python
from pathlib import Path

from heifbox.box import Parser, StringType
import heifbox.meta, heifbox.pitm, heifbox.iloc, heifbox.infe
import heifbox.iref, heifbox.ipco, heifbox.ipma, heifbox.properties

parser = Parser(StringType.NULL_TERMINATED)
root = parser.parse(Path("image.heic").read_bytes())

for box in root.boxes:
    print(box)
```

`Parser.parse` returns a `ContainerBox` holding the top-level boxes. Printing
a box writes its type, its displayable properties and its nested objects
(child boxes, items, entries, channels), indented.

### Looking things up

```python
meta = root.find("meta")
children = {child.box_type: child for child in meta.boxes}

primary = children["pitm"].item_id
location = children["iloc"].get_item(primary)
for extent in location.extents:
    print(extent.offset, extent.length)
```

Properties of an item are resolved through `ipma` and `ipco`:

```python
iprp = children["iprp"]
ipco = iprp.find("ipco")
ipma = iprp.find("ipma")

entry = ipma.get_entry(primary)
for prop in ipco.get_properties(entry):
    print(prop.box_type, prop.displayable_properties())
```

`get_item` and `get_entry` return `None` when no item has the given ID;
`IPCO.get_property` returns `None` for a property index of 0 or one past the
end of the container.

### Audio sample entries

`MP4A` reads the channel count, sample size and the 16.16 fixed-point sample
rate; `sample_rate` gives the rate as a float and `sample_rate_raw` the stored
value. Boxes nested inside an `mp4a` entry are not parsed.

### Strings

Some writers store strings inside `infe` as Pascal strings (a length byte
followed by the text) instead of NUL-terminated strings. Choose the style
with `StringType.PASCAL` or `StringType.NULL_TERMINATED` when you create the
`Parser`.

## Errors

Reading past the end of the data raises `EOFError`. A box header whose size
is smaller than the header itself raises `ValueError`.

## What it does not do

The package only reads box structure. It does not write or modify files,
does not decode image or audio data (including image items laid out as a
grid), and has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```