"""Core box model: binary reader, displayable objects, boxes and the parser."""

from __future__ import annotations

import enum
import struct
from functools import partial
from typing import Callable, Iterable, Sequence

__all__ = [
    "StringType",
    "BinaryReader",
    "Displayable",
    "Box",
    "FullBox",
    "ContainerBox",
    "Parser",
    "register_box",
    "create_box",
]


class StringType(enum.Enum):
    """How strings are encoded inside box payloads."""

    NULL_TERMINATED = "null-terminated"
    PASCAL = "pascal"


class BinaryReader:
    """Sequential big-endian reader over an in-memory byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read(self, size: int | None = None) -> bytes:
        """Read ``size`` bytes, or everything left when ``size`` is None."""
        if size is None:
            size = self.remaining
        if size < 0:
            raise ValueError(f"negative read size: {size}")
        if size > self.remaining:
            raise EOFError(
                f"cannot read {size} bytes, only {self.remaining} left"
            )
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def peek(self, size: int, offset: int = 0) -> bytes:
        """Return bytes at ``offset`` from the current position without consuming them."""
        start = self._pos + offset
        if offset < 0 or size < 0 or start + size > len(self._data):
            raise EOFError(f"cannot peek {size} bytes at offset {offset}")
        return self._data[start:start + size]

    def _unpack(self, fmt: str, size: int) -> int:
        return struct.unpack(fmt, self.read(size))[0]

    def read_uint8(self) -> int:
        return self._unpack(">B", 1)

    def read_uint16(self) -> int:
        return self._unpack(">H", 2)

    def read_uint32(self) -> int:
        return self._unpack(">I", 4)

    def read_uint64(self) -> int:
        return self._unpack(">Q", 8)

    def read_fourcc(self) -> str:
        return self.read(4).decode("latin-1")

    def read_pascal_string(self) -> str:
        length = self.read_uint8()
        return self.read(length).decode("utf-8", errors="replace")

    def read_null_terminated_string(self) -> str:
        end = self._data.find(b"\x00", self._pos)
        if end < 0:
            raw = self.read()
        else:
            raw = self.read(end - self._pos)
            self._pos += 1
        return raw.decode("utf-8", errors="replace")

    def read_string(self, string_type: StringType) -> str:
        """Read a string encoded as ``string_type``."""
        if string_type is StringType.PASCAL:
            return self.read_pascal_string()
        return self.read_null_terminated_string()

    def at_end(self) -> bool:
        return self._pos >= len(self._data)


class Displayable:
    """Something with a name, a list of properties and nested objects."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def displayable_properties(self) -> list[tuple[str, str]]:
        return []

    def displayable_objects(self) -> Sequence["Displayable"]:
        return []

    def write_description(self, indent: int = 0) -> str:
        """Return a multi-line description: name, properties, then nested objects."""
        pad = " " * (indent * 4)
        lines = [f"{pad}[{self.name}]"]
        props = self.displayable_properties()
        if props:
            width = max(len(key) for key, _ in props)
            lines.extend(f"{pad}    - {key:<{width}}: {value}" for key, value in props)
        lines.extend(obj.write_description(indent + 1) for obj in self.displayable_objects())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.write_description(0)


class Box(Displayable):
    """A generic box; its payload is kept as raw bytes."""

    def __init__(self, box_type: str) -> None:
        self.box_type = box_type
        self.data = b""

    @property
    def name(self) -> str:
        return self.box_type

    def read_data(self, parser: "Parser", stream: BinaryReader) -> None:
        self.data = stream.read()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.box_type!r})"


class FullBox(Box):
    """A box carrying an 8-bit version and 24-bit flags."""

    def __init__(self, box_type: str) -> None:
        super().__init__(box_type)
        self.version = 0
        self.flags = 0

    def read_data(self, parser: "Parser", stream: BinaryReader) -> None:
        self.version = stream.read_uint8()
        self.flags = int.from_bytes(stream.read(3), "big")

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [("Version", str(self.version)), ("Flags", str(self.flags))]


class ContainerBox(Box):
    """A box whose payload is a sequence of child boxes."""

    def __init__(self, box_type: str) -> None:
        super().__init__(box_type)
        self.boxes: list[Box] = []

    def read_data(self, parser: "Parser", stream: BinaryReader) -> None:
        self.boxes = []
        for box in parser.read_boxes(stream):
            self.add_box(box)

    def add_box(self, box: Box | None) -> None:
        if box is not None:
            self.boxes.append(box)

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.boxes)

    def find(self, box_type: str) -> Box | None:
        """Return the first direct child of the given type."""
        return next((b for b in self.boxes if b.box_type == box_type), None)


_REGISTRY: dict[str, Callable[[], Box]] = {}


def register_box(box_type: str):
    """Class decorator mapping a four-character box type to a box class."""

    def decorator(cls):
        _REGISTRY[box_type] = cls
        return cls

    return decorator


def create_box(box_type: str) -> Box:
    """Instantiate the box registered for ``box_type``, or a generic Box."""
    factory = _REGISTRY.get(box_type)
    if factory is None:
        return Box(box_type)
    return factory()


_CONTAINER_TYPES = (
    "moov", "trak", "mdia", "minf", "stbl", "dinf", "edts",
    "udta", "iprp", "mvex", "moof", "traf",
)

for _type in _CONTAINER_TYPES:
    _REGISTRY[_type] = partial(ContainerBox, _type)


class Parser:
    """Reads boxes from a byte buffer."""

    def __init__(self, string_type: StringType = StringType.NULL_TERMINATED) -> None:
        self.string_type = string_type
        self.info: dict[str, object] = {}

    def read_box(self, stream: BinaryReader) -> Box:
        """Read one box header and payload from ``stream``."""
        size = stream.read_uint32()
        box_type = stream.read_fourcc()
        header = 8
        if size == 1:
            size = stream.read_uint64()
            header = 16
        elif size == 0:
            size = header + stream.remaining
        if size < header:
            raise ValueError(f"invalid size {size} for box {box_type!r}")
        body = BinaryReader(stream.read(size - header))
        box = create_box(box_type)
        box.read_data(self, body)
        return box

    def read_boxes(self, stream: BinaryReader) -> list[Box]:
        """Read boxes until ``stream`` is exhausted."""
        boxes = []
        while not stream.at_end():
            boxes.append(self.read_box(stream))
        return boxes

    def parse(self, data: bytes | bytearray | memoryview) -> ContainerBox:
        """Parse a whole file into a top-level container."""
        root = ContainerBox("file")
        for box in self.read_boxes(BinaryReader(data)):
            root.add_box(box)
        return root


def iter_boxes(boxes: Iterable[Box], box_type: str) -> Iterable[Box]:
    """Yield the boxes of a given type from ``boxes``."""
    return (b for b in boxes if b.box_type == box_type)