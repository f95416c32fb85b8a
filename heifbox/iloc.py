"""Item location box: where each item's data lives in the file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .box import BinaryReader, Displayable, FullBox, Parser, register_box

__all__ = ["Extent", "Item", "ILOC"]


def _read_sized(stream: BinaryReader, size: int) -> int:
    """Read an unsigned integer of ``size`` bytes; other sizes yield 0."""
    if size == 2:
        return stream.read_uint16()
    if size == 4:
        return stream.read_uint32()
    if size == 8:
        return stream.read_uint64()
    return 0


@dataclass
class Extent(Displayable):
    """One contiguous piece of an item's data."""

    index: int = 0
    offset: int = 0
    length: int = 0

    @classmethod
    def read(cls, stream: BinaryReader, iloc: "ILOC") -> "Extent":
        index = 0
        if iloc.version in (1, 2) and iloc.index_size > 0:
            index = _read_sized(stream, iloc.index_size)
        offset = _read_sized(stream, iloc.offset_size)
        length = _read_sized(stream, iloc.length_size)
        return cls(index, offset, length)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [
            ("Index", str(self.index)),
            ("Offset", str(self.offset)),
            ("Length", str(self.length)),
        ]


@dataclass
class Item(Displayable):
    """Location information for a single item."""

    item_id: int = 0
    construction_method: int = 0
    data_reference_index: int = 0
    base_offset: int = 0
    extents: list[Extent] = field(default_factory=list)

    @classmethod
    def read(cls, stream: BinaryReader, iloc: "ILOC") -> "Item":
        item = cls()
        if iloc.version < 2:
            item.item_id = stream.read_uint16()
        elif iloc.version == 2:
            item.item_id = stream.read_uint32()
        if iloc.version in (1, 2):
            item.construction_method = stream.read_uint16() & 0xF
        item.data_reference_index = stream.read_uint16()
        item.base_offset = _read_sized(stream, iloc.base_offset_size)
        count = stream.read_uint16()
        for _ in range(count):
            item.add_extent(Extent.read(stream, iloc))
        return item

    def add_extent(self, extent: Extent) -> None:
        self.extents.append(extent)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [
            ("Item ID", str(self.item_id)),
            ("Construction method", str(self.construction_method)),
            ("Data reference index", str(self.data_reference_index)),
            ("Base offset", str(self.base_offset)),
            ("Extent count", str(len(self.extents))),
        ]

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.extents)


@register_box("iloc")
class ILOC(FullBox):
    """The 'iloc' box."""

    def __init__(self) -> None:
        super().__init__("iloc")
        self.offset_size = 0
        self.length_size = 0
        self.base_offset_size = 0
        self.index_size = 0
        self.items: list[Item] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        packed = stream.read_uint8()
        self.offset_size = packed >> 4
        self.length_size = packed & 0xF
        packed = stream.read_uint8()
        self.base_offset_size = packed >> 4
        self.index_size = packed & 0xF
        count = stream.read_uint16() if self.version < 2 else stream.read_uint32()
        self.items = []
        for _ in range(count):
            self.add_item(Item.read(stream, self))

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def get_item(self, item_id: int) -> Item | None:
        """Return the item with ``item_id``, or None."""
        return next((item for item in self.items if item.item_id == item_id), None)

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.append(("Offset size", str(self.offset_size)))
        props.append(("Length size", str(self.length_size)))
        props.append(("Base offset size", str(self.base_offset_size)))
        if self.version in (1, 2):
            props.append(("Index size", str(self.index_size)))
        props.append(("Items", str(len(self.items))))
        return props

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.items)