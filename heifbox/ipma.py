"""Item property association box: which properties apply to which items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .box import BinaryReader, Displayable, FullBox, Parser, register_box

__all__ = ["Association", "Entry", "IPMA"]


@dataclass
class Association(Displayable):
    """A link from an item to one property in the property container."""

    essential: bool = False
    property_index: int = 0

    @classmethod
    def read(cls, stream: BinaryReader, ipma: "IPMA") -> "Association":
        if ipma.flags & 0x01:
            packed = stream.read_uint16()
            return cls(essential=(packed >> 15) == 1, property_index=packed & 0x7FFF)
        packed = stream.read_uint8()
        return cls(essential=(packed >> 7) == 1, property_index=packed & 0x7F)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [
            ("Essential", "yes" if self.essential else "no"),
            ("Property index", str(self.property_index)),
        ]


@dataclass
class Entry(Displayable):
    """The property associations of a single item."""

    item_id: int = 0
    associations: list[Association] = field(default_factory=list)

    @classmethod
    def read(cls, stream: BinaryReader, ipma: "IPMA") -> "Entry":
        entry = cls()
        if ipma.version < 1:
            entry.item_id = stream.read_uint16()
        else:
            entry.item_id = stream.read_uint32()
        count = stream.read_uint8()
        for _ in range(count):
            entry.add_association(Association.read(stream, ipma))
        return entry

    def add_association(self, association: Association) -> None:
        self.associations.append(association)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [
            ("Item ID", str(self.item_id)),
            ("Associations", str(len(self.associations))),
        ]

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.associations)


@register_box("ipma")
class IPMA(FullBox):
    """The 'ipma' box."""

    def __init__(self) -> None:
        super().__init__("ipma")
        self.entries: list[Entry] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        count = stream.read_uint32()
        self.entries = []
        for _ in range(count):
            self.add_entry(Entry.read(stream, self))

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)

    def get_entry(self, item_id: int) -> Entry | None:
        """Return the entry for ``item_id``, or None."""
        return next((entry for entry in self.entries if entry.item_id == item_id), None)

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [("Entries", str(len(self.entries)))]

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.entries)