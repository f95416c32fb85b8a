"""Primary item box."""

from __future__ import annotations

from .box import BinaryReader, FullBox, Parser, register_box

__all__ = ["PITM"]


@register_box("pitm")
class PITM(FullBox):
    """The 'pitm' box naming the primary item."""

    def __init__(self) -> None:
        super().__init__("pitm")
        self.item_id = 0

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        if self.version == 0:
            self.item_id = stream.read_uint16()
        else:
            self.item_id = stream.read_uint32()

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.append(("Item ID", str(self.item_id)))
        return props