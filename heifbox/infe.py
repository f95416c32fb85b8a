"""Item information entry box."""

from __future__ import annotations

from .box import BinaryReader, FullBox, Parser, register_box

__all__ = ["INFE"]


@register_box("infe")
class INFE(FullBox):
    """The 'infe' box describing one item: its ID, type, name and content."""

    def __init__(self) -> None:
        super().__init__("infe")
        self.item_id = 0
        self.item_protection_index = 0
        self.item_type = ""
        self.item_name = ""
        self.content_type = ""
        self.content_encoding = ""
        self.item_uri_type = ""

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        string_type = parser.string_type

        if self.version in (0, 1):
            self.item_id = stream.read_uint16()
            self.item_protection_index = stream.read_uint16()
            self.item_name = stream.read_string(string_type)
            self.content_type = stream.read_string(string_type)
            self.content_encoding = stream.read_string(string_type)

        if self.version >= 2:
            if self.version == 2:
                self.item_id = stream.read_uint16()
            elif self.version == 3:
                self.item_id = stream.read_uint32()
            self.item_protection_index = stream.read_uint16()
            self.item_type = stream.read_fourcc()
            if self.item_type == "mime":
                self.content_type = stream.read_string(string_type)
                self.content_encoding = stream.read_string(string_type)
            elif self.item_type == "uri ":
                self.item_uri_type = stream.read_string(string_type)

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.extend(
            [
                ("Item ID", str(self.item_id)),
                ("Item protection index", str(self.item_protection_index)),
                ("Item type", self.item_type),
                ("Item name", self.item_name),
                ("Content type", self.content_type),
                ("Content encoding", self.content_encoding),
                ("Item URI type", self.item_uri_type),
            ]
        )
        return props