"""Image item properties: rotation, spatial extent and pixel information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .box import BinaryReader, Box, Displayable, FullBox, Parser, register_box

__all__ = ["IROT", "ISPE", "Channel", "PIXI"]


@register_box("irot")
class IROT(Box):
    """The 'irot' box: rotation in steps of 90 degrees anti-clockwise."""

    def __init__(self) -> None:
        super().__init__("irot")
        self.angle = 0

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        self.angle = stream.read_uint8() & 0x3

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.append(("Angle", str(self.angle)))
        return props


@register_box("ispe")
class ISPE(FullBox):
    """The 'ispe' box: the displayed width and height of an image."""

    def __init__(self) -> None:
        super().__init__("ispe")
        self.display_width = 0
        self.display_height = 0

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        self.display_width = stream.read_uint32()
        self.display_height = stream.read_uint32()

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.append(("Display width", str(self.display_width)))
        props.append(("Display height", str(self.display_height)))
        return props


@dataclass
class Channel(Displayable):
    """The bit depth of one image channel."""

    bits_per_channel: int = 0

    @classmethod
    def read(cls, stream: BinaryReader) -> "Channel":
        return cls(stream.read_uint8())

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [("Bits per channel", str(self.bits_per_channel))]


@register_box("pixi")
class PIXI(FullBox):
    """The 'pixi' box: number of channels and bits per channel."""

    def __init__(self) -> None:
        super().__init__("pixi")
        self.channels: list[Channel] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        count = stream.read_uint8()
        self.channels = []
        for _ in range(count):
            self.add_channel(Channel.read(stream))

    def add_channel(self, channel: Channel) -> None:
        self.channels.append(channel)

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.append(("Channels", str(len(self.channels))))
        return props

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.channels)