"""Movie header box."""

from __future__ import annotations

from .box import BinaryReader, FullBox, Parser, register_box
from .matrix import Matrix

__all__ = ["MVHD"]


@register_box("mvhd")
class MVHD(FullBox):
    """The 'mvhd' box: overall timing and presentation data of a movie."""

    def __init__(self) -> None:
        super().__init__("mvhd")
        self.creation_time = 0
        self.modification_time = 0
        self.timescale = 0
        self.duration = 0
        self.rate = 0
        self.volume = 0
        self.matrix = Matrix()
        self.next_track_id = 0
        self._reserved1 = 0
        self._reserved2 = (0, 0)
        self._predefined = (0,) * 6

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        if self.version == 1:
            self.creation_time = stream.read_uint64()
            self.modification_time = stream.read_uint64()
            self.timescale = stream.read_uint32()
            self.duration = stream.read_uint64()
        else:
            self.creation_time = stream.read_uint32()
            self.modification_time = stream.read_uint32()
            self.timescale = stream.read_uint32()
            self.duration = stream.read_uint32()
        self.rate = stream.read_uint32()
        self.volume = stream.read_uint16()
        self._reserved1 = stream.read_uint16()
        self._reserved2 = (stream.read_uint32(), stream.read_uint32())
        self.matrix = Matrix.read(stream)
        self._predefined = tuple(stream.read_uint32() for _ in range(6))
        self.next_track_id = stream.read_uint32()

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.extend(
            [
                ("Creation time", str(self.creation_time)),
                ("Modification time", str(self.modification_time)),
                ("Timescale", str(self.timescale)),
                ("Duration", str(self.duration)),
                ("Rate", str(self.rate)),
                ("Volume", str(self.volume)),
                ("Matrix", str(self.matrix)),
                ("Next track ID", str(self.next_track_id)),
            ]
        )
        return props