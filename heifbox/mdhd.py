"""Media header box."""

from __future__ import annotations

from .box import BinaryReader, FullBox, Parser, register_box

__all__ = ["MDHD"]


@register_box("mdhd")
class MDHD(FullBox):
    """The 'mdhd' box: timing and language of a track's media."""

    def __init__(self) -> None:
        super().__init__("mdhd")
        self.creation_time = 0
        self.modification_time = 0
        self.timescale = 0
        self.duration = 0
        self.pad = 0
        self.language0 = 0
        self.language1 = 0
        self.language2 = 0
        self.predefined = 0

    def _read_time(self, stream: BinaryReader) -> int:
        return stream.read_uint64() if self.version == 1 else stream.read_uint32()

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        self.creation_time = self._read_time(stream)
        self.modification_time = self._read_time(stream)
        self.timescale = stream.read_uint32()
        self.duration = self._read_time(stream)
        packed = stream.read_uint16()
        self.pad = packed >> 15
        self.language0 = (packed >> 10) & 0b11111
        self.language1 = (packed >> 5) & 0b11111
        self.language2 = packed & 0b11111
        self.predefined = stream.read_uint16()

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.extend(
            [
                ("Creation time", str(self.creation_time)),
                ("Modification time", str(self.modification_time)),
                ("Timescale", str(self.timescale)),
                ("Duration", str(self.duration)),
                ("Pad", str(self.pad)),
                ("Language0", str(self.language0)),
                ("Language1", str(self.language1)),
                ("Language2", str(self.language2)),
                ("Predefined", str(self.predefined)),
            ]
        )
        return props