"""MPEG-4 audio sample entry box."""

from __future__ import annotations

from typing import Sequence

from .box import BinaryReader, Box, Displayable, FullBox, Parser, register_box

__all__ = ["MP4A"]


@register_box("mp4a")
class MP4A(FullBox):
    """The 'mp4a' sample entry: channel count, sample size and sample rate."""

    def __init__(self) -> None:
        super().__init__("mp4a")
        self.channel_count = 0
        self.sample_size = 0
        self.sample_rate_raw = 0
        self.boxes: list[Box] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        stream.read(6)  # reserved
        stream.read_uint16()  # data reference index
        stream.read(8)  # reserved
        self.channel_count = stream.read_uint16()
        self.sample_size = stream.read_uint16()
        stream.read_uint16()  # pre-defined
        stream.read_uint16()  # reserved
        self.sample_rate_raw = stream.read_uint32()
        # Child boxes are not parsed.
        self.boxes = []

    def add_box(self, box: Box | None) -> None:
        if box is not None:
            self.boxes.append(box)

    @property
    def sample_rate(self) -> float:
        """The sample rate decoded from its 16.16 fixed-point form."""
        raw = self.sample_rate_raw
        return (raw >> 16) + (raw & 0xFFFF) / 65536.0

    def displayable_properties(self) -> list[tuple[str, str]]:
        props = super().displayable_properties()
        props.extend(
            [
                ("Channel Count", str(self.channel_count)),
                ("Sample Size", str(self.sample_size)),
                ("Sample Rate (raw)", str(self.sample_rate_raw)),
                ("Sample Rate", f"{self.sample_rate:.6f}"),
            ]
        )
        return props

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.boxes)