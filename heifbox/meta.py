"""Metadata box."""

from __future__ import annotations

from typing import Sequence

from .box import BinaryReader, Box, ContainerBox, Displayable, FullBox, Parser, register_box

__all__ = ["META"]


@register_box("meta")
class META(FullBox):
    """The 'meta' box; some writers omit its version and flags."""

    def __init__(self) -> None:
        super().__init__("meta")
        self.is_full_box = True
        self.boxes: list[Box] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        # Without version/flags the first child ('hdlr') starts right away,
        # so its type sits at offset 4.
        self.is_full_box = stream.peek(4, 4) != b"hdlr"
        if self.is_full_box:
            super().read_data(parser, stream)
        container = ContainerBox("????")
        container.read_data(parser, stream)
        self.boxes = list(container.boxes)

    def add_box(self, box: Box | None) -> None:
        if box is not None:
            self.boxes.append(box)

    def displayable_properties(self) -> list[tuple[str, str]]:
        if self.is_full_box:
            return super().displayable_properties()
        return Box.displayable_properties(self)

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.boxes)