"""Item reference box."""

from __future__ import annotations

from typing import Sequence

from .box import BinaryReader, Box, ContainerBox, Displayable, FullBox, Parser, register_box

__all__ = ["IREF"]


@register_box("iref")
class IREF(FullBox):
    """The 'iref' box holding typed references between items."""

    def __init__(self) -> None:
        super().__init__("iref")
        self.boxes: list[Box] = []

    def read_data(self, parser: Parser, stream: BinaryReader) -> None:
        super().read_data(parser, stream)
        container = ContainerBox("????")
        parser.info["iref"] = self
        try:
            container.read_data(parser, stream)
        finally:
            parser.info["iref"] = None
        self.boxes = list(container.boxes)

    def add_box(self, box: Box | None) -> None:
        if box is not None:
            self.boxes.append(box)

    def displayable_objects(self) -> Sequence[Displayable]:
        return list(self.boxes)