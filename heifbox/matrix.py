"""Transformation matrix stored in movie and track headers."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .box import BinaryReader, Displayable

__all__ = ["Matrix"]


@dataclass
class Matrix(Displayable):
    """A 3x3 matrix stored as nine raw 32-bit values."""

    a: int = 0
    b: int = 0
    u: int = 0
    c: int = 0
    d: int = 0
    v: int = 0
    x: int = 0
    y: int = 0
    w: int = 0

    @classmethod
    def read(cls, stream: BinaryReader) -> "Matrix":
        return cls(*(stream.read_uint32() for _ in range(9)))

    def displayable_properties(self) -> list[tuple[str, str]]:
        return [(f.name, str(getattr(self, f.name))) for f in fields(self)]

    def write_description(self, indent: int = 0) -> str:
        return " " * (indent * 4) + str(self)

    def __str__(self) -> str:
        body = ", ".join(f"{key} = {value}" for key, value in self.displayable_properties())
        return "{ " + body + " }"