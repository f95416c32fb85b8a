import struct

from heifbox.box import BinaryReader, Box, Parser, register_box
from heifbox.iref import IREF


def _box(box_type: bytes, payload: bytes) -> bytes:
    return struct.pack(">I", 8 + len(payload)) + box_type + payload


@register_box("zirf")
class _InfoProbe(Box):
    def __init__(self) -> None:
        super().__init__("zirf")
        self.seen = None

    def read_data(self, parser, stream):
        self.seen = parser.info.get("iref")
        super().read_data(parser, stream)


def test_reads_child_reference_boxes():
    child1 = _box(b"dimg", b"\x00\x01\x00\x01\x00\x02")
    child2 = _box(b"thmb", b"\x00\x03\x00\x01\x00\x01")
    data = _box(b"iref", b"\x00\x00\x00\x00" + child1 + child2)
    box = Parser().read_box(BinaryReader(data))
    assert isinstance(box, IREF)
    assert box.version == 0
    assert [b.box_type for b in box.boxes] == ["dimg", "thmb"]
    assert box.boxes[0].data == b"\x00\x01\x00\x01\x00\x02"


def test_parser_info_set_during_read_and_cleared_after():
    parser = Parser()
    data = _box(b"iref", b"\x00\x00\x00\x00" + _box(b"zirf", b""))
    box = parser.read_box(BinaryReader(data))
    assert box.boxes[0].seen is box
    assert parser.info["iref"] is None


def test_add_box_ignores_none():
    iref = IREF()
    iref.add_box(None)
    child = Box("dimg")
    iref.add_box(child)
    assert iref.boxes == [child]
    assert list(iref.displayable_objects()) == [child]


def test_empty_iref_has_no_boxes():
    data = _box(b"iref", b"\x01\x00\x00\x00")
    box = Parser().read_box(BinaryReader(data))
    assert box.version == 1
    assert box.boxes == []


def test_description_includes_children():
    data = _box(b"iref", b"\x00\x00\x00\x00" + _box(b"dimg", b""))
    box = Parser().read_box(BinaryReader(data))
    text = box.write_description()
    assert text.splitlines()[0] == "[iref]"
    assert "    [dimg]" in text.splitlines()