import struct

import pytest

from heifbox.box import BinaryReader, Parser
from heifbox.iloc import ILOC, Extent, Item


def make_box(box_type: bytes, payload: bytes) -> bytes:
    return struct.pack(">I4s", 8 + len(payload), box_type) + payload


def v0_payload() -> bytes:
    header = bytes([0, 0, 0, 0]) + bytes([0x44, 0x00]) + struct.pack(">H", 2)
    item1 = struct.pack(">HHH", 7, 0, 1) + struct.pack(">II", 100, 50)
    item2 = struct.pack(">HHH", 9, 3, 2) + struct.pack(">IIII", 200, 10, 300, 20)
    return header + item1 + item2


def test_parse_version0_through_parser():
    root = Parser().parse(make_box(b"iloc", v0_payload()))
    iloc = root.boxes[0]
    assert isinstance(iloc, ILOC)
    assert iloc.version == 0
    assert (iloc.offset_size, iloc.length_size) == (4, 4)
    assert (iloc.base_offset_size, iloc.index_size) == (0, 0)
    assert [item.item_id for item in iloc.items] == [7, 9]
    assert iloc.items[0].extents == [Extent(0, 100, 50)]
    assert iloc.items[1].data_reference_index == 3
    assert iloc.items[1].extents == [Extent(0, 200, 10), Extent(0, 300, 20)]


def test_get_item_and_missing():
    iloc = Parser().parse(make_box(b"iloc", v0_payload())).boxes[0]
    assert iloc.get_item(9).extents[1].length == 20
    assert iloc.get_item(42) is None


def test_version1_reads_construction_method_and_index():
    payload = bytes([1, 0, 0, 0]) + bytes([0x44, 0x84]) + struct.pack(">H", 1)
    payload += struct.pack(">HHH", 5, 0x0011, 0)
    payload += struct.pack(">Q", 1000)
    payload += struct.pack(">H", 1) + struct.pack(">III", 3, 16, 32)
    iloc = ILOC()
    iloc.read_data(Parser(), BinaryReader(payload))
    item = iloc.items[0]
    assert item.item_id == 5
    assert item.construction_method == 1
    assert item.base_offset == 1000
    assert item.extents == [Extent(3, 16, 32)]
    assert ("Index size", "4") in iloc.displayable_properties()


def test_version2_uses_32bit_ids_and_count():
    payload = bytes([2, 0, 0, 0]) + bytes([0x88, 0x20]) + struct.pack(">I", 1)
    payload += struct.pack(">IHH", 70000, 2, 4)
    payload += struct.pack(">H", 1234)
    payload += struct.pack(">H", 1) + struct.pack(">QQ", 1 << 40, 77)
    iloc = ILOC()
    iloc.read_data(Parser(), BinaryReader(payload))
    item = iloc.items[0]
    assert item.item_id == 70000
    assert item.construction_method == 2
    assert item.data_reference_index == 4
    assert item.base_offset == 1234
    assert item.extents == [Extent(0, 1 << 40, 77)]


def test_version0_properties_omit_index_size():
    iloc = Parser().parse(make_box(b"iloc", v0_payload())).boxes[0]
    keys = [key for key, _ in iloc.displayable_properties()]
    assert "Index size" not in keys
    assert keys[:2] == ["Version", "Flags"]
    assert ("Items", "2") in iloc.displayable_properties()


def test_item_properties_and_objects():
    item = Item(item_id=3, base_offset=8)
    item.add_extent(Extent(0, 1, 2))
    props = dict(item.displayable_properties())
    assert props["Item ID"] == "3"
    assert props["Base offset"] == "8"
    assert props["Extent count"] == "1"
    assert list(item.displayable_objects()) == [Extent(0, 1, 2)]


def test_description_nests_items():
    iloc = Parser().parse(make_box(b"iloc", v0_payload())).boxes[0]
    text = iloc.write_description()
    assert text.startswith("[iloc]")
    assert "[Item]" in text
    assert "[Extent]" in text
    assert list(iloc.displayable_objects()) == iloc.items


def test_reread_replaces_items():
    iloc = ILOC()
    iloc.read_data(Parser(), BinaryReader(v0_payload()))
    iloc.read_data(Parser(), BinaryReader(v0_payload()))
    assert len(iloc.items) == 2


def test_truncated_payload_raises():
    with pytest.raises(EOFError):
        ILOC().read_data(Parser(), BinaryReader(v0_payload()[:-3]))