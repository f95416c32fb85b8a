import struct

import pytest

from heifbox.box import BinaryReader, Parser
from heifbox.pitm import PITM


def make_box(payload: bytes) -> bytes:
    return struct.pack(">I4s", 8 + len(payload), b"pitm") + payload


def test_version0_reads_16bit_id():
    root = Parser().parse(make_box(bytes([0, 0, 0, 0]) + struct.pack(">H", 49)))
    pitm = root.boxes[0]
    assert isinstance(pitm, PITM)
    assert pitm.version == 0
    assert pitm.item_id == 49


def test_version1_reads_32bit_id():
    pitm = PITM()
    pitm.read_data(Parser(), BinaryReader(bytes([1, 0, 0, 0]) + struct.pack(">I", 100000)))
    assert pitm.version == 1
    assert pitm.item_id == 100000


def test_properties():
    pitm = PITM()
    pitm.read_data(Parser(), BinaryReader(bytes([0, 0, 0, 0]) + struct.pack(">H", 12)))
    assert pitm.displayable_properties() == [
        ("Version", "0"),
        ("Flags", "0"),
        ("Item ID", "12"),
    ]


def test_name_is_box_type():
    assert PITM().write_description().startswith("[pitm]")


def test_truncated_raises():
    with pytest.raises(EOFError):
        PITM().read_data(Parser(), BinaryReader(bytes([1, 0, 0, 0, 0, 1])))