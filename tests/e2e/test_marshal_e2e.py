# tests/e2e/test_marshal_e2e.py
"""
Tests E2E: API pública `bigendian`.
Flujo completo: tipo -> esquema -> bytes -> valor, con el códec real.
"""
from dataclasses import dataclass, field
from typing import Annotated, Any, List

import pytest

import bigendian
from bigendian import (
    Array,
    IntKind,
    OutOfRangeError,
    UnsupportedTypeError,
    i8,
    i16,
    i32,
    i64,
    u8,
    u16,
    u32,
    u64,
)

# === Tipos de apoyo ===


@dataclass
class Header:
    a: u16 = 0
    b: Annotated[List[int], Array(IntKind.U8, 2)] = field(
        default_factory=lambda: [0, 0]
    )


@dataclass
class Sample:
    channel: u8 = 0
    level: i16 = 0


@dataclass
class Frame:
    header: Header = field(default_factory=Header)
    sequence: u64 = 0
    offset: i32 = 0
    samples: Annotated[List[Sample], Array(Sample, 2)] = field(
        default_factory=lambda: [Sample(), Sample()]
    )
    matrix: Annotated[
        List[List[int]], Array(Array(IntKind.I8, 2), 2)
    ] = field(default_factory=lambda: [[0, 0], [0, 0]])


class LegacyPacket:
    kind: u8
    length: u16

    def __init__(self):
        self.kind = 0
        self.length = 0


# === Propiedades ===


def test_big_endian_byte_order():
    assert bigendian.write(IntKind.U32, 0x01020304) == bytes([0x01, 0x02, 0x03, 0x04])


def test_offset_advancement(byte_pattern_factory):
    data = byte_pattern_factory(bytes([0x00, 0x2A, 0x05]), suffix=2)

    value, offset = bigendian.read_from(u16, data)
    assert (value, offset) == (42, 2)

    value, offset = bigendian.read_from(u8, data, offset)
    assert (value, offset) == (5, 3)


def test_array_order_preservation():
    assert bigendian.write_array(IntKind.U8, [1, 2, 3]) == bytes([0x01, 0x02, 0x03])
    assert bigendian.read_array(IntKind.U8, bytes([0x01, 0x02, 0x03]), length=3) == [
        1,
        2,
        3,
    ]


def test_nested_composite_serializes_to_expected_bytes():
    """
    Given: {a: u16, b: u8[2]} con a=0x0102 y b=[3, 4]
    When: Se serializa y deserializa
    Then: Los bytes son [1, 2, 3, 4] y los campos vuelven iguales
    """
    # Arrange
    header = Header(a=0x0102, b=[3, 4])

    # Act
    data = bigendian.write(Header, header)
    restored = bigendian.read(Header, data)

    # Assert
    assert data == bytes([0x01, 0x02, 0x03, 0x04])
    assert restored.a == 0x0102
    assert restored.b == [3, 4]


def test_out_of_range_read():
    with pytest.raises(OutOfRangeError):
        bigendian.read(IntKind.U32, bytes([0x01, 0x02]), offset=0)


def test_unsupported_float():
    with pytest.raises(UnsupportedTypeError):
        bigendian.size_of(float)


def test_unsupported_any():
    with pytest.raises(UnsupportedTypeError):
        bigendian.size_of(Any)


# === Ida y vuelta ===


@pytest.mark.parametrize(
    "spec, value",
    [
        (u8, 0xFF),
        (i8, -128),
        (u16, 0xBEEF),
        (i16, -1),
        (u32, 0xFFFF_FFFF),
        (i32, -(2**31)),
        (u64, 2**64 - 1),
        (i64, -(2**63)),
    ],
)
def test_primitive_round_trip_at_extremes(spec, value):
    assert bigendian.read(spec, bigendian.write(spec, value)) == value


def test_deeply_nested_round_trip():
    # Arrange
    frame = Frame(
        header=Header(a=0xCAFE, b=[0xAB, 0xCD]),
        sequence=2**40 + 7,
        offset=-123456,
        samples=[Sample(channel=1, level=-300), Sample(channel=2, level=300)],
        matrix=[[-1, 2], [3, -4]],
    )

    # Act
    data = bigendian.write(Frame, frame)
    restored = bigendian.read(Frame, data)

    # Assert
    assert restored == frame
    assert len(data) == bigendian.size_of(Frame)


@pytest.mark.parametrize("spec", [Header, Sample, Frame])
def test_size_agreement_with_default_instance(spec):
    assert bigendian.size_of(spec) == len(bigendian.write(spec, spec()))


def test_size_of_frame_without_instance():
    # header 4 + sequence 8 + offset 4 + samples 2*3 + matrix 4
    assert bigendian.size_of(Frame) == 26
    assert bigendian.size_of_value(Frame()) == 26


def test_array_of_composites_in_place(byte_pattern_factory):
    # Arrange
    samples = [Sample(channel=9, level=-2), Sample(channel=8, level=2)]
    buffer = bytearray(byte_pattern_factory(bytes(6), prefix=1, suffix=1))

    # Act
    end = bigendian.write_array_into(Sample, samples, buffer, offset=1, length=2)
    restored = bigendian.read_array(Sample, buffer, 2, offset=1)

    # Assert
    assert end == 7
    assert buffer[0] == 0xEE and buffer[-1] == 0xEE
    assert restored == samples


def test_legacy_class_round_trip():
    packet = LegacyPacket()
    packet.kind = 3
    packet.length = 513

    data = bigendian.write(LegacyPacket, packet)
    restored = bigendian.read(LegacyPacket, data)

    assert data == b"\x03\x02\x01"
    assert (restored.kind, restored.length) == (3, 513)


def test_in_place_composite_write_then_read_from():
    buffer = bytearray(8)

    end = bigendian.write_into(Header, Header(a=1, b=[2, 3]), buffer, offset=2)
    header, consumed = bigendian.read_from(Header, buffer, 2)

    assert end == consumed == 6
    assert header == Header(a=1, b=[2, 3])


def test_read_array_into_presized_composites():
    data = bigendian.write_array(Sample, [Sample(1, 1), Sample(2, 2)])
    output = [None, None]

    end = bigendian.read_array_into(Sample, data, output)

    assert end == 6
    assert output == [Sample(1, 1), Sample(2, 2)]
