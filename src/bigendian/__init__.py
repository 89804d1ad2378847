# src/bigendian/__init__.py
"""
bigendian: marshaling binario big-endian dirigido por tipos.

Uso:
    from dataclasses import dataclass
    from typing import Annotated

    import bigendian
    from bigendian import Array, IntKind, u8, u16

    @dataclass
    class Header:
        a: u16
        b: Annotated[list[int], Array(IntKind.U8, 2)]

    data = bigendian.write(Header, Header(a=0x0102, b=[3, 4]))  # b"\\x01\\x02\\x03\\x04"
    header = bigendian.read(Header, data)
"""

from __future__ import annotations

from bigendian.modules.marshaling import (
    Array,
    FieldAccessError,
    IntKind,
    LengthMismatchError,
    Marshaler,
    MarshalError,
    OutOfRangeError,
    UnsupportedTypeError,
    configure_logging,
    i8,
    i16,
    i32,
    i64,
    u8,
    u16,
    u32,
    u64,
)

# Instancia por defecto: sin estado entre llamadas.
_default = Marshaler()

size_of = _default.size_of
size_of_value = _default.size_of_value
read = _default.read
read_from = _default.read_from
read_array = _default.read_array
read_array_into = _default.read_array_into
write = _default.write
write_into = _default.write_into
write_array = _default.write_array
write_array_into = _default.write_array_into

__all__ = [
    "IntKind",
    "Array",
    "u8",
    "i8",
    "u16",
    "i16",
    "u32",
    "i32",
    "u64",
    "i64",
    "Marshaler",
    "MarshalError",
    "UnsupportedTypeError",
    "OutOfRangeError",
    "FieldAccessError",
    "LengthMismatchError",
    "configure_logging",
    "size_of",
    "size_of_value",
    "read",
    "read_from",
    "read_array",
    "read_array_into",
    "write",
    "write_into",
    "write_array",
    "write_array_into",
]
