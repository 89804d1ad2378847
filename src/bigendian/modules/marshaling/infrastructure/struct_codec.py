# src/bigendian/modules/marshaling/infrastructure/struct_codec.py
"""
Adaptador de Infraestructura: empaquetado de primitivos con `struct`.

Arquitectura: Infrastructure Layer
Responsabilidad: Implementar el puerto PrimitiveCodec con formatos explícitos
por tipo (orden de red, '>').
"""

from __future__ import annotations

import operator
import struct

from bigendian.modules.marshaling.domain.entities import Cursor
from bigendian.modules.marshaling.domain.exceptions import UnsupportedTypeError
from bigendian.modules.marshaling.domain.value_objects import IntKind

# Formato de lectura por tipo. La escritura siempre usa la variante sin signo.
_FORMATS: dict[IntKind, str] = {
    IntKind.U8: "B",
    IntKind.I8: "b",
    IntKind.U16: "H",
    IntKind.I16: "h",
    IntKind.U32: "I",
    IntKind.I32: "i",
    IntKind.U64: "Q",
    IntKind.I64: "q",
}


class StructPrimitiveCodec:
    """
    Códec big-endian para los ocho enteros de ancho fijo.

    Comportamiento:
    - Escritura: se enmascara el valor a `width * 8` bits y se empaqueta sin
      signo. Los negativos quedan en complemento a dos y los valores
      demasiado grandes se truncan (responsabilidad del caller).
    - Lectura: se desempaqueta con el formato del tipo, reinterpretando el
      patrón de bits con signo cuando corresponde.
    """

    def __init__(self):
        self._unpackers = {
            kind: struct.Struct(">" + code) for kind, code in _FORMATS.items()
        }
        self._packers = {
            kind: struct.Struct(">" + code.upper()) for kind, code in _FORMATS.items()
        }

    def size(self, kind: IntKind) -> int:
        return kind.width

    def read(self, buffer: memoryview, cursor: Cursor, kind: IntKind) -> int:
        start = cursor.claim(kind.width, len(buffer))
        (value,) = self._unpackers[kind].unpack_from(buffer, start)
        return value

    def write(
        self, value: int, buffer: memoryview, cursor: Cursor, kind: IntKind
    ) -> None:
        try:
            number = operator.index(value)
        except TypeError as exc:
            raise UnsupportedTypeError(
                f"No se puede empaquetar {type(value).__name__} como "
                f"{kind.name.lower()}: solo enteros"
            ) from exc

        start = cursor.claim(kind.width, len(buffer))
        self._packers[kind].pack_into(buffer, start, number & kind.mask)
