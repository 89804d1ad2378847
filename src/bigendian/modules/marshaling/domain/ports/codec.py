# src/bigendian/modules/marshaling/domain/ports/codec.py
"""
Puerto para el Códec de Primitivos.

Arquitectura: Domain Port (Interface)
Responsabilidad: Definir el contrato para empaquetar un único entero de ancho
fijo en bytes big-endian y viceversa.
"""

from __future__ import annotations

from typing import Protocol

from bigendian.modules.marshaling.domain.entities import Cursor
from bigendian.modules.marshaling.domain.value_objects import IntKind


class PrimitiveCodec(Protocol):
    """
    Contrato abstracto para el caso base de la recursión.

    Implementaciones esperadas:
    - StructPrimitiveCodec (Infraestructura, módulo `struct`)
    """

    def size(self, kind: IntKind) -> int:
        """Ancho en bytes del tipo. Función pura, sin I/O."""
        ...

    def read(self, buffer: memoryview, cursor: Cursor, kind: IntKind) -> int:
        """
        Lee `kind.width` bytes en la posición del cursor (MSB primero).

        Raises:
            OutOfRangeError: Si faltan bytes.
        """
        ...

    def write(
        self, value: int, buffer: memoryview, cursor: Cursor, kind: IntKind
    ) -> None:
        """
        Escribe el patrón de bits sin signo de `value` en `kind.width` bytes.

        Raises:
            OutOfRangeError: Si el destino es demasiado chico.
            UnsupportedTypeError: Si `value` no es un entero.
        """
        ...
