# src/bigendian/modules/marshaling/domain/value_objects.py
"""
Descriptores de Tipo (Value Objects).

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Describir la forma de un valor serializable: primitivo entero
de ancho fijo, arreglo de longitud fija o compuesto con campos ordenados.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from bigendian.core.value_objects import NonNegativeValue

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos y validación pura.
# 🔒 Inmutabilidad: frozen=True en todos los descriptores.
# ❌ SIN I/O: Nada de buffers aquí; los bytes viven en la capa de aplicación.


class IntKind(Enum):
    """
    Conjunto cerrado de enteros de ancho fijo soportados.

    Cada miembro lleva su ancho en bytes y si se interpreta con signo
    (complemento a dos).
    """

    U8 = (1, False)
    I8 = (1, True)
    U16 = (2, False)
    I16 = (2, True)
    U32 = (4, False)
    I32 = (4, True)
    U64 = (8, False)
    I64 = (8, True)

    def __init__(self, width: int, signed: bool):
        self.width = width
        self.signed = signed

    @property
    def bits(self) -> int:
        return self.width * 8

    @property
    def mask(self) -> int:
        """Máscara del patrón de bits sin signo para este ancho."""
        return (1 << self.bits) - 1


@dataclass(frozen=True)
class Array:
    """
    Marcador de arreglo homogéneo de longitud fija.

    La longitud debe conocerse antes de leer: el motor no la infiere del
    flujo de bytes.

    Ejemplo:
        points: Annotated[list[int], Array(IntKind.U16, 4)]
    """

    element: Any
    length: int

    def __post_init__(self):
        try:
            NonNegativeValue(self.length)
        except ValueError as exc:
            raise ValueError(
                f"La longitud del arreglo debe ser un entero no negativo: "
                f"{self.length!r}"
            ) from exc


# === Alias listos para anotar campos ===
u8 = Annotated[int, IntKind.U8]
i8 = Annotated[int, IntKind.I8]
u16 = Annotated[int, IntKind.U16]
i16 = Annotated[int, IntKind.I16]
u32 = Annotated[int, IntKind.U32]
i32 = Annotated[int, IntKind.I32]
u64 = Annotated[int, IntKind.U64]
i64 = Annotated[int, IntKind.I64]


# === Formas resueltas (resultado del Shape Dispatcher) ===


@dataclass(frozen=True)
class PrimitiveShape:
    """Caso base: un entero de ancho fijo."""

    kind: IntKind


@dataclass(frozen=True)
class ArrayShape:
    """`length` elementos consecutivos de la misma forma, en orden de índice."""

    element: Shape
    length: int


@dataclass(frozen=True)
class FieldShape:
    name: str
    shape: Shape


@dataclass(frozen=True)
class CompositeShape:
    """
    Esquema explícito de un registro: campos en orden de declaración.

    Invariante: el mismo orden se usa para tamaño, lectura y escritura.
    Si `keyword_init` es True, la instancia se construye con `cls(**valores)`
    (dataclasses, incluso frozen); si no, `cls()` y luego asignación.
    """

    cls: type
    fields: tuple[FieldShape, ...]
    keyword_init: bool = True

    @property
    def name(self) -> str:
        return self.cls.__name__


Shape = Union[PrimitiveShape, ArrayShape, CompositeShape]


def describe(spec: Any) -> str:
    """Nombre legible de un tipo para mensajes y logs."""
    if isinstance(spec, IntKind):
        return spec.name.lower()
    if isinstance(spec, Array):
        return f"{describe(spec.element)}[{spec.length}]"
    if get_origin(spec) is Annotated:
        for meta in spec.__metadata__:
            if isinstance(meta, (IntKind, Array)):
                return describe(meta)
        return describe(get_args(spec)[0])
    if isinstance(spec, type):
        return spec.__name__
    if get_origin(spec) is not None:
        return repr(spec)
    return type(spec).__name__
