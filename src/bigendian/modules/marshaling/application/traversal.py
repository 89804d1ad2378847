# src/bigendian/modules/marshaling/application/traversal.py
"""
Motor de recorrido por forma (tamaño / lectura / escritura).

Arquitectura: Application Layer
Responsabilidad: Recorrer recursivamente primitivos, arreglos y compuestos
en un único orden fijo, delegando el caso base en el PrimitiveCodec.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence

from bigendian.modules.marshaling.domain.entities import Cursor
from bigendian.modules.marshaling.domain.exceptions import (
    FieldAccessError,
    LengthMismatchError,
    UnsupportedTypeError,
)
from bigendian.modules.marshaling.domain.ports.codec import PrimitiveCodec
from bigendian.modules.marshaling.domain.value_objects import (
    ArrayShape,
    CompositeShape,
    PrimitiveShape,
    Shape,
)

# === 🧭 Protocolos Arquitectónicos ===
# ✅ ORDEN: Arreglos por índice ascendente; compuestos por orden de declaración.
# ✅ SIMETRÍA: size(T) == bytes escritos == bytes consumidos.
# 🔒 El caller es dueño del buffer y del cursor; aquí no se retiene nada.


class ShapeTraversal:
    """
    Recorrido recursivo dirigido por la forma del tipo.

    Colaboradores:
    - codec: PrimitiveCodec (Puerto) para el caso base.
    """

    def __init__(self, codec: PrimitiveCodec):
        self._codec = codec

    # ─── Tamaño ───────────────────────────────────────────────────────────

    def size(self, shape: Shape) -> int:
        """Bytes que ocupa la forma. No requiere instancia."""
        if isinstance(shape, PrimitiveShape):
            return self._codec.size(shape.kind)
        if isinstance(shape, ArrayShape):
            return shape.length * self.size(shape.element)
        if isinstance(shape, CompositeShape):
            return sum(self.size(field.shape) for field in shape.fields)
        raise UnsupportedTypeError(f"Forma desconocida: {shape!r}")

    # ─── Lectura ──────────────────────────────────────────────────────────

    def read(self, shape: Shape, buffer: memoryview, cursor: Cursor) -> Any:
        if isinstance(shape, PrimitiveShape):
            return self._codec.read(buffer, cursor, shape.kind)
        if isinstance(shape, ArrayShape):
            return self._read_array(shape, buffer, cursor)
        if isinstance(shape, CompositeShape):
            return self._read_composite(shape, buffer, cursor)
        raise UnsupportedTypeError(f"Forma desconocida: {shape!r}")

    def fill(
        self,
        element: Shape,
        buffer: memoryview,
        cursor: Cursor,
        output: MutableSequence[Any],
    ) -> None:
        """
        Lee un elemento por cada posición de `output` y los asigna en sitio.

        Todos los elementos se leen antes de tocar `output`: si una lectura
        falla, la secuencia del caller queda intacta.
        """
        values = [self.read(element, buffer, cursor) for _ in range(len(output))]
        for index, value in enumerate(values):
            output[index] = value

    def _read_array(
        self, shape: ArrayShape, buffer: memoryview, cursor: Cursor
    ) -> List[Any]:
        return [self.read(shape.element, buffer, cursor) for _ in range(shape.length)]

    def _read_composite(
        self, shape: CompositeShape, buffer: memoryview, cursor: Cursor
    ) -> Any:
        # Builder: acumulamos los valores y construimos al final, así también
        # funcionan las dataclasses frozen.
        values = {
            field.name: self.read(field.shape, buffer, cursor) for field in shape.fields
        }
        return self._build(shape, values)

    @staticmethod
    def _build(shape: CompositeShape, values: dict[str, Any]) -> Any:
        # Cualquier fallo del constructor (incluido __post_init__) es un fallo
        # de construcción del compuesto.
        if shape.keyword_init:
            try:
                return shape.cls(**values)
            except Exception as exc:
                raise FieldAccessError(
                    f"No se pudo construir {shape.name}: {exc}"
                ) from exc

        try:
            instance = shape.cls()
        except Exception as exc:
            raise FieldAccessError(
                f"{shape.name} debe poder construirse sin argumentos: {exc}"
            ) from exc

        for name, value in values.items():
            try:
                setattr(instance, name, value)
            except Exception as exc:
                raise FieldAccessError(
                    f"No se pudo asignar {shape.name}.{name}: {exc}"
                ) from exc
        return instance

    # ─── Escritura ────────────────────────────────────────────────────────

    def write(
        self, shape: Shape, value: Any, buffer: memoryview, cursor: Cursor
    ) -> None:
        if isinstance(shape, PrimitiveShape):
            self._codec.write(value, buffer, cursor, shape.kind)
        elif isinstance(shape, ArrayShape):
            self._write_array(shape, value, buffer, cursor)
        elif isinstance(shape, CompositeShape):
            self._write_composite(shape, value, buffer, cursor)
        else:
            raise UnsupportedTypeError(f"Forma desconocida: {shape!r}")

    def _write_array(
        self, shape: ArrayShape, values: Any, buffer: memoryview, cursor: Cursor
    ) -> None:
        try:
            count = len(values)
        except TypeError as exc:
            raise UnsupportedTypeError(
                f"Se esperaba una secuencia, se recibió {type(values).__name__}"
            ) from exc

        if count != shape.length:
            raise LengthMismatchError(
                f"El arreglo declara {shape.length} elementos, se recibieron {count}"
            )

        # Arreglos de compuestos recorren la misma recursión que los primitivos.
        for item in values:
            self.write(shape.element, item, buffer, cursor)

    def _write_composite(
        self, shape: CompositeShape, instance: Any, buffer: memoryview, cursor: Cursor
    ) -> None:
        for field in shape.fields:
            try:
                value = getattr(instance, field.name)
            except AttributeError as exc:
                raise FieldAccessError(
                    f"{type(instance).__name__} no expone el campo "
                    f"'{field.name}' requerido por {shape.name}"
                ) from exc
            self.write(field.shape, value, buffer, cursor)
