# src/bigendian/modules/marshaling/application/use_cases.py
"""
Casos de Uso del Marshaler big-endian.

Arquitectura: Application Layer
Responsabilidad: Exponer SizeOf / Read / Write sobre un único recorrido,
creando el Cursor y el buffer de cada llamada.
"""

from __future__ import annotations

from typing import (
    Any,
    Iterable,
    List,
    MutableSequence,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from bigendian.modules.marshaling.application.shape_dispatch import resolve
from bigendian.modules.marshaling.application.traversal import ShapeTraversal
from bigendian.modules.marshaling.domain.entities import Cursor
from bigendian.modules.marshaling.domain.exceptions import (
    LengthMismatchError,
    UnsupportedTypeError,
)
from bigendian.modules.marshaling.domain.ports.codec import PrimitiveCodec
from bigendian.modules.marshaling.domain.value_objects import Array, Shape

# ✅ Instrumentación: Latencia y Errores automáticamente
from bigendian.modules.marshaling.infrastructure.observability import (
    ObservabilityService,
)
from bigendian.modules.marshaling.infrastructure.struct_codec import (
    StructPrimitiveCodec,
)

Source = Union[bytes, bytearray, memoryview, Iterable[int]]
Target = Union[bytearray, memoryview]


class Marshaler:
    """
    Caso de Uso: serializar y deserializar valores tipados en big-endian.

    No guarda estado entre llamadas: cada operación crea su propio Cursor,
    así que una misma instancia puede usarse desde varios hilos siempre que
    cada llamada use su propio buffer.

    Colaboradores:
    - codec: PrimitiveCodec (Puerto)
    """

    def __init__(self, codec: Optional[PrimitiveCodec] = None):
        """
        Inyectar la implementación del códec de primitivos (Dependency Injection).
        """
        self._traversal = ShapeTraversal(codec or StructPrimitiveCodec())

    # ─── SizeOf ───────────────────────────────────────────────────────────

    @ObservabilityService.measure_latency(operation_name="marshal.size_of")
    def size_of(self, spec: Any) -> int:
        """Bytes que ocupa `spec`, sin necesidad de una instancia."""
        return self._traversal.size(resolve(spec))

    @ObservabilityService.measure_latency(operation_name="marshal.size_of_value")
    def size_of_value(self, value: Any) -> int:
        """
        Tamaño del tipo de una instancia compuesta.

        Raises:
            UnsupportedTypeError: Para enteros y secuencias, que no llevan ancho.
        """
        if isinstance(value, (int, list, tuple)):
            raise UnsupportedTypeError(
                f"Un {type(value).__name__} no declara su ancho; use size_of(tipo)"
            )
        return self._traversal.size(resolve(type(value)))

    # ─── Read ─────────────────────────────────────────────────────────────

    @ObservabilityService.measure_latency(operation_name="marshal.read")
    def read(self, spec: Any, buffer: Source, offset: int = 0) -> Any:
        """
        Deserializa un valor de tipo `spec` a partir de `offset`.

        Raises:
            OutOfRangeError: Si el buffer no alcanza.
            UnsupportedTypeError: Si el tipo no es serializable.
        """
        value, _ = self._read_from(spec, buffer, offset)
        return value

    @ObservabilityService.measure_latency(operation_name="marshal.read_from")
    def read_from(self, spec: Any, buffer: Source, offset: int = 0) -> Tuple[Any, int]:
        """Igual que read(), pero retorna también el offset avanzado."""
        return self._read_from(spec, buffer, offset)

    @ObservabilityService.measure_latency(operation_name="marshal.read_array")
    def read_array(
        self,
        spec: Any,
        buffer: Source,
        length: int,
        offset: int = 0,
    ) -> List[Any]:
        """Deserializa `length` valores consecutivos de tipo `spec`."""
        values, _ = self._read_from(Array(spec, length), buffer, offset)
        return values

    @ObservabilityService.measure_latency(operation_name="marshal.read_array_into")
    def read_array_into(
        self,
        spec: Any,
        buffer: Source,
        output: MutableSequence[Any],
        offset: int = 0,
    ) -> int:
        """
        Llena en sitio cada posición de una secuencia ya dimensionada.

        Returns:
            El offset tras el último elemento leído.
        """
        source = _readable(buffer)
        cursor = Cursor(offset)
        self._traversal.fill(resolve(spec), source, cursor, output)
        return cursor.offset

    def _read_from(self, spec: Any, buffer: Source, offset: int) -> Tuple[Any, int]:
        shape = resolve(spec)
        source = _readable(buffer)
        cursor = Cursor(offset)
        value = self._traversal.read(shape, source, cursor)
        return value, cursor.offset

    # ─── Write ────────────────────────────────────────────────────────────

    @ObservabilityService.measure_latency(operation_name="marshal.write")
    def write(self, spec: Any, value: Any) -> bytes:
        """Serializa en un buffer nuevo dimensionado con size_of(spec)."""
        return bytes(self._serialize(resolve(spec), value))

    @ObservabilityService.measure_latency(operation_name="marshal.write_into")
    def write_into(self, spec: Any, value: Any, buffer: Target, offset: int = 0) -> int:
        """
        Serializa en sitio dentro de un buffer del caller.

        Returns:
            El offset tras el último byte escrito.

        Raises:
            OutOfRangeError: Si el buffer es demasiado chico en `offset`.
            TypeError: Si el buffer no es escribible.
        """
        return self._write_staged(resolve(spec), value, buffer, offset)

    @ObservabilityService.measure_latency(operation_name="marshal.write_array")
    def write_array(self, spec: Any, values: Sequence[Any]) -> bytes:
        """Serializa una secuencia completa en un buffer nuevo."""
        return bytes(self._serialize(resolve(Array(spec, len(values))), values))

    @ObservabilityService.measure_latency(operation_name="marshal.write_array_into")
    def write_array_into(
        self,
        spec: Any,
        values: Sequence[Any],
        buffer: Target,
        offset: int = 0,
        length: Optional[int] = None,
    ) -> int:
        """
        Serializa una secuencia en sitio.

        Args:
            length: Longitud esperada; si se indica y no coincide con
                    len(values), falla con LengthMismatchError.
        """
        if length is not None and len(values) != length:
            raise LengthMismatchError(
                f"Se esperaban {length} elementos, se recibieron {len(values)}"
            )

        shape = resolve(Array(spec, len(values)))
        return self._write_staged(shape, values, buffer, offset)

    def _serialize(self, shape: Shape, value: Any) -> bytearray:
        output = bytearray(self._traversal.size(shape))
        self._traversal.write(shape, value, memoryview(output), Cursor(0))
        return output

    def _write_staged(
        self, shape: Shape, value: Any, buffer: Target, offset: int
    ) -> int:
        """
        Escritura en sitio de todo o nada.

        El rango se reserva antes de serializar y los bytes se arman en un
        buffer temporal: el destino solo se toca cuando todo salió bien.
        """
        target = _writable(buffer)
        size = self._traversal.size(shape)
        start = Cursor(offset).claim(size, len(target))
        staged = self._serialize(shape, value)
        target[start : start + size] = staged
        return start + size


# === Helpers de buffer ===


def _readable(buffer: Source) -> memoryview:
    """Vista de solo lectura en bytes; nunca muta la entrada."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return memoryview(buffer).cast("B").toreadonly()
    if isinstance(buffer, int):
        raise TypeError("El buffer de entrada debe ser una secuencia de bytes, no un int")
    return memoryview(bytes(buffer))


def _writable(buffer: Target) -> memoryview:
    if isinstance(buffer, (bytearray, memoryview)):
        view = memoryview(buffer)
        if not view.readonly:
            return view.cast("B")
    raise TypeError(
        "El buffer de destino debe ser escribible (bytearray), "
        f"no {type(buffer).__name__}"
    )
