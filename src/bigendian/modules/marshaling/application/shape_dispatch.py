# src/bigendian/modules/marshaling/application/shape_dispatch.py
"""
Shape Dispatcher.

Arquitectura: Application Layer
Responsabilidad: Clasificar un tipo como primitivo, arreglo o compuesto y
construir su esquema explícito (una sola vez por clase).
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from decimal import Decimal
from typing import Annotated, Any, ClassVar, get_args, get_origin, get_type_hints

from bigendian.modules.marshaling.domain.exceptions import (
    FieldAccessError,
    UnsupportedTypeError,
)
from bigendian.modules.marshaling.domain.value_objects import (
    Array,
    ArrayShape,
    CompositeShape,
    FieldShape,
    IntKind,
    PrimitiveShape,
    Shape,
)

# === 🧭 Protocolos Arquitectónicos ===
# ✅ DETERMINISMO: El mismo tipo siempre resuelve a la misma forma.
# ✅ CACHE: Los esquemas compuestos de nivel superior se memorizan por clase.
# ❌ CICLOS: Un compuesto que se contiene a sí mismo se rechaza al resolver.
# ❌ VACÍOS: Una clase sin campos anotados (object, date, Any) no es compuesto.

logger = logging.getLogger(__name__)

# Hojas que no son enteros de ancho fijo. `int` sin ancho también se rechaza.
_UNSUPPORTED_LEAVES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    str,
    bytes,
    bytearray,
    dict,
    set,
    frozenset,
    type(None),
)

# Contenedores cuya longitud no se puede conocer antes de leer.
_UNSIZED_SEQUENCES: tuple[type, ...] = (list, tuple)


def resolve(spec: Any) -> Shape:
    """
    Resuelve un tipo a su forma.

    Args:
        spec: IntKind, Array, Annotated[...] con uno de ellos, o una clase
              compuesta (dataclass o clase con atributos anotados).

    Raises:
        UnsupportedTypeError: Tipo flotante, sin ancho, cíclico o desconocido.
        FieldAccessError: Anotaciones de campo que no se pueden resolver.
    """
    return _resolve(spec, frozenset())


@functools.lru_cache(maxsize=256)
def _cached_composite(cls: type) -> CompositeShape:
    return _build_composite(cls, frozenset())


def _resolve(spec: Any, visiting: frozenset[type]) -> Shape:
    # 1. Primitivo
    if isinstance(spec, IntKind):
        return PrimitiveShape(spec)

    # 2. Arreglo
    if isinstance(spec, Array):
        return ArrayShape(_resolve(spec.element, visiting), spec.length)

    # 3. Anotación con metadatos: el primer marcador manda
    if get_origin(spec) is Annotated:
        for meta in spec.__metadata__:
            if isinstance(meta, (IntKind, Array)):
                return _resolve(meta, visiting)
        return _resolve(get_args(spec)[0], visiting)

    if spec is Any:
        raise UnsupportedTypeError("Tipo no soportado: Any no declara un ancho")

    # 4. Compuesto (fallback para cualquier otra clase)
    if get_origin(spec) in _UNSIZED_SEQUENCES or spec in _UNSIZED_SEQUENCES:
        raise UnsupportedTypeError(
            f"Secuencia sin longitud declarada: {spec!r}. Use Array(elemento, n)"
        )

    if isinstance(spec, type):
        if issubclass(spec, _UNSUPPORTED_LEAVES):
            raise UnsupportedTypeError(
                f"Tipo no soportado: {spec.__name__} "
                "(solo enteros de ancho fijo, arreglos y compuestos)"
            )
        if not visiting:
            return _cached_composite(spec)
        return _build_composite(spec, visiting)

    raise UnsupportedTypeError(f"Tipo no soportado: {spec!r}")


def _build_composite(cls: type, visiting: frozenset[type]) -> CompositeShape:
    if cls in visiting:
        raise UnsupportedTypeError(
            f"El compuesto {cls.__name__} se contiene a sí mismo (ciclo)"
        )

    inner = visiting | {cls}
    fields = tuple(
        FieldShape(name, _resolve(annotation, inner))
        for name, annotation in _declared_fields(cls)
    )
    if not fields and not dataclasses.is_dataclass(cls):
        raise UnsupportedTypeError(
            f"Tipo no soportado: {cls.__name__} no tiene campos anotados"
        )
    logger.debug(f"Esquema resuelto para {cls.__name__}: {len(fields)} campos")
    return CompositeShape(
        cls=cls, fields=fields, keyword_init=dataclasses.is_dataclass(cls)
    )


def _declared_fields(cls: type) -> list[tuple[str, Any]]:
    """Pares (nombre, anotación) en orden de declaración."""
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        raise FieldAccessError(
            f"No se pudieron resolver los campos de {cls.__name__}: {exc}"
        ) from exc

    if dataclasses.is_dataclass(cls):
        return [(f.name, hints[f.name]) for f in dataclasses.fields(cls) if f.init]

    return [
        (name, annotation)
        for name, annotation in hints.items()
        if get_origin(annotation) is not ClassVar and annotation is not ClassVar
    ]
