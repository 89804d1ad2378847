# src/bigendian/modules/marshaling/__init__.py
"""
Módulo de Marshaling big-endian.
"""

from __future__ import annotations

# Application
from .application.shape_dispatch import resolve
from .application.traversal import ShapeTraversal
from .application.use_cases import Marshaler

# Domain
from .domain.entities import Cursor
from .domain.exceptions import (
    FieldAccessError,
    LengthMismatchError,
    MarshalError,
    OutOfRangeError,
    UnsupportedTypeError,
)
from .domain.ports.codec import PrimitiveCodec
from .domain.value_objects import (
    Array,
    IntKind,
    i8,
    i16,
    i32,
    i64,
    u8,
    u16,
    u32,
    u64,
)

# Infrastructure
from .infrastructure.observability import ObservabilityService, configure_logging
from .infrastructure.struct_codec import StructPrimitiveCodec

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
    "Cursor",
    "PrimitiveCodec",
    "MarshalError",
    "UnsupportedTypeError",
    "OutOfRangeError",
    "FieldAccessError",
    "LengthMismatchError",
    "resolve",
    "ShapeTraversal",
    "Marshaler",
    "StructPrimitiveCodec",
    "ObservabilityService",
    "configure_logging",
]
