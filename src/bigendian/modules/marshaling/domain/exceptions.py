# src/bigendian/modules/marshaling/domain/exceptions.py
"""
Excepciones del dominio de Marshaling.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos del códec, independientes de la
infraestructura de empaquetado.

Política: se lanzan en el punto de detección y suben sin capturarse por toda
la recursión. No hay resultados parciales ni reintentos.
"""


class MarshalError(Exception):
    """Clase base para errores en el módulo de marshaling."""

    pass


class UnsupportedTypeError(MarshalError):
    """El tipo no es primitivo, arreglo ni compuesto con campos accesibles."""

    pass


class OutOfRangeError(MarshalError):
    """Una lectura o escritura accedería a bytes fuera del buffer."""

    pass


class FieldAccessError(MarshalError):
    """Un campo del compuesto no se puede leer, asignar o construir."""

    pass


class LengthMismatchError(MarshalError):
    """La cantidad de elementos no coincide con la longitud declarada."""

    pass
