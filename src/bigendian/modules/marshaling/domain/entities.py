# src/bigendian/modules/marshaling/domain/entities.py
"""
Entidades del dominio de Marshaling.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Gestionar el único estado mutable de un recorrido: la
posición dentro del buffer.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import OutOfRangeError

# === Guía de Organización ===
# ✅ ESTADO: El offset solo avanza a través de claim() (nunca retrocede).
# ✅ PROPIEDAD: Cada llamada de nivel superior crea su propio Cursor.
# ❌ SIN ESTADO GLOBAL: Nunca compartir un Cursor entre llamadas o hilos.


@dataclass
class Cursor:
    """
    Cursor explícito que se pasa por referencia a través de la recursión.

    Cada paso consume bytes y avanza el mismo cursor, de modo que el offset
    final de una lectura/escritura es el offset inicial más el tamaño del tipo.
    """

    offset: int = 0

    def __post_init__(self):
        if self.offset < 0:
            raise OutOfRangeError(f"El offset no puede ser negativo: {self.offset}")

    def claim(self, width: int, limit: int) -> int:
        """
        Reserva `width` bytes a partir de la posición actual.

        Args:
            width: Cantidad de bytes a consumir.
            limit: Longitud total del buffer.

        Returns:
            La posición de inicio reservada.

        Raises:
            OutOfRangeError: Si offset + width excede el buffer.
        """
        start = self.offset
        end = start + width
        if end > limit:
            raise OutOfRangeError(
                f"Se requieren {width} bytes en el offset {start}, "
                f"pero el buffer tiene {limit}"
            )
        self.offset = end
        return start
