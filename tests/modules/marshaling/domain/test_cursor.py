"""
Tests unitarios para la Entidad Cursor.
Foco: Avance monótono y protección de límites del buffer.
"""

import pytest

from bigendian.modules.marshaling.domain.entities import Cursor
from bigendian.modules.marshaling.domain.exceptions import OutOfRangeError


def test_new_cursor_starts_at_zero():
    assert Cursor().offset == 0


def test_claim_returns_start_and_advances():
    """
    Escenario: Se reservan dos bloques consecutivos.
    Resultado: Cada claim retorna su inicio y el cursor queda al final.
    """
    # Arrange
    cursor = Cursor(offset=1)

    # Act
    first = cursor.claim(2, limit=8)
    second = cursor.claim(4, limit=8)

    # Assert
    assert first == 1
    assert second == 3
    assert cursor.offset == 7


def test_claim_exactly_to_the_end_is_allowed():
    cursor = Cursor()
    cursor.claim(4, limit=4)
    assert cursor.offset == 4


def test_claim_past_the_end_raises_and_does_not_advance():
    # Arrange
    cursor = Cursor(offset=2)

    # Act & Assert
    with pytest.raises(OutOfRangeError) as exc:
        cursor.claim(4, limit=4)

    assert "offset 2" in str(exc.value)
    assert cursor.offset == 2


def test_negative_offset_is_rejected():
    with pytest.raises(OutOfRangeError):
        Cursor(offset=-1)
