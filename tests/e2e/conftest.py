# tests/e2e/conftest.py
import pytest


@pytest.fixture
def byte_pattern_factory():
    """
    Factory de buffers con un patrón conocido y relleno alrededor.
    Permite verificar que las lecturas respetan el offset y no tocan el relleno.
    """

    def _create(payload: bytes, prefix: int = 0, suffix: int = 0, fill: int = 0xEE):
        return bytes([fill] * prefix) + payload + bytes([fill] * suffix)

    return _create
