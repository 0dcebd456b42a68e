import pytest
from qpath import Trimming


@pytest.fixture
def every_trimming() -> list[Trimming]:
    """All eight combinations of the named trimming options."""
    return [Trimming.from_bits(bits) for bits in range(8)]
