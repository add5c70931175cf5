import numpy as np
import pytest

from ukkonen_index import ConfigurationError, Settings
from ukkonen_index.settings import INDEX_DTYPE, max_edge_count, next_prime


def test_next_prime():
    assert [next_prime(n) for n in (0, 2, 3, 4, 14, 17, 90)] == [2, 2, 3, 5, 17, 17, 97]


def test_automatic_modulus_is_prime_and_large_enough():
    settings = Settings()
    for length in (0, 1, 6, 1000):
        modulus = settings.resolve_modulus(length)
        assert modulus > 2 * max_edge_count(length)
        assert modulus == next_prime(modulus)


def test_configure_rejects_unknown_names():
    with pytest.raises(ConfigurationError):
        Settings().configure(modulo=7)


def test_check_values():
    Settings().check_values(10)
    with pytest.raises(ConfigurationError):
        Settings().configure(shift=-1).check_values(10)
    with pytest.raises(ConfigurationError):
        Settings().configure(modulus=max_edge_count(10)).check_values(10)
    Settings().configure(modulus=max_edge_count(10) + 1).check_values(10)


def test_text_longer_than_index_range_is_rejected():
    with pytest.raises(ConfigurationError):
        Settings().check_values(int(np.iinfo(INDEX_DTYPE).max))


def test_copy_is_independent():
    base = Settings().configure(trace=True)
    duplicate = base.copy()
    duplicate.configure(trace=False)
    assert base.trace is True
