'''Build settings for the suffix tree.

`Settings` is a plain attribute bag: defaults are set in the constructor,
`configure()` overrides them by keyword and `check_values()` validates them
against the text about to be indexed. Validation happens before any
construction work so a bad configuration never leaves a half-built tree.
'''
import numpy as np

from .exceptions import ConfigurationError

# dtype of the edge arena and slot arrays; also bounds the indexable text length
INDEX_DTYPE = np.int64


def next_prime(n: int) -> int:
    """Returns the smallest prime greater than or equal to `n`."""
    candidate = max(n, 2)
    while True:
        if candidate < 4:
            return candidate
        if candidate % 2:
            divisor = 3
            while divisor * divisor <= candidate and candidate % divisor:
                divisor += 2
            if divisor * divisor > candidate:
                return candidate
        candidate += 1


def max_edge_count(text_length: int) -> int:
    """Upper bound on the number of edges for a text of `text_length` code units.

    The stored text carries one extra sentinel code unit, so there are at most
    `text_length + 1` leaves and `text_length` internal nodes below the root.
    """
    return 2 * (text_length + 1)


class Settings(object):
    """Tunable parameters for building a suffix tree.

    Attributes:
        shift (int): Left shift applied to the node id when computing an
                     edge table slot key.
        modulus (int | None): Number of edge table slots. `None` picks a prime
                              at least twice the maximum edge count.
        trace (bool): Log every construction step at DEBUG level.
        terminator_symbol (str): How diagnostics display the end-of-text sentinel.
    """
    def __init__(self):
        self.shift = 8
        self.modulus = None
        self.trace = False
        self.terminator_symbol = "$"

    def configure(self, **kwargs):
        for name, value in kwargs.items():
            if not hasattr(self, name):
                raise ConfigurationError(f"Unknown setting '{name}'.")
            setattr(self, name, value)
        return self

    def copy(self) -> 'Settings':
        duplicate = Settings()
        duplicate.configure(**vars(self))
        return duplicate

    def resolve_modulus(self, text_length: int) -> int:
        """Returns the configured modulus, or the automatic prime size for `text_length`."""
        if self.modulus is not None:
            return int(self.modulus)
        return next_prime(2 * max_edge_count(text_length) + 1)

    def check_values(self, text_length: int) -> None:
        """Validates the settings for a text of `text_length` code units.

        Raises:
            ConfigurationError: If the shift is negative, the modulus cannot
                                hold every edge the tree may need, or the text
                                is too long for the index dtype.
        """
        if not isinstance(self.shift, int) or self.shift < 0:
            raise ConfigurationError(f"shift must be a non-negative integer, got {self.shift!r}.")
        if self.modulus is not None and (not isinstance(self.modulus, int) or self.modulus <= 0):
            raise ConfigurationError(f"modulus must be a positive integer, got {self.modulus!r}.")
        if not isinstance(self.terminator_symbol, str):
            raise ConfigurationError("terminator_symbol must be a string.")

        # Node ids, text indices and arena offsets all live in INDEX_DTYPE.
        if max_edge_count(text_length) + 1 > np.iinfo(INDEX_DTYPE).max:
            raise ConfigurationError(
                f"Text of length {text_length} exceeds the index range of {np.dtype(INDEX_DTYPE).name}."
            )

        required = max_edge_count(text_length)
        modulus = self.resolve_modulus(text_length)
        if modulus <= required:
            # At least one slot must stay empty so every probe sequence terminates.
            raise ConfigurationError(
                f"modulus {modulus} is too small: a text of length {text_length} "
                f"may need {required} edges, so at least {required + 1} slots are required."
            )
