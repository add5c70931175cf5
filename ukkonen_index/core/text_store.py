'''Fixed text storage for suffix tree construction.

The text is kept twice: the original Python object (used to slice labels
back out in the caller's type) and a numpy array of integer code units used
by the algorithm. A sentinel code that no input can produce is appended to
the code array so that every suffix of the text ends at a leaf.
'''
import numpy as np

from ..settings import INDEX_DTYPE

SENTINEL = -1  # Code points and byte values are never negative.


def encode(sequence) -> np.ndarray:
    """Converts a `str`, `bytes` or `bytearray` into an array of code units.

    Args:
        sequence: The text or pattern to convert.

    Returns:
        A one-dimensional `INDEX_DTYPE` array; code points for `str`,
        byte values for bytes-like input.

    Raises:
        TypeError: If `sequence` is not a string or bytes-like object.
    """
    if isinstance(sequence, str):
        return np.fromiter((ord(ch) for ch in sequence), dtype=INDEX_DTYPE, count=len(sequence))
    if isinstance(sequence, (bytes, bytearray)):
        return np.frombuffer(bytes(sequence), dtype=np.uint8).astype(INDEX_DTYPE)
    raise TypeError(f"Expected str, bytes or bytearray, got {type(sequence).__name__}.")


class TextStore:
    """Read-only random access to the indexed text.

    Attributes:
        text (str | bytes): The original input (bytearray input is frozen to bytes).
        codes (np.ndarray): Code units of `text` followed by `SENTINEL`.
    """
    __slots__ = ('text', 'codes')

    def __init__(self, text):
        codes = encode(text)
        self.text = bytes(text) if isinstance(text, bytearray) else text
        self.codes = np.append(codes, INDEX_DTYPE(SENTINEL))
        self.codes.setflags(write=False)

    def __len__(self) -> int:
        """Length of the input text, sentinel excluded."""
        return len(self.text)

    @property
    def last_index(self) -> int:
        """Index of the sentinel, i.e. the last stored position."""
        return len(self.codes) - 1

    def code_at(self, index: int) -> int:
        return int(self.codes[index])

    def encode_pattern(self, pattern) -> np.ndarray:
        """Encodes a query pattern, requiring the same text family as the stored text."""
        if isinstance(self.text, str) != isinstance(pattern, str):
            raise TypeError(
                f"Pattern of type {type(pattern).__name__} cannot be searched in a "
                f"{type(self.text).__name__} text."
            )
        return encode(pattern)

    def label(self, first_index: int, last_index: int):
        """Returns the text between two inclusive indices, sentinel excluded."""
        return self.text[first_index:min(last_index, len(self.text) - 1) + 1]

    def empty(self):
        """An empty value of the same type as the stored text."""
        return self.text[:0]
