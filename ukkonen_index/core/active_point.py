'''The active point: Ukkonen's resumable cursor into the tree under construction.'''


class ActivePoint:
    """Current position as a (node, first index, last index) triple.

    The point is explicit when `first_index > last_index` and then sits
    exactly on `current_node`. Otherwise it lies inside the edge leaving
    `current_node` whose label starts with the character at `first_index`,
    `last_index - first_index + 1` characters down that edge.
    """
    __slots__ = ('current_node', 'first_index', 'last_index')

    def __init__(self, current_node: int = 0, first_index: int = 0, last_index: int = -1):
        self.current_node = current_node
        self.first_index = first_index
        self.last_index = last_index

    @property
    def is_explicit(self) -> bool:
        return self.first_index > self.last_index

    @property
    def span(self) -> int:
        """Characters consumed past the first one along the active edge."""
        return self.last_index - self.first_index

    def __repr__(self) -> str:
        return (f"ActivePoint(current_node={self.current_node}, "
                f"first_index={self.first_index}, last_index={self.last_index})")
