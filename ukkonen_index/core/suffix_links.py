'''Sparse suffix link storage keyed by internal node id.'''
from ..exceptions import ConstructionInvariantError


class SuffixLinkTable:
    """Maps an internal node id to the node reached by its suffix link.

    Only internal nodes created by a split ever get an entry; the root and
    leaves never do.
    """
    __slots__ = ('_links',)

    def __init__(self):
        self._links: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._links)

    def __contains__(self, node: int) -> bool:
        return node in self._links

    def set(self, node: int, target: int) -> None:
        self._links[node] = target

    def get(self, node: int, default: int | None = None) -> int | None:
        return self._links.get(node, default)

    def follow(self, node: int) -> int:
        """Returns the link target of `node`, which the algorithm guarantees exists."""
        try:
            return self._links[node]
        except KeyError:
            raise ConstructionInvariantError(f"Node {node} has no suffix link to follow.") from None

    def items(self):
        """(node, target) pairs in ascending node order."""
        return sorted(self._links.items())
