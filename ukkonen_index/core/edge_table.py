'''Open-addressed edge table for the suffix tree.

This module provides the `Edge` record and the `EdgeTable` that indexes edges
by (origin node, first code unit of the label). The table is a flat numpy
slot array resolved by linear probing; every edge lives in an arena indexed
by its end node id, which is unique per edge.

Removal uses backward-shift compaction: after a slot is emptied, later
entries of the same probe run are moved back so that no lookup ever stops
early at the hole.
'''
import numpy as np

from ..exceptions import ConstructionInvariantError, DuplicateEdgeError, EdgeTableFullError
from ..settings import INDEX_DTYPE

EMPTY = -1


class Edge:
    """Represents an edge in the suffix tree.

    The label is the inclusive range `[first_index, last_index]` of the text
    store. An `Edge` returned by `EdgeTable.find` is a copy of the stored
    record; changes only take effect when the edge is inserted again.

    Attributes:
        start_node (int): Id of the node the edge leaves from (root is 0).
        end_node (int): Id of the node the edge leads to. Unique per edge.
        first_index (int): Index of the first label character.
        last_index (int): Index of the last label character.
    """
    __slots__ = ('start_node', 'end_node', 'first_index', 'last_index')

    def __init__(self, start_node: int, end_node: int, first_index: int, last_index: int):
        self.start_node = start_node
        self.end_node = end_node
        self.first_index = first_index
        self.last_index = last_index

    @property
    def span(self) -> int:
        """Number of label characters after the first one."""
        return self.last_index - self.first_index

    def __len__(self) -> int:
        return self.span + 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.start_node, self.end_node, self.first_index, self.last_index) == \
               (other.start_node, other.end_node, other.first_index, other.last_index)

    def __hash__(self) -> int:
        return hash((self.start_node, self.end_node, self.first_index, self.last_index))

    def __repr__(self) -> str:
        return (f"Edge(start_node={self.start_node}, end_node={self.end_node}, "
                f"first_index={self.first_index}, last_index={self.last_index})")


class EdgeTable:
    """Maps (node, first code unit) to the single outgoing edge it identifies.

    Attributes:
        codes (np.ndarray): Code units of the stored text, used to read the
                            first character of an edge label.
        modulus (int): Number of slots.
        shift (int): Left shift applied to the node id in the slot key.
    """
    def __init__(self, codes: np.ndarray, modulus: int, shift: int, max_edges: int):
        """Initializes an empty table.

        Args:
            codes: Code units of the stored text.
            modulus: Number of slots; must exceed `max_edges`.
            shift: Node id shift for the slot key.
            max_edges: Arena size. End node ids range over `1..max_edges`.
        """
        self.codes = codes
        self.modulus = modulus
        self.shift = shift
        self._slots = np.full(modulus, EMPTY, dtype=INDEX_DTYPE)
        # Arena columns, indexed by end node id. Slot 0 belongs to the root and stays unused.
        self._start_node = np.full(max_edges + 1, EMPTY, dtype=INDEX_DTYPE)
        self._first_index = np.zeros(max_edges + 1, dtype=INDEX_DTYPE)
        self._last_index = np.zeros(max_edges + 1, dtype=INDEX_DTYPE)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        """Maximum number of edges; one slot always stays empty so probes terminate."""
        return self.modulus - 1

    def home(self, node: int, code: int) -> int:
        """Slot where the probe sequence for (node, code) begins."""
        return ((node << self.shift) + code) % self.modulus

    def _edge_at(self, edge_id: int) -> Edge:
        return Edge(int(self._start_node[edge_id]), edge_id,
                    int(self._first_index[edge_id]), int(self._last_index[edge_id]))

    def _key_of(self, edge_id: int):
        return int(self._start_node[edge_id]), int(self.codes[self._first_index[edge_id]])

    def insert(self, edge: Edge) -> None:
        """Stores `edge` in the first free slot of its probe sequence.

        Raises:
            DuplicateEdgeError: If the origin node already has an edge starting
                                with the same code unit.
            EdgeTableFullError: If no free slot is left.
        """
        if self._count >= self.capacity:
            raise EdgeTableFullError(f"Edge table with {self.modulus} slots is full.")

        key = (edge.start_node, int(self.codes[edge.first_index]))
        slot = self.home(*key)
        while self._slots[slot] != EMPTY:
            occupant = int(self._slots[slot])
            if self._key_of(occupant) == key:
                raise DuplicateEdgeError(
                    f"Node {edge.start_node} already has edge {occupant} for code {key[1]}."
                )
            slot = (slot + 1) % self.modulus

        self._start_node[edge.end_node] = edge.start_node
        self._first_index[edge.end_node] = edge.first_index
        self._last_index[edge.end_node] = edge.last_index
        self._slots[slot] = edge.end_node
        self._count += 1

    def find(self, node: int, code: int) -> Edge | None:
        """Returns the edge leaving `node` whose label starts with `code`, or None."""
        key = (node, code)
        slot = self.home(node, code)
        while self._slots[slot] != EMPTY:
            occupant = int(self._slots[slot])
            if self._key_of(occupant) == key:
                return self._edge_at(occupant)
            slot = (slot + 1) % self.modulus
        return None

    def remove(self, edge: Edge) -> None:
        """Deletes `edge` and compacts the probe run that followed it.

        Raises:
            ConstructionInvariantError: If `edge` is not stored in the table.
        """
        slot = self.home(edge.start_node, int(self.codes[edge.first_index]))
        while self._slots[slot] != edge.end_node:
            if self._slots[slot] == EMPTY:
                raise ConstructionInvariantError(f"Cannot remove {edge!r}: not in edge table.")
            slot = (slot + 1) % self.modulus

        self._slots[slot] = EMPTY
        self._start_node[edge.end_node] = EMPTY
        self._count -= 1

        vacated = slot
        while True:
            slot = (slot + 1) % self.modulus
            occupant = self._slots[slot]
            if occupant == EMPTY:
                return
            home = self.home(*self._key_of(int(occupant)))
            # The occupant stays put when its home lies cyclically in (vacated, slot].
            if vacated < slot:
                stays = vacated < home <= slot
            else:
                stays = home > vacated or home <= slot
            if stays:
                continue
            self._slots[vacated] = occupant
            self._slots[slot] = EMPTY
            vacated = slot

    def __iter__(self):
        """Yields stored edges in slot order."""
        for edge_id in self._slots[self._slots != EMPTY]:
            yield self._edge_at(int(edge_id))

    def children(self) -> dict:
        """Groups every stored edge under its origin node.

        Returns:
            dict[int, list[Edge]]: Origin node id -> outgoing edges sorted by
            the first code unit of their labels.
        """
        edge_ids = self._slots[self._slots != EMPTY]
        if edge_ids.size == 0:
            return {}
        origins = self._start_node[edge_ids]
        first_codes = self.codes[self._first_index[edge_ids]]
        order = np.lexsort((first_codes, origins))

        grouped: dict[int, list[Edge]] = {}
        for edge_id in edge_ids[order]:
            edge = self._edge_at(int(edge_id))
            grouped.setdefault(edge.start_node, []).append(edge)
        return grouped
