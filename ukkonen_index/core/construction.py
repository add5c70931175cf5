'''Suffix tree construction using Ukkonen's algorithm.

This module provides `SuffixTreeBuilder`, which turns a `TextStore` into a
populated `EdgeTable` and `SuffixLinkTable`. The text is fully known up
front, so every leaf edge is created with its final end index (the sentinel
position) and no open-ended "global end" is needed.

Each phase (`add_prefix`) extends every suffix of the text seen so far by one
character. Work inside a phase stops as soon as the new character is found
to be already present below the active point; all shorter suffixes are then
implicitly present too.
'''
import logging

from ..exceptions import ConstructionInvariantError
from ..settings import Settings, max_edge_count
from .active_point import ActivePoint
from .edge_table import Edge, EdgeTable
from .suffix_links import SuffixLinkTable
from .text_store import TextStore

logger = logging.getLogger(__name__)

ROOT = 0


class SuffixTreeBuilder:
    """Runs Ukkonen's algorithm over a fixed text.

    Attributes:
        store (TextStore): The text being indexed.
        edges (EdgeTable): Edges keyed by (origin node, first code unit).
        links (SuffixLinkTable): Suffix links of internal nodes.
        active (ActivePoint): Where the next extension starts.
        node_count (int): Number of nodes allocated so far, root included.
    """
    def __init__(self, store: TextStore, settings: Settings):
        settings.check_values(len(store))
        self.store = store
        self.codes = store.codes
        self.edges = EdgeTable(
            store.codes,
            modulus=settings.resolve_modulus(len(store)),
            shift=settings.shift,
            max_edges=max_edge_count(len(store)),
        )
        self.links = SuffixLinkTable()
        self.active = ActivePoint()
        self.node_count = 1  # The root.
        self._trace = settings.trace

    def build(self) -> 'SuffixTreeBuilder':
        """Runs one phase per stored code unit, sentinel included."""
        for index in range(len(self.codes)):
            self.add_prefix(index)
        logger.debug("Built suffix tree for %d code units: %d nodes, %d edges, %d suffix links",
                     len(self.store), self.node_count, len(self.edges), len(self.links))
        return self

    def _find(self, node: int, index: int) -> Edge:
        """Edge from `node` starting with the code at `index`, which must exist."""
        edge = self.edges.find(node, int(self.codes[index]))
        if edge is None:
            raise ConstructionInvariantError(
                f"No edge from node {node} for code {int(self.codes[index])} (text index {index})."
            )
        return edge

    def _new_edge(self, first_index: int, last_index: int, parent_node: int) -> int:
        node = self.node_count
        self.node_count += 1
        self.edges.insert(Edge(parent_node, node, first_index, last_index))
        return node

    def add_prefix(self, index: int) -> None:
        """Phase `index`: make every suffix of `text[:index + 1]` present in the tree."""
        active = self.active
        code = int(self.codes[index])
        last_parent_node = -1

        while True:
            parent_node = active.current_node
            if active.is_explicit:
                if self.edges.find(active.current_node, code) is not None:
                    break  # Already present below an explicit node.
            else:
                edge = self._find(active.current_node, active.first_index)
                if int(self.codes[edge.first_index + active.span + 1]) == code:
                    break  # Already present inside the active edge.
                parent_node = self.split_edge(edge)

            leaf = self._new_edge(index, self.store.last_index, parent_node)
            if self._trace:
                logger.debug("Phase %d: leaf edge %d -> %d labelled [%d, %d]",
                             index, parent_node, leaf, index, self.store.last_index)

            if last_parent_node > ROOT:
                self._link(last_parent_node, parent_node)
            last_parent_node = parent_node

            if active.current_node == ROOT:
                # The root has no suffix link; drop the first character instead.
                active.first_index += 1
            else:
                target = self.links.follow(active.current_node)
                if self._trace:
                    logger.debug("Phase %d: following suffix link %d -> %d",
                                 index, active.current_node, target)
                active.current_node = target
            self.canonize()

        if last_parent_node > ROOT:
            self._link(last_parent_node, parent_node)
        active.last_index += 1
        self.canonize()

    def _link(self, node: int, target: int) -> None:
        if self._trace:
            logger.debug("Suffix link %d -> %d", node, target)
        self.links.set(node, target)

    def split_edge(self, edge: Edge) -> int:
        """Splits `edge` at the active point and returns the new internal node.

        The upper part keeps the origin node and ends at the new node; the
        original edge keeps its end node and now starts below the split. The
        new node's suffix link points at the origin until a later extension
        replaces it.
        """
        active = self.active
        self.edges.remove(edge)
        internal = self._new_edge(edge.first_index, edge.first_index + active.span, active.current_node)
        self.links.set(internal, active.current_node)
        edge.first_index += active.span + 1
        edge.start_node = internal
        self.edges.insert(edge)
        if self._trace:
            logger.debug("Split edge %d -> %d at index %d; new internal node %d",
                         active.current_node, edge.end_node, edge.first_index, internal)
        return internal

    def canonize(self) -> None:
        """Moves the active point down past every edge its window fully covers."""
        active = self.active
        if active.is_explicit:
            return
        edge = self._find(active.current_node, active.first_index)
        while edge.span <= active.span:
            active.first_index += edge.span + 1
            active.current_node = edge.end_node
            if self._trace:
                logger.debug("Canonize: %r", active)
            if active.is_explicit:
                break
            edge = self._find(active.current_node, active.first_index)
