'''Read-only queries over a finished suffix tree.

All traversals use explicit stacks keyed by node id, so deep trees built from
long repetitive texts never hit the interpreter's recursion limit.
'''
import numpy as np

from .edge_table import EdgeTable
from .text_store import TextStore

ROOT = 0


def _match(store: TextStore, edges: EdgeTable, pattern):
    """Walks `pattern` down from the root.

    Returns:
        tuple[int, int] | None: `(node, depth)` for the first node at or below
        the end of the match, where `depth` is that node's string depth; None
        if the pattern does not occur.
    """
    codes = store.encode_pattern(pattern)
    text_codes = store.codes
    node, depth, consumed = ROOT, 0, 0
    while consumed < len(codes):
        edge = edges.find(node, int(codes[consumed]))
        if edge is None:
            return None
        for index in range(edge.first_index, edge.last_index + 1):
            if consumed == len(codes):
                break
            if text_codes[index] != codes[consumed]:
                return None
            consumed += 1
        node, depth = edge.end_node, depth + len(edge)
    return node, depth


def contains_substring(store: TextStore, edges: EdgeTable, pattern) -> bool:
    """True if every character of `pattern` was matched along the tree's edges."""
    return _match(store, edges, pattern) is not None


def suffixes(store: TextStore, edges: EdgeTable) -> list:
    """Enumerates every non-empty suffix of the text in lexicographic order.

    Each leaf corresponds to one suffix of the stored text; the leaf reached
    by the sentinel alone stands for the empty suffix and is skipped.
    """
    children = edges.children()
    found = []
    stack = [(ROOT, store.empty())]
    while stack:
        node, prefix = stack.pop()
        outgoing = children.get(node)
        if not outgoing:
            if prefix:
                found.append(prefix)
            continue
        # Reversed so the smallest first character is popped first.
        for edge in reversed(outgoing):
            stack.append((edge.end_node, prefix + store.label(edge.first_index, edge.last_index)))
    return found


def occurrences(store: TextStore, edges: EdgeTable, pattern) -> list[int]:
    """Start positions of every occurrence of `pattern`, ascending.

    Every leaf below the match point is one occurrence; a leaf at string depth
    `d` is the suffix starting at `len(stored codes) - d`.
    """
    matched = _match(store, edges, pattern)
    if matched is None:
        return []

    children = edges.children()
    stored_length = len(store.codes)
    starts = []
    stack = [matched]
    while stack:
        node, depth = stack.pop()
        outgoing = children.get(node)
        if not outgoing:
            starts.append(stored_length - depth)
            continue
        stack.extend((edge.end_node, depth + len(edge)) for edge in outgoing)

    positions = np.sort(np.asarray(starts, dtype=np.int64))
    # The sentinel-only suffix starts past the end of the text.
    positions = positions[positions < len(store)]
    return positions.tolist()
