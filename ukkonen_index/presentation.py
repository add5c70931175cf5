'''Text renderings of a finished suffix tree for human inspection.

Nothing here is used by construction or querying; both functions only read
the edge table, the suffix link table and the text store.
'''


def _display_label(tree, edge) -> str:
    """Edge label as text, with the sentinel shown as the terminator symbol."""
    label = tree.store.label(edge.first_index, edge.last_index)
    if isinstance(label, bytes):
        label = label.decode('latin-1')
    if edge.last_index == tree.store.last_index:
        label += tree.settings.terminator_symbol
    return label


def dump_edge_table(tree) -> str:
    """Tab-separated listing of every edge in slot order followed by every suffix link.

    Args:
        tree (SuffixTree): A built tree.

    Returns:
        str: The dump, or an empty string if the tree has no edges.
    """
    if len(tree.edges) == 0:
        return ""
    lines = ["Edge\tStart\tEnd\tSuf\tfirst\tlast\tString"]
    for edge in tree.edges:
        suffix = tree.links.get(edge.end_node, -1)
        lines.append(f"\t{edge.start_node}\t{edge.end_node}\t{suffix}\t"
                     f"{edge.first_index}\t{edge.last_index}\t{_display_label(tree, edge)}")
    lines.append("Link\tStart\tEnd")
    for node, target in tree.links.items():
        lines.append(f"\t{node}\t{target}")
    return "\n".join(lines) + "\n"


def render_tree(tree) -> str:
    """Box-drawing diagram of the tree, children ordered by first character.

    The root is printed as `(0)`; every other line is `(<node id>) <edge label>`.
    """
    children = tree.edges.children()
    lines = ["└── (0)"]
    # (edge, prefix, is_last); pushed in reverse so output follows child order.
    stack = [(edge, "    ", i == len(children.get(0, [])) - 1)
             for i, edge in enumerate(children.get(0, []))][::-1]
    while stack:
        edge, prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}({edge.end_node}) {_display_label(tree, edge)}")
        below = children.get(edge.end_node, [])
        child_prefix = prefix + ("    " if is_last else "│   ")
        for i in reversed(range(len(below))):
            stack.append((below[i], child_prefix, i == len(below) - 1))
    return "\n".join(lines) + "\n"
