'''Public interface to the suffix tree index.

This module provides the `SuffixTree` class, which builds a suffix tree for a
fixed text with Ukkonen's algorithm (see `core.construction`) and answers
substring, suffix and occurrence queries against it (see `core.query`).

It also exposes the same operations as module-level functions:

- `build(text, settings=None, **overrides)` constructs the index.
- `contains_substring(tree, pattern)` tests whether `pattern` occurs.
- `suffixes(tree)` lists every suffix of the text.
- `occurrences(tree, pattern)` lists every start position of `pattern`.
- `dump_edge_table(tree)` and `render_tree(tree)` produce diagnostics.

Typical usage is to build once and query many times; the tree is never
modified after construction and can be shared read-only between threads.
'''
from . import presentation
from .core import query
from .core.construction import SuffixTreeBuilder
from .core.text_store import TextStore
from .settings import Settings


class SuffixTree:
    '''A suffix tree over a fixed `str` or bytes-like text.

    Attributes:
        settings (Settings): The settings the tree was built with.
        store (TextStore): The indexed text and its code units.
        edges (EdgeTable): Edges keyed by (origin node, first code unit).
        links (SuffixLinkTable): Suffix links of the internal nodes.
    '''
    def __init__(self, text, settings: Settings | None = None):
        """Builds the tree.

        Args:
            text: The text to index. An empty text gives a tree with no suffixes.
            settings: Build settings. Defaults to `Settings()`.

        Raises:
            TypeError: If `text` is not `str`, `bytes` or `bytearray`.
            ConfigurationError: If the settings cannot support a text of this length.
        """
        self.settings = settings if settings is not None else Settings()
        self.store = TextStore(text)
        builder = SuffixTreeBuilder(self.store, self.settings).build()
        self.edges = builder.edges
        self.links = builder.links
        self.node_count = builder.node_count

    @property
    def text(self):
        """The indexed text."""
        return self.store.text

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, pattern) -> bool:
        return self.contains_substring(pattern)

    def contains_substring(self, pattern) -> bool:
        """Checks if `pattern` occurs in the text.

        Args:
            pattern: A `str` for a `str` tree, bytes-like for a bytes tree.
                     The empty pattern occurs in every text.

        Returns:
            True if the pattern is found, False otherwise.

        Raises:
            TypeError: If the pattern's type does not match the text's.
        """
        return query.contains_substring(self.store, self.edges, pattern)

    def suffixes(self) -> list:
        """All non-empty suffixes of the text, in lexicographic order."""
        return query.suffixes(self.store, self.edges)

    def occurrences(self, pattern) -> list[int]:
        """Start indices of every occurrence of `pattern`, ascending."""
        return query.occurrences(self.store, self.edges, pattern)

    def dump_edge_table(self) -> str:
        return presentation.dump_edge_table(self)

    def render_tree(self) -> str:
        return presentation.render_tree(self)

    def display(self) -> None:
        """Prints the tree diagram for debugging."""
        print(self.render_tree(), end="")

    def __str__(self) -> str:
        return self.render_tree()

    def __repr__(self) -> str:
        return f"SuffixTree(text={self.text!r}, nodes={self.node_count}, edges={self.edge_count})"


def build(text, settings: Settings | None = None, **overrides) -> SuffixTree:
    """Builds a `SuffixTree` for `text`.

    Args:
        text: The text to index.
        settings: Base settings; copied, never modified. Defaults to `Settings()`.
        **overrides: Setting values to change for this build, e.g. `trace=True`.
    """
    effective = settings.copy() if settings is not None else Settings()
    if overrides:
        effective.configure(**overrides)
    return SuffixTree(text, effective)


def contains_substring(tree: SuffixTree, pattern) -> bool:
    return tree.contains_substring(pattern)


def suffixes(tree: SuffixTree) -> list:
    return tree.suffixes()


def occurrences(tree: SuffixTree, pattern) -> list[int]:
    return tree.occurrences(pattern)


def dump_edge_table(tree: SuffixTree) -> str:
    return tree.dump_edge_table()


def render_tree(tree: SuffixTree) -> str:
    return tree.render_tree()


# Example usage:
if __name__ == '__main__':
    print("SuffixTree Example")
    tree = build("banana")
    print(f"Text: '{tree.text}' (len: {len(tree)}, nodes: {tree.node_count}, edges: {tree.edge_count})")
    tree.display()

    patterns_to_find = ["ban", "ana", "nan", "nana", "apple", "banana$", ""]
    for p in patterns_to_find:
        print(f"Pattern '{p}': {'Found' if p in tree else 'Not Found'} at {tree.occurrences(p)}")

    print(f"Suffixes: {tree.suffixes()}")
    print(tree.dump_edge_table())
