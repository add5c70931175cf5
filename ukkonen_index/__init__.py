'''Initialize ukkonen_index, exposing the suffix tree and its query functions.'''

from .suffix_tree import (
    SuffixTree, build, contains_substring, suffixes, occurrences,
    dump_edge_table, render_tree
)
from .settings import Settings
from .exceptions import (
    SuffixTreeError, ConfigurationError, EdgeTableError, EdgeTableFullError,
    DuplicateEdgeError, ConstructionInvariantError
)

__all__ = [
    'SuffixTree', 'build', 'contains_substring', 'suffixes', 'occurrences',
    'dump_edge_table', 'render_tree',
    'Settings',
    'SuffixTreeError', 'ConfigurationError', 'EdgeTableError', 'EdgeTableFullError',
    'DuplicateEdgeError', 'ConstructionInvariantError'
]
