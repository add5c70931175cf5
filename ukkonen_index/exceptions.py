'''Exception hierarchy for the ukkonen_index package.

Query operations never raise on a well-formed tree; everything here signals
either a bad configuration (detected before construction starts) or a defect
in the construction engine itself.
'''


class SuffixTreeError(Exception):
    """Base class for all errors raised by ukkonen_index."""


class ConfigurationError(SuffixTreeError, ValueError):
    """Raised when settings or input bounds cannot support a build."""


class EdgeTableError(SuffixTreeError):
    """Base class for edge table failures."""


class EdgeTableFullError(EdgeTableError):
    """Raised when an insert finds no free slot left in the edge table."""


class DuplicateEdgeError(EdgeTableError):
    """Raised when a node already has an outgoing edge for the inserted first character."""


class ConstructionInvariantError(SuffixTreeError, AssertionError):
    """An edge or suffix link the algorithm guarantees to exist was missing.

    This always indicates a bug in the construction engine and is never
    caught inside the package.
    """
