"""Exception types for ntreelib.

Lookups that can legitimately miss (``search_node``, ``remove_child_by_value``)
return ``None`` instead of raising. The exceptions below are reserved for
operations that cannot complete.
"""

from typing import Any, List


class TreeError(Exception):
    """Base class for all ntreelib errors."""
    pass


class NodeNotFoundError(TreeError, LookupError):
    """Raised when no node in the searched subtree holds the requested value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"A node with the value {value!r} does not exist on the tree."
        )


class ChildIndexError(TreeError, IndexError):
    """Raised when a child index is outside ``0 <= index < size``."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Child index {index} out of range for node with {size} children"
        )


class ConfigurationError(TreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
