"""ntreelib - Generic N-ary Tree Container.

ntreelib provides a recursive, generic tree container where every node holds
one value and an ordered list of child nodes. A tree is simply its root node.

    from ntreelib import TreeNode

    root = TreeNode("parent")
    root.add_child(TreeNode("child"))
    root.add_child_under("child", TreeNode("grandchild"))
    TreeNode.get_height(root)  # 3

Read-only helpers for walking a tree live in ``ntreelib.api``; log output is
off until ``ntreelib.log.enable_logging()`` is called.
"""

from loguru import logger

__version__ = "0.1.0"

from .core.node import TreeNode
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .config import TraversalConfig, TraversalStrategy, DepthConfig, FilterConfig
from .errors import TreeError, NodeNotFoundError, ChildIndexError, ConfigurationError
from .api import (
    walk_tree,
    traverse_tree,
    count_nodes,
    find_nodes,
    find_values,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    format_tree,
)
from .log import enable_logging, disable_logging

# Silent unless the application opts in
logger.disable("ntreelib")

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    "FilterConfig",
    # Errors
    "TreeError",
    "NodeNotFoundError",
    "ChildIndexError",
    "ConfigurationError",
    # API
    "walk_tree",
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "find_values",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    "format_tree",
    # Logging
    "enable_logging",
    "disable_logging",
]
