"""High-level API for ntreelib.

This module provides simple, functional interfaces for common read-only
operations over a TreeNode tree. These functions wrap the traversers and
TraversalConfig for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy
from .core.node import TreeNode
from .core.traverser import create_traverser
from .errors import ConfigurationError


def walk_tree(root: TreeNode,
              config: Optional[TraversalConfig] = None) -> Iterator[Tuple[TreeNode, int]]:
    """Traverse ``root`` according to ``config``.

    Args:
        root: Starting node for traversal
        config: Traversal configuration (default: depth-first pre-order, no filters)

    Yields:
        Tuples of (node, depth) for nodes passing the filters

    Raises:
        ConfigurationError: If the configuration is invalid. Raised before
            any node is visited.
    """
    config = config or TraversalConfig()

    # Validate eagerly so errors surface at call time, not on first next()
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)

    return _execute(root, config)


def _execute(root: TreeNode, config: TraversalConfig) -> Iterator[Tuple[TreeNode, int]]:
    traverser = create_traverser(config.strategy.value)
    for node, depth in traverser.traverse(
        root,
        max_depth=config.depth.max_depth,
        min_depth=config.depth.min_depth,
    ):
        if config.filter.should_include(node):
            yield node, depth


def traverse_tree(
    root: TreeNode,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[TreeNode], bool]] = None,
    exclude_filter: Optional[Callable[[TreeNode], bool]] = None,
) -> Iterator[TreeNode]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded

    Yields:
        TreeNode instances that match the criteria

    Example:
        >>> root = TreeNode("a", [TreeNode("b"), TreeNode("c")])
        >>> [node.value for node in traverse_tree(root, strategy="bfs")]
        ['a', 'b', 'c']
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
    )
    for node, _ in walk_tree(root, config):
        yield node


def count_nodes(root: TreeNode, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(root: TreeNode,
               predicate: Callable[[TreeNode], bool],
               **kwargs) -> Iterator[TreeNode]:
    """Find nodes that match a predicate.

    Example:
        >>> leaves = find_nodes(root, lambda n: not n.has_children())
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def find_values(root: TreeNode, value: Any, **kwargs) -> Iterator[TreeNode]:
    """Every node whose value equals ``value``, in traversal order.

    Unlike ``TreeNode.search_node`` this reports all matches, including
    duplicates that the single-result search would skip.
    """
    yield from find_nodes(root, lambda node: node.value == value, **kwargs)


def get_leaf_nodes(root: TreeNode, **kwargs) -> Iterator[TreeNode]:
    for node in traverse_tree(root, **kwargs):
        if not node.has_children():
            yield node


def get_tree_paths(root: TreeNode,
                   max_depth: Optional[int] = None) -> Iterator[List[Any]]:
    """Get value paths from root to each node, in pre-order.

    Args:
        root: Starting node for traversal
        max_depth: Maximum depth to descend to

    Yields:
        Lists of node values forming paths from root
    """
    path: List[Any] = []
    for node, depth in walk_tree(root, TraversalConfig(depth=DepthConfig(max_depth=max_depth))):
        del path[depth:]
        path.append(node.value)
        yield list(path)


def get_tree_stats(root: TreeNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Root of the tree

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        max_depth, depths (node count per depth) and average_branching
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for node, depth in walk_tree(root):
        stats['total_nodes'] += 1

        if not node.has_children():
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['height'] = TreeNode.get_height(root)
    # Every node but the root is some internal node's child
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def format_tree(root: TreeNode) -> str:
    """Render a tree as indented text, one node per line.

    Example:
        >>> print(format_tree(TreeNode("a", [TreeNode("b"), TreeNode("c")])))
        a
        ├── b
        └── c
    """
    lines = [str(root.value)]

    def _render(node: TreeNode, prefix: str) -> None:
        for index, child in enumerate(node.children):
            last = index == len(node.children) - 1
            lines.append(f"{prefix}{'└── ' if last else '├── '}{child.value}")
            _render(child, prefix + ('    ' if last else '│   '))

    _render(root, "")
    return "\n".join(lines)


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy alias
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")
