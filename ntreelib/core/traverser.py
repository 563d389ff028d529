"""Tree traversal strategies for ntreelib.

Traversers walk a TreeNode tree in a fixed order without modifying it.
Each yields ``(node, depth)`` tuples where depth is relative to the root.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    A node object reached more than once (the same subtree attached in two
    places) is only yielded the first time it is seen.
    """

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.has_children():
                for child in node.children:
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, left to right. This is the order
    ``TreeNode.search_node`` explores the tree in.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: TreeNode, depth: int) -> Iterator[Tuple[TreeNode, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and node.has_children():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Useful for aggregating values upwards.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        visited: Set[int] = set()

        def _traverse_recursive(node: TreeNode, depth: int) -> Iterator[Tuple[TreeNode, int]]:
            if id(node) in visited:
                return
            visited.add(id(node))

            if self._should_explore(depth, max_depth) and node.has_children():
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields the same order as breadth-first, but builds each level completely
    before moving to the next.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        current_level: List[TreeNode] = [root]
        current_depth = 0
        visited: Set[int] = set()

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[TreeNode] = []

            for node in current_level:
                if id(node) in visited:
                    continue
                visited.add(id(node))

                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)

                if self._should_explore(current_depth, max_depth) and node.has_children():
                    next_level.extend(node.children)

            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post, level)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
