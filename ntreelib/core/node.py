"""TreeNode container for ntreelib.

A TreeNode is simultaneously a node and a tree: the tree is just its root
node. Each node exclusively owns an ordered list of child nodes, and there
are no back-references from a child to its parent.

Ownership is "move, don't alias". A node removed from one parent may be
added under another, but the same node object must never be attached in two
places at once. The container does not check for this, nor for cycles or
duplicate values.
"""

from typing import Generic, Iterable, List, Optional, TypeVar

from loguru import logger

from ..errors import ChildIndexError, NodeNotFoundError

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A generic, unordered N-ary tree node.

    Children keep insertion order. Equality is deep and structural: two nodes
    are equal when their values are equal and their children are equal
    element-wise, recursively.

    Example:
        >>> root = TreeNode("parent")
        >>> root.add_child(TreeNode("child"))
        >>> root.add_child_under("child", TreeNode("grandchild"))
        >>> TreeNode.get_height(root)
        3
    """

    def __init__(self,
                 value: Optional[T] = None,
                 children: Optional[Iterable["TreeNode[T]"]] = None):
        """Create a node.

        Args:
            value: Payload for this node. Left as None by the default form.
            children: Initial children. The sequence is copied, so later
                changes to the caller's sequence do not reach this node.
        """
        self.value: Optional[T] = value
        self.children: List[TreeNode[T]] = list(children) if children is not None else []

    def has_children(self) -> bool:
        """Return True if this node has at least one child."""
        return len(self.children) > 0

    def get_field(self) -> Optional[T]:
        return self.value

    def set_field(self, value: T) -> None:
        self.value = value

    def get_children(self) -> Optional[List["TreeNode[T]"]]:
        """Return the live list of children, or None for a leaf.

        The list returned is the node's own list, not a copy: mutating it
        mutates the node.

        Note:
            An empty child list is reported as None, so callers cannot tell
            "no children" from "empty list". Use ``has_children()`` or the
            ``children`` attribute when that distinction matters.
        """
        if self.has_children():
            return self.children
        return None

    def add_child(self, new_child: "TreeNode[T]") -> None:
        """Append ``new_child`` as the last child of this node."""
        self.children.append(new_child)
        logger.debug(f"Added child {new_child.value!r} under {self.value!r}")

    def add_child_under(self, target_value: T, new_child: "TreeNode[T]") -> None:
        """Append ``new_child`` under the node located by ``search_node``.

        Args:
            target_value: Value of the node that should receive the child.
            new_child: Node to attach.

        Raises:
            NodeNotFoundError: If ``search_node(target_value)`` finds nothing.
                The tree is left unchanged.
        """
        logger.debug(f"Locating parent {target_value!r} for {new_child.value!r}")
        parent = self.search_node(target_value)
        if parent is None:
            logger.warning(f"Parent {target_value!r} not found under {self.value!r}")
            raise NodeNotFoundError(target_value)
        parent.add_child(new_child)

    def search_node(self, search_value: T) -> Optional["TreeNode[T]"]:
        """Depth-first, pre-order search for a node holding ``search_value``.

        The returned node is the live node in the tree, so it can be used to
        modify the tree in place.

        Resolution works as follows. This node becomes the candidate if it
        matches. Then, for each child in order, a child whose own value
        matches is returned at once; otherwise the candidate is replaced by
        the result of searching that child's subtree, even when that result
        is None. A match on this node therefore only survives when it has no
        children.

        Args:
            search_value: Value to look for.

        Returns:
            The located node, or None.
        """
        located = None
        if self.value == search_value:
            located = self

        for child in self.children:
            if child.value == search_value:
                return child
            located = child.search_node(search_value)

        return located

    def remove_child(self, index: int) -> "TreeNode[T]":
        """Remove and return the direct child at ``index``.

        Later children shift down to close the gap. Negative indices are
        rejected rather than counted from the end.

        Raises:
            ChildIndexError: If ``index`` is not a valid child position.
        """
        if not 0 <= index < len(self.children):
            raise ChildIndexError(index, len(self.children))
        removed = self.children.pop(index)
        logger.debug(f"Removed child {removed.value!r} from {self.value!r} at index {index}")
        return removed

    def remove_child_by_value(self, search_value: T) -> Optional["TreeNode[T]"]:
        """Remove a node holding ``search_value`` from this node's subtree.

        The first direct child whose value matches is removed and returned.
        Failing that, each child's subtree is searched in order and the result
        of the last child searched is returned. An earlier successful removal
        is still performed but its node is reported only if no later sibling
        follows it.

        Returns:
            The removed node, or None.
        """
        for index, child in enumerate(self.children):
            if child.value == search_value:
                return self.remove_child(index)

        located = None
        for child in self.children:
            located = child.remove_child_by_value(search_value)
        return located

    @staticmethod
    def get_height(node: Optional["TreeNode"]) -> int:
        """Height of the subtree rooted at ``node``.

        None has height 0 and a leaf has height 1. Recomputed on every call.
        """
        if node is None:
            return 0
        current_max = 0
        for child in node.children:
            current_max = max(current_max, TreeNode.get_height(child))
        return current_max + 1

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.value == other.value and self.children == other.children

    def __hash__(self) -> int:
        return hash((self.value, tuple(self.children)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r}, children={self.children!r})"
