"""
Ordered Tree -- An unbalanced binary search tree used as an ordered set.

Values must be strictly totally ordered. The tree never stores duplicates and
never rebalances: its shape is whatever the insertion order produces, except
for bulk construction, which sorts its input and inserts by bisection so the
initial tree has minimal height. Removal copies the in-order successor (or
predecessor) into the target node and splices that node out.

Every traversal runs on an explicit stack, so degenerate trees of any depth
are safe to build, compare, print and clear.
"""

import logging
import sys
from typing import TypeVar, Generic, Iterable, List, Optional, TextIO, Tuple

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OrderedTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        if values is not None:
            self._bisection_build(values)

    def insert(self, value: T) -> bool:
        if self._root is None:
            self._root = OrderedTree.Node(value)
            self._size += 1
            return True

        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    self._size += 1
                    return True
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    self._size += 1
                    return True
                node = node.left
            else:
                return False

    def remove(self, value: T) -> bool:
        """Remove ``value``; return False if it was not in the tree.

        A target with a right subtree takes its in-order successor's value, a
        target with only a left subtree takes its in-order predecessor's. The
        node that supplied the value is then spliced out, its single child
        moving up into its place.
        """
        parent: Optional[OrderedTree.Node] = None
        target = self._root
        while target is not None:
            if value < target.value:
                parent = target
                target = target.left
            elif value > target.value:
                parent = target
                target = target.right
            else:
                break

        if target is None:
            return False

        if target.right is not None:
            successor_parent = target
            successor = target.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            target.value = successor.value
            if successor_parent is target:
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            successor.right = None
        elif target.left is not None:
            predecessor_parent = target
            predecessor = target.left
            while predecessor.right is not None:
                predecessor_parent = predecessor
                predecessor = predecessor.right
            target.value = predecessor.value
            if predecessor_parent is target:
                predecessor_parent.left = predecessor.left
            else:
                predecessor_parent.right = predecessor.left
            predecessor.left = None
        elif parent is None:
            self._root = None
        elif parent.left is target:
            parent.left = None
        else:
            parent.right = None

        self._size -= 1
        return True

    def contains(self, value: T) -> bool:
        return self._find_node(value) is not None

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Release every node, children before their parent."""
        released = 0
        stack: List[OrderedTree.Node] = []
        if self._root is not None:
            stack.append(self._root)
        while stack:
            node = stack[-1]
            if node.left is not None:
                child, node.left = node.left, None
                stack.append(child)
            elif node.right is not None:
                child, node.right = node.right, None
                stack.append(child)
            else:
                stack.pop()
                released += 1
        self._root = None
        self._size = 0
        if released:
            logger.debug("Cleared ordered tree, released %d nodes", released)

    def copy(self) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree()
        for value in self._pre_order():
            clone.insert(value)
        return clone

    def move(self) -> 'OrderedTree[T]':
        """Hand this tree's nodes to a new tree, leaving this one empty."""
        moved: OrderedTree[T] = OrderedTree()
        moved._root, moved._size = self._root, self._size
        self._root = None
        self._size = 0
        logger.debug("Moved ordered tree of %d nodes", moved._size)
        return moved

    def equals(self, other: 'OrderedTree[T]') -> bool:
        """Node-for-node comparison of shape and values.

        Two trees holding the same values in different shapes are not equal.
        """
        stack: List[Tuple[Optional[OrderedTree.Node], Optional[OrderedTree.Node]]] = [
            (self._root, other._root)
        ]
        while stack:
            mine, theirs = stack.pop()
            if mine is None and theirs is None:
                continue
            if mine is None or theirs is None:
                return False
            if mine.value != theirs.value:
                return False
            stack.append((mine.right, theirs.right))
            stack.append((mine.left, theirs.left))
        return True

    def is_valid(self) -> bool:
        # Bounds are the ancestor nodes whose values fence this subtree in.
        stack: List[Tuple[OrderedTree.Node, Optional[OrderedTree.Node], Optional[OrderedTree.Node]]] = []
        if self._root is not None:
            stack.append((self._root, None, None))
        while stack:
            node, lower, upper = stack.pop()
            if lower is not None and not lower.value < node.value:
                return False
            if upper is not None and not node.value < upper.value:
                return False
            if node.left is not None:
                stack.append((node.left, lower, node))
            if node.right is not None:
                stack.append((node.right, node, upper))
        return True

    def height(self) -> int:
        levels = 0
        level: List[OrderedTree.Node] = [self._root] if self._root is not None else []
        while level:
            levels += 1
            next_level: List[OrderedTree.Node] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return levels

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the tree sideways: right subtree on top, root at the left margin."""
        out = file if file is not None else sys.stdout
        stack: List[Tuple[OrderedTree.Node, int]] = []
        node = self._root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            out.write(" " * (depth * 4) + str(node.value) + "\n")
            node = node.left
            depth += 1

    def _bisection_build(self, values: Iterable[T]) -> None:
        ordered: List[T] = sorted(values)
        distinct: List[T] = []
        for value in ordered:
            if not distinct or distinct[-1] < value:
                distinct.append(value)
        if len(distinct) != len(ordered):
            logger.debug("Dropped %d duplicate values from bulk input",
                         len(ordered) - len(distinct))

        # Right half is pushed first so ranges pop in pre-order.
        ranges: List[Tuple[int, int]] = [(0, len(distinct))]
        while ranges:
            lower, upper = ranges.pop()
            if lower >= upper:
                continue
            midpoint = (lower + upper) // 2
            self.insert(distinct[midpoint])
            ranges.append((midpoint + 1, upper))
            ranges.append((lower, midpoint))
        logger.debug("Built ordered tree of %d nodes by bisection", self._size)

    def _pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def _find_node(self, value: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if node.value > value:
                node = node.left
            elif node.value < value:
                node = node.right
            else:
                return node
        return None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"OrderedTree(size={self._size}, height={self.height()})"
