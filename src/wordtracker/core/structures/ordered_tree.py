from __future__ import annotations

"""
Ordered Tree (Unbalanced Binary Search Tree).

Generic ordered container keyed by an injected three-way comparison
function. Provides insertion without duplicates, point lookup, extremal
removal and snapshot traversals (in-order, pre-order, post-order).

The tree never rebalances: inserting keys in sorted order degenerates it
into a list whose height equals its size. Traversals and height are
therefore computed with explicit work stacks rather than recursion.

No internal locking is performed. Hosts sharing a tree across threads must
serialize add/remove_min/remove_max/clear themselves.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from wordtracker.domain.errors import EmptyTreeError, InvalidArgumentError, TreeInvariantError
from wordtracker.domain.tree_models import TreeNode

E = TypeVar("E")

Comparator = Callable[[Any, Any], int]

# -----------------------------------------------------------------------------
# COMPARISON
# -----------------------------------------------------------------------------

def natural_compare(a: Any, b: Any) -> int:
    """
    Three-way comparison based on the natural '<' and '>' operators.

    Returns:
        int: Negative if a < b, zero if equal, positive if a > b.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

# -----------------------------------------------------------------------------
# TRAVERSAL SNAPSHOT
# -----------------------------------------------------------------------------

class TraversalIterator(Generic[E]):
    """
    Finite, restartable iterator over a traversal captured at creation time.

    Holds its own copy of the element sequence, so later mutation of the
    tree does not affect an iterator already handed out.
    """

    def __init__(self, elements: Iterable[E]) -> None:
        self._data: List[E] = list(elements)
        self._index = 0

    def __iter__(self) -> "TraversalIterator[E]":
        return self

    def __next__(self) -> E:
        if self._index >= len(self._data):
            raise StopIteration
        item = self._data[self._index]
        self._index += 1
        return item

    def __len__(self) -> int:
        return len(self._data)

    def has_next(self) -> bool:
        return self._index < len(self._data)

    def reset(self) -> None:
        """Rewind to the first element of the snapshot."""
        self._index = 0

    def to_list(self) -> List[E]:
        return list(self._data)

# -----------------------------------------------------------------------------
# ORDERED TREE ADT
# -----------------------------------------------------------------------------

class OrderedTree(Generic[E]):
    """
    Comparison-ordered binary search tree without duplicate keys.

    For every node, all elements of its left subtree compare strictly less
    and all elements of its right subtree compare strictly greater.
    """

    def __init__(
            self,
            compare: Optional[Comparator] = None,
            elements: Optional[Iterable[E]] = None,
    ) -> None:
        """
        Initialize an empty tree, optionally seeding it with elements.

        Args:
            compare: Three-way comparison function. Defaults to natural ordering.
            elements: Values to insert in iteration order. Duplicates are skipped.
        """
        self._compare: Comparator = compare or natural_compare
        self._root: Optional[TreeNode[E]] = None
        self._size = 0

        if elements is not None:
            for element in elements:
                self.add(element)

    # --- Introspection ---

    @property
    def compare(self) -> Comparator:
        return self._compare

    @property
    def root(self) -> Optional[TreeNode[E]]:
        return self._root

    def get_root(self) -> TreeNode[E]:
        """
        Return the root node of a non-empty tree.

        Raises:
            EmptyTreeError: If the tree holds no elements.
        """
        if self._root is None:
            raise EmptyTreeError("Tree is empty")
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """
        Count the levels of the tree (0 when empty, 1 for a lone root).

        Walks level by level so degenerate trees do not exhaust the stack.
        """
        if self._root is None:
            return 0

        levels = 0
        frontier: List[TreeNode[E]] = [self._root]
        while frontier:
            levels += 1
            next_frontier: List[TreeNode[E]] = []
            for node in frontier:
                if node.left is not None:
                    next_frontier.append(node.left)
                if node.right is not None:
                    next_frontier.append(node.right)
            frontier = next_frontier
        return levels

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # --- Lookup ---

    def contains(self, element: E) -> bool:
        return self.search(element) is not None

    def search(self, element: E) -> Optional[TreeNode[E]]:
        """
        Locate the node whose element compares equal to the probe.

        Args:
            element: Probe value.

        Returns:
            Optional[TreeNode[E]]: The matching node, or None when absent.

        Raises:
            InvalidArgumentError: If element is None.
        """
        self._require_element(element)

        current = self._root
        while current is not None:
            cmp = self._compare(element, current.element)
            if cmp == 0:
                return current
            current = current.left if cmp < 0 else current.right
        return None

    # --- Mutation ---

    def add(self, element: E) -> bool:
        """
        Insert an element unless an equal one is already stored.

        Args:
            element: Value to insert.

        Returns:
            bool: True if inserted, False on an exact-key duplicate (no change).

        Raises:
            InvalidArgumentError: If element is None.
        """
        self._require_element(element)

        if self._root is None:
            self._root = TreeNode(element)
            self._size = 1
            return True

        parent = self._root
        while True:
            cmp = self._compare(element, parent.element)
            if cmp == 0:
                return False
            if cmp < 0:
                if parent.left is None:
                    parent.left = TreeNode(element)
                    break
                parent = parent.left
            else:
                if parent.right is None:
                    parent.right = TreeNode(element)
                    break
                parent = parent.right

        self._size += 1
        return True

    def remove_min(self) -> Optional[TreeNode[E]]:
        """
        Detach and return the node holding the smallest element.

        The removed node's right child takes its place. The returned node
        has both links cleared.

        Returns:
            Optional[TreeNode[E]]: The detached node, or None on an empty tree.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[E]] = None
        current = self._root
        while current.left is not None:
            parent = current
            current = current.left

        if parent is None:
            self._root = current.right
        else:
            parent.left = current.right

        self._size -= 1
        current.detach()
        return current

    def remove_max(self) -> Optional[TreeNode[E]]:
        """
        Detach and return the node holding the largest element.

        The removed node's left child takes its place. The returned node
        has both links cleared.

        Returns:
            Optional[TreeNode[E]]: The detached node, or None on an empty tree.
        """
        if self._root is None:
            return None

        parent: Optional[TreeNode[E]] = None
        current = self._root
        while current.right is not None:
            parent = current
            current = current.right

        if parent is None:
            self._root = current.left
        else:
            parent.right = current.left

        self._size -= 1
        current.detach()
        return current

    # --- Traversals ---

    def inorder_iterator(self) -> TraversalIterator[E]:
        """Snapshot of the elements in ascending order."""
        out: List[E] = []
        stack: List[TreeNode[E]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            out.append(current.element)
            current = current.right
        return TraversalIterator(out)

    def preorder_iterator(self) -> TraversalIterator[E]:
        """Snapshot of the elements in root, left, right order."""
        out: List[E] = []
        stack: List[TreeNode[E]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.element)
            # Right pushed first so the left subtree is emitted first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return TraversalIterator(out)

    def postorder_iterator(self) -> TraversalIterator[E]:
        """Snapshot of the elements in left, right, root order."""
        out: List[E] = []
        stack: List[TreeNode[E]] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.element)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        # root, right, left reversed is left, right, root
        out.reverse()
        return TraversalIterator(out)

    # --- Diagnostics ---

    def verify(self) -> None:
        """
        Check the ordering invariant and the tracked size.

        Raises:
            TreeInvariantError: If any node violates the ordering bounds
                inherited from its ancestors, or if the node count differs
                from size().
        """
        count = 0
        pending: List[Tuple[TreeNode[E], Optional[TreeNode[E]], Optional[TreeNode[E]]]] = []
        if self._root is not None:
            pending.append((self._root, None, None))

        while pending:
            node, low, high = pending.pop()
            count += 1
            if count > self._size:
                raise TreeInvariantError(
                    f"Node count exceeds tracked size {self._size}"
                )
            if low is not None and self._compare(node.element, low.element) <= 0:
                raise TreeInvariantError(
                    f"Element {node.element!r} is not greater than ancestor {low.element!r}"
                )
            if high is not None and self._compare(node.element, high.element) >= 0:
                raise TreeInvariantError(
                    f"Element {node.element!r} is not less than ancestor {high.element!r}"
                )
            if node.left is not None:
                pending.append((node.left, low, node))
            if node.right is not None:
                pending.append((node.right, node, high))

        if count != self._size:
            raise TreeInvariantError(
                f"Tracked size {self._size} does not match node count {count}"
            )

    # --- Python protocol ---

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[E]:
        return self.inorder_iterator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"

    # --- Private helpers ---

    @staticmethod
    def _require_element(element: Any) -> None:
        if element is None:
            raise InvalidArgumentError("Null entry")
