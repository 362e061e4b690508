from __future__ import annotations

"""
Ordered Tree Structural Models.

Provides the node type used by the ordered tree. A node stores one element
and owns at most two children; it carries no behavior of its own.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

E = TypeVar("E")

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode(Generic[E]):
    """
    Represents a single slot of the binary search tree.

    Attributes:
        element: The stored value.
        left: Child holding strictly smaller elements.
        right: Child holding strictly greater elements.
    """
    element: E
    left: Optional["TreeNode[E]"] = None
    right: Optional["TreeNode[E]"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def detach(self) -> None:
        """Drop both child links so the node stands alone."""
        self.left = None
        self.right = None
