from __future__ import annotations

"""
Domain Error Taxonomy.

Defines the exception hierarchy raised by the ordered tree, the word
entities and the repository layer. Soft conditions (duplicate keys,
extraction from an empty tree) are reported through return values and
never appear here.
"""


class WordTrackerError(Exception):
    """Base class for every error raised by the word tracker."""


class InvalidArgumentError(WordTrackerError, ValueError):
    """An absent or malformed value was passed to a core operation."""


class PreconditionViolationError(WordTrackerError, RuntimeError):
    """The caller asserted a state the structure is not in."""


class EmptyTreeError(PreconditionViolationError):
    """Root access was requested on a tree with no elements."""


class TreeInvariantError(WordTrackerError, AssertionError):
    """The binary search tree ordering or bookkeeping is corrupted."""


class RepositorySchemaError(WordTrackerError, ValueError):
    """A persisted repository payload does not match the expected schema."""
