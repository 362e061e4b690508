from __future__ import annotations

"""
Word Indexing Service.

Feeds tokens into the ordered tree with a find-or-create-then-annotate
upsert: the normalized key is probed with contains/search, a new WordEntry
is added on first sight, and the occurrence is appended to whichever entry
resolved. The tree is only ever touched through its public operations.
"""

import logging
import os
from contextlib import nullcontext
from typing import ContextManager, Iterable, Optional

from wordtracker.core.processing.tokenizer import iter_keyed_tokens, tokenize
from wordtracker.core.structures.ordered_tree import OrderedTree
from wordtracker.domain.constants import DEFAULT_TOKENIZER
from wordtracker.domain.errors import InvalidArgumentError
from wordtracker.domain.word_models import WordEntry, compare_entries
from wordtracker.infra.fs import iter_string_lines, iter_text_lines

logger = logging.getLogger(__name__)


def new_word_tree() -> OrderedTree[WordEntry]:
    """Create an empty tree ordered by word key."""
    return OrderedTree(compare_entries)


class Indexer:
    """
    Records word occurrences into an OrderedTree of WordEntry.

    An optional lock (any context manager, typically threading.Lock) is
    held for the duration of every upsert when the host shares the tree
    between threads. Without one, no synchronization happens.
    """

    def __init__(
            self,
            tree: Optional[OrderedTree[WordEntry]] = None,
            *,
            tokenizer_mode: str = DEFAULT_TOKENIZER,
            lock: Optional[ContextManager] = None,
    ) -> None:
        # Fail fast on an unknown rule set rather than on the first line
        tokenize("", tokenizer_mode)

        self.tree: OrderedTree[WordEntry] = tree if tree is not None else new_word_tree()
        self.tokenizer_mode = tokenizer_mode
        self._lock: ContextManager = lock if lock is not None else nullcontext()
        self.tokens_recorded = 0

    # -------------------------------------------------------------------------
    # CORE ENTRY POINT
    # -------------------------------------------------------------------------

    def record(self, key: str, display_form: str, source: str, line: int) -> WordEntry:
        """
        Register one occurrence of a word.

        Args:
            key: Normalized lookup key.
            display_form: Original token, kept only if the key is new.
            source: Source identifier the occurrence belongs to.
            line: 1-based line number.

        Returns:
            WordEntry: The entry the occurrence was appended to.

        Raises:
            InvalidArgumentError: If key or source is empty, or line is not positive.
        """
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("Word key must be a non-empty string")
        if not isinstance(source, str) or not source:
            raise InvalidArgumentError("Source identifier must be a non-empty string")
        if isinstance(line, bool) or not isinstance(line, int) or line < 1:
            raise InvalidArgumentError(f"Line number must be a positive integer, got {line!r}")

        with self._lock:
            probe = WordEntry.probe(key)
            entry: Optional[WordEntry] = None

            if self.tree.contains(probe):
                node = self.tree.search(probe)
                if node is not None:
                    entry = node.element

            if entry is None:
                entry = WordEntry(key, display_form or key)
                self.tree.add(entry)

            entry.add_occurrence(source, line)
            self.tokens_recorded += 1

        return entry

    # -------------------------------------------------------------------------
    # TEXT HELPERS
    # -------------------------------------------------------------------------

    def index_line(self, text: str, source: str, line: int) -> int:
        """
        Tokenize a single line and record each token.

        Returns:
            int: Number of tokens recorded.
        """
        recorded = 0
        for key, token in iter_keyed_tokens(text, self.tokenizer_mode):
            self.record(key, token, source, line)
            recorded += 1
        return recorded

    def index_lines(self, lines: Iterable[str], source: str, start: int = 1) -> int:
        """
        Record every token of a sequence of lines, numbering them from start.

        Returns:
            int: Number of tokens recorded.
        """
        recorded = 0
        for line_no, text in enumerate(lines, start=start):
            recorded += self.index_line(text, source, line_no)
        return recorded

    def index_text(self, text: str, source: str) -> int:
        """Record every token of a multi-line string."""
        return self.index_lines(iter_string_lines(text), source)

    def index_file(self, path: str, source: Optional[str] = None) -> int:
        """
        Read a text file and record its tokens.

        Args:
            path: File to scan.
            source: Identifier to record occurrences under. Defaults to path.

        Returns:
            int: Number of tokens recorded.

        Raises:
            OSError: If the file cannot be read.
        """
        source_id = source or path
        logger.debug(f"Indexing '{path}' as source '{source_id}'")

        recorded = self.index_lines(iter_text_lines(path), source_id)

        logger.info(
            f"Indexed {recorded} tokens from {os.path.basename(path)} "
            f"({self.tree.size()} distinct words in tree)"
        )
        return recorded
