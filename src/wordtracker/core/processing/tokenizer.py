from __future__ import annotations

"""
Word Tokenizer.

Splits raw text lines into word tokens and derives the lowercase lookup key
used by the ordered tree. Two rule sets are available:

- alnum: letters, digits and apostrophes form words ("don't", "route66").
- alpha: letters only ("don't" yields "don" and "t").
"""

import re
from typing import Dict, Iterator, List, Pattern, Tuple

from wordtracker.domain.constants import DEFAULT_TOKENIZER, TOKENIZER_ALNUM, TOKENIZER_ALPHA

# -----------------------------------------------------------------------------
# RULE SETS
# -----------------------------------------------------------------------------

_SEPARATORS: Dict[str, Pattern[str]] = {
    TOKENIZER_ALNUM: re.compile(r"[^A-Za-z0-9']+"),
    TOKENIZER_ALPHA: re.compile(r"[^A-Za-z]+"),
}


def available_modes() -> List[str]:
    return list(_SEPARATORS.keys())

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tokenize(text: str, mode: str = DEFAULT_TOKENIZER) -> List[str]:
    """
    Split a line of text into word tokens, preserving their casing.

    Args:
        text: Raw line content.
        mode: Rule set identifier ('alnum' or 'alpha').

    Returns:
        List[str]: Non-empty tokens in reading order.

    Raises:
        ValueError: If the mode is unknown.
    """
    separator = _SEPARATORS.get(mode)
    if separator is None:
        raise ValueError(f"Unknown tokenizer mode '{mode}'. Expected one of {available_modes()}.")
    return [tok for tok in separator.split(text) if tok]


def normalize_key(token: str) -> str:
    """Derive the lookup key of a token."""
    return token.lower()


def iter_keyed_tokens(text: str, mode: str = DEFAULT_TOKENIZER) -> Iterator[Tuple[str, str]]:
    """
    Yield (key, display_form) pairs for every token in the text.
    """
    for token in tokenize(text, mode):
        yield normalize_key(token), token
