
from __future__ import annotations
import logging
import re
import string
from typing import Dict, List

logger = logging.getLogger(__name__)

# ASCII word class plus the whitespace that survives stripping
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_NON_WORD = re.compile(r"[^A-Za-z0-9_ \t\n\r\f]")

def is_word_char(ch: str) -> bool:
    """True for ASCII letters, digits and underscore."""
    return ch in _WORD_CHARS

def normalize(text: str) -> str:
    """Lowercase `text` and drop everything that is neither a word char nor whitespace."""
    return _NON_WORD.sub("", text.lower())

def tokenize(text: str) -> List[str]:
    return normalize(text).split()

def word_frequency(text: str) -> Dict[str, int]:
    """Return lowercase word -> number of occurrences in `text`.

    Punctuation next to a word is removed before splitting, so "Four," and
    "four" land on the same key. Empty input gives an empty dict.
    """
    freq: Dict[str, int] = {}
    for word in tokenize(text):
        freq[word] = freq.get(word, 0) + 1
    logger.debug("counted %d words, %d unique", total_words(freq), len(freq))
    return freq

def total_words(freq: Dict[str, int]) -> int:
    return sum(freq.values())
