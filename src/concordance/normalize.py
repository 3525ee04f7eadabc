from __future__ import annotations
from typing import List, Set

from .config import DELIMITERS


def tokenize(sentence: str) -> List[str]:
    """Split a sentence on the delimiter set. Empty tokens are kept."""
    return DELIMITERS.split(sentence)


def normalize_word(token: str) -> str:
    """Case-normalize a token or a query term."""
    return token.lower()


def sentence_words(sentence: str) -> Set[str]:
    """
    Distinct words of one sentence:
      * split on the delimiter set
      * lower-case every token
      * drop the empty string
    Dedup happens after lower-casing so "The the" yields a single "the".
    """
    words = {normalize_word(tok) for tok in set(tokenize(sentence))}
    words.discard("")
    return words
