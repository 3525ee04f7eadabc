"""
Index module for the concordance.

This module builds the word concordance of a body of text: an inverted index
that maps every distinct (lower-cased) word to the positions of the sentences
it appears in. The concordance is the only structure the query side needs.
"""

from __future__ import annotations
import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from .models import Concordance
from .normalize import sentence_words

log = logging.getLogger(__name__)


def build(sentences: Sequence[str]) -> Concordance:
    """
    Build a word concordance from an ordered sequence of sentences.

    Each sentence is identified by its zero-based position. Words are obtained
    by splitting on the delimiter set (whitespace, '.', ',', "'", ';'),
    lower-casing, and dropping empty tokens.

    Args:
        sentences (Sequence[str]): The sentences, in order. Never mutated.

    Returns:
        Dict[str, List[int]]: A dictionary mapping each word to the ascending
                              list of sentence positions containing it.

    Note:
        - A word appearing several times in one sentence lists that sentence once
        - Sentences are visited in order, so every list is strictly ascending
        - Empty sentences, or sentences made only of delimiters, add nothing
        - Returns a regular dict rather than defaultdict for cleaner interface

    Example:
        >>> build(["Free", "free; free."])
        {'free': [0, 1]}
    """
    idx: Dict[str, List[int]] = defaultdict(list)

    for i, sentence in enumerate(sentences):
        for word in sentence_words(sentence):
            idx[word].append(i)

    log.debug("Concordance built: sentences=%d words=%d", len(sentences), len(idx))
    return dict(idx)
