"""
Concordance Module

This module builds a word concordance over a body of text (every distinct word
mapped to the positions of the sentences that contain it) and answers word
queries against it.

The module is designed with a clean separation of concerns:
- Tokenization and case normalization
- Concordance building (index)
- Query traversal over a linked list of terms (search)
- Corpus loading from .txt folders and an orchestrating Engine

Main Functions:
    build_concordance(sentences): word -> ascending sentence positions
    search_lines(terms, concordance, sentences): sentences containing any term

Example Usage:
    from concordance import LinkedList, build_concordance, search_lines

    sentences = ["the cat sat", "the dog ran", "cats and dogs"]
    conc = build_concordance(sentences)
    search_lines(LinkedList(["cat", "the"]), conc, sentences)
    # ['the cat sat', 'the dog ran']

Note that a single term missing from the concordance empties the whole result.
"""

# src/concordance/__init__.py
from .index import build as build_concordance
from .search import search_lines
from .linked_list import LinkedList, Node, NoMatchFound
from .loader import load_sentences
from .engine import Engine

__version__ = "1.0.0"
__all__ = [
    "build_concordance",
    "search_lines",
    "LinkedList",
    "Node",
    "NoMatchFound",
    "load_sentences",
    "Engine",
]
