# concordance/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional, Sequence, Union

from . import config as CFG
from . import index
from .data import DECLARATION
from .linked_list import LinkedList
from .loader import load_sentences
from .models import Concordance, Corpus
from .normalize import normalize_word
from .search import search_lines

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - a corpus source (explicit sentences, .txt roots, or the bundled text),
      - the word concordance (index.build),
      - the query side (search.search_lines).

    Public API (used by CLI/GUI):
      * load(sentences):      build the concordance over given sentences
      * load_roots(roots):    read .txt files, then load()
      * search(words):        sentences containing any of the words (all-or-nothing)
      * lookup(word):         sentence positions for one word
    """

    # ------------- lifecycle -------------

    def __init__(self, *, verbose: bool = False) -> None:
        self.corpus: Optional[Corpus] = None
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

    # /* ~~~ Build a concordance over an in-memory sequence of sentences ~~~ */
    def load(self, sentences: Optional[Iterable[str]] = None) -> Corpus:
        # no sentences -> the bundled declaration
        frozen = tuple(DECLARATION if sentences is None else sentences)
        log.info("Building concordance over %d sentences", len(frozen))
        self.corpus = Corpus(sentences=frozen, concordance=index.build(frozen))
        log.info("Engine load() complete: words=%d", len(self.corpus.concordance))
        return self.corpus

    # /* ~~~ Read sentences from .txt files under the given roots ~~~ */
    def load_roots(self, roots: Iterable[str], *, unit: Optional[str] = None) -> Corpus:
        roots = list(roots)
        if not roots:
            raise ValueError("load_roots(): at least one root folder is required")
        log.info("Loading corpus from %s", roots)
        return self.load(load_sentences(roots, unit=unit))

    # ------------- query -------------

    @property
    def concordance(self) -> Concordance:
        return self._require().concordance

    @property
    def sentences(self) -> Sequence[str]:
        return self._require().sentences

    def search(self, words: Union[str, Iterable[str]]) -> List[str]:
        corpus = self._require()
        if isinstance(words, str):
            # "human free" -> ["human", "free"], not one term per character
            words = words.split()
        terms = words if isinstance(words, LinkedList) else LinkedList(words)
        rows = search_lines(terms, corpus.concordance, corpus.sentences)
        log.info("Search %s -> %d sentences", terms, len(rows))
        return rows

    def lookup(self, word: str) -> List[int]:
        """Sentence positions for one word ([] when absent)."""
        return list(self._require().concordance.get(normalize_word(word), []))

    # ------------- internals -------------

    def _require(self) -> Corpus:
        if self.corpus is None:
            raise RuntimeError("Engine not initialized. Call load() or load_roots() first.")
        return self.corpus
