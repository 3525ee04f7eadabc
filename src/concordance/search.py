from __future__ import annotations
import logging
from typing import Iterable, List, Sequence, Set

from .models import Concordance
from .normalize import normalize_word

log = logging.getLogger(__name__)


def search_lines(terms: Iterable[str], concordance: Concordance, sentences: Sequence[str]) -> List[str]:
    """
    Return every sentence containing any of `terms`.

    Order: query terms in iteration order, then ascending sentence position.
    A sentence is emitted once, for the first term that reaches it
    (compared by text, so identical sentences at two positions appear once).

    All-or-nothing: if any term is missing from the concordance the whole
    search returns [], discarding what was already collected.
    An empty `terms` also yields [] without any lookup.

    `terms` may be a LinkedList or any ordered iterable of strings.
    Nothing passed in is mutated.
    """
    result: List[str] = []
    seen: Set[str] = set()

    for term in terms:
        word = normalize_word(term)
        positions = concordance.get(word)
        if positions is None:
            log.debug("Term %r not in concordance; search aborted", word)
            return []

        for i in positions:
            sentence = sentences[i]
            if sentence in seen:
                continue
            seen.add(sentence)
            result.append(sentence)

    return result
