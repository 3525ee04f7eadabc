from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

# word -> ascending sentence indices (never empty)
Concordance = Dict[str, List[int]]


@dataclass(frozen=True)
class Corpus:
    sentences: Tuple[str, ...]   # position in the tuple is the sentence id
    concordance: Concordance     # built once from `sentences`, read-only afterwards

    def __len__(self) -> int:
        return len(self.sentences)
