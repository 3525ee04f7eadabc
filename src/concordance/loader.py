from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .config import ENCODING, FILE_SUFFIX, PROGRESS_EVERY_FILES, TEXT_UNIT, TEXT_UNITS, VERBOSE_ENV

log = logging.getLogger(__name__)


def _verbose() -> bool:
    return os.environ.get(VERBOSE_ENV) == "1"


def _iter_txt_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield *.txt paths recursively under each root, in a stable order."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(FILE_SUFFIX):
                    yield os.path.join(dirpath, fn)


def _line_units(lines: List[str]) -> Iterable[str]:
    # blank lines are kept: they are sentences that contribute no words
    yield from lines


def _paragraph_units(lines: List[str]) -> Iterable[str]:
    block: List[str] = []
    for raw in lines:
        if raw.strip() == "":
            if block:
                yield " ".join(block)
                block = []
        else:
            block.append(raw.strip())
    if block:
        yield " ".join(block)


def read_lines(f: Iterable[str]) -> List[str]:
    """Physical lines of an open text file, without their EOL."""
    # only \n, \r and \r\n end a line; \x0c, \x85 and \u2028 stay inside it
    return [ln.rstrip("\r\n") for ln in f]


def read_units(lines: List[str], unit: str | None = None) -> List[str]:
    """Group the physical lines of one document into sentences according to the text unit."""
    unit = (unit or TEXT_UNIT).lower()
    if unit == "line":
        return list(_line_units(lines))
    if unit == "paragraph":
        return list(_paragraph_units(lines))
    raise ValueError(f"Unsupported text unit: {unit!r} (expected one of {TEXT_UNITS})")


def load_sentences(roots: List[str], unit: str | None = None) -> List[str]:
    """
    Scan roots for *.txt and return their sentences in file order.
    unit: "line" (default) or "paragraph" (blank-line separated, joined by a space).
    """
    unit = (unit or TEXT_UNIT).lower()
    if unit not in TEXT_UNITS:
        raise ValueError(f"Unsupported text unit: {unit!r} (expected one of {TEXT_UNITS})")

    for root in roots:
        if not os.path.isdir(root):
            raise FileNotFoundError(f"Corpus root is not a directory: {root}")

    sentences: List[str] = []
    file_count = 0
    for path in _iter_txt_files(roots):
        try:
            with open(path, "r", encoding=ENCODING, errors="ignore") as f:
                raw_lines = read_lines(f)
        except OSError as exc:
            log.warning("Skipping unreadable file %s: %s", path, exc)
            continue

        sentences.extend(read_units(raw_lines, unit))

        file_count += 1
        if _verbose() and file_count % PROGRESS_EVERY_FILES == 0:
            print(f"[scanned] files={file_count:,}")

    if _verbose():
        print(f"[done] files={file_count:,} sentences={len(sentences):,}")
    log.info("Loaded %d sentences from %d files", len(sentences), file_count)
    return sentences
