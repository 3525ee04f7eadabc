# src/e2e/test_search_lines.py

import pytest

from concordance import LinkedList, build_concordance, search_lines
from concordance.data import DECLARATION

SENTENCES = ["the cat sat", "the dog ran", "cats and dogs"]


@pytest.fixture
def conc():
    return build_concordance(SENTENCES)


def test_empty_term_list_returns_nothing(conc):
    assert search_lines(LinkedList(), conc, SENTENCES) == []
    assert search_lines([], {}, []) == []


def test_empty_term_list_performs_no_lookup():
    class Exploding(dict):
        def get(self, *a, **kw):
            raise AssertionError("lookup performed")

    assert search_lines(LinkedList([]), Exploding(), SENTENCES) == []


def test_multi_term_without_duplicates(conc):
    out = search_lines(LinkedList(["cat", "the"]), conc, SENTENCES)
    assert out == ["the cat sat", "the dog ran"]


def test_term_order_drives_result_order(conc):
    out = search_lines(LinkedList(["dogs", "the"]), conc, SENTENCES)
    assert out == ["cats and dogs", "the cat sat", "the dog ran"]


def test_terms_are_case_normalized(conc):
    assert search_lines(LinkedList(["CAT"]), conc, SENTENCES) == ["the cat sat"]


def test_one_missing_term_empties_everything():
    sentences = ["cat sat", "dog ran"]
    conc = build_concordance(sentences)
    assert search_lines(LinkedList(["cat", "zzz"]), conc, sentences) == []
    assert search_lines(LinkedList(["zzz", "cat"]), conc, sentences) == []


def test_no_partial_word_matches(conc):
    # "cat" does not match "cats"
    assert search_lines(["cats"], conc, SENTENCES) == ["cats and dogs"]


def test_identical_sentences_are_emitted_once():
    sentences = ["same words here", "other", "same words here"]
    conc = build_concordance(sentences)
    assert conc["same"] == [0, 2]
    assert search_lines(["same", "other"], conc, sentences) == ["same words here", "other"]


def test_inputs_are_not_mutated(conc):
    terms = LinkedList(["cat", "the"])
    before_conc = {k: list(v) for k, v in conc.items()}
    before_sentences = list(SENTENCES)
    search_lines(terms, conc, SENTENCES)
    assert terms.as_list() == ["cat", "the"]
    assert conc == before_conc
    assert SENTENCES == before_sentences


def test_declaration_query():
    conc = build_concordance(DECLARATION)
    out = search_lines(LinkedList(["HUMAN", "free", "enjoy"]), conc, DECLARATION)
    expected_ids = [0, 39, 49, 25, 35, 36, 37, 46, 55, 19, 44, 52]
    assert out == [DECLARATION[i] for i in expected_ids]
    assert len(out) == len(set(out))
