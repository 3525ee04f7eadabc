# src/e2e/test_index_build.py

import pytest

from concordance.index import build
from concordance.data import DECLARATION
from concordance.normalize import sentence_words, tokenize


def test_case_variants_collapse_to_one_word():
    assert build(["Free", "free"]) == {"free": [0, 1]}


def test_word_repeated_in_a_sentence_is_listed_once():
    assert build(["the the cat"]) == {"the": [0], "cat": [0]}


def test_repeats_differing_only_in_case_are_listed_once():
    assert build(["The cat saw the dog"])["the"] == [0]


def test_every_delimiter_splits():
    assert build(["a,b;c d"]) == {"a": [0], "b": [0], "c": [0], "d": [0]}
    assert build(["it's x.y"]) == {"it": [0], "s": [0], "x": [0], "y": [0]}


def test_consecutive_delimiters_make_no_empty_word():
    conc = build(["one,  two;;three.\tfour"])
    assert "" not in conc
    assert set(conc) == {"one", "two", "three", "four"}


def test_other_punctuation_stays_in_the_word():
    # only whitespace . , ' ; are delimiters
    conc = build(["question: answer!"])
    assert set(conc) == {"question:", "answer!"}


@pytest.mark.parametrize("blank", ["", " ", ".,;' \n"])
def test_blank_sentences_add_nothing_but_keep_positions(blank):
    conc = build([blank, "word"])
    assert conc == {"word": [1]}


def test_empty_input():
    assert build([]) == {}


def test_lists_are_strictly_ascending_and_never_empty():
    conc = build(DECLARATION)
    for word, positions in conc.items():
        assert positions, word
        assert all(a < b for a, b in zip(positions, positions[1:])), word


def test_build_is_deterministic_and_leaves_input_alone():
    sentences = ["The cat sat", "the dog ran", "cats and dogs"]
    copy = list(sentences)
    assert build(sentences) == build(sentences)
    assert sentences == copy


def test_declaration_known_entries():
    conc = build(DECLARATION)
    assert conc["human"] == [0, 39, 49]
    assert conc["enjoy"] == [19, 44, 52]
    assert 0 in conc["free"]


def test_tokenize_keeps_empty_tokens_and_words_drop_them():
    assert tokenize("a,,b") == ["a", "", "b"]
    assert sentence_words("A,,a b") == {"a", "b"}
