from collections import Counter

import pytest

from reverser.services.reverse import ReversalResult, reverse, reverse_sentence, reverse_with_stats
from reverser.services.text_utils import normalize_spaces, split_words


SAMPLES = [
    "",
    " ",
    "   ",
    "hello",
    "hey I am prathamesh",
    "a   b",
    "  a b  ",
    " leading",
    "trailing ",
    "one  two   three    four",
    "tab\tinside word",
    "line\nbreak kept",
    "ünïcödé wörds ✓ here",
    "punctuation, stays! attached?",
    "x " * 50,
]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("   ", ""),
        ("hello", "hello"),
        ("hey I am prathamesh", "prathamesh am I hey"),
        ("a   b", "b a"),
        ("  a b  ", "b a"),
    ],
)
def test_reverse_sentence_examples(text, expected):
    assert reverse_sentence(text) == expected


def test_reverse_is_the_same_operation():
    assert reverse is reverse_sentence


def test_only_plain_space_separates_words():
    assert reverse_sentence("a\tb c") == "c a\tb"
    assert reverse_sentence("first\nsecond third") == "third first\nsecond"


@pytest.mark.parametrize("text", SAMPLES)
def test_output_has_no_edge_or_double_spaces(text):
    out = reverse_sentence(text)
    assert not out.startswith(" ")
    assert not out.endswith(" ")
    assert "  " not in out


@pytest.mark.parametrize("text", SAMPLES)
def test_reverse_twice_returns_normalized_input(text):
    normalized = normalize_spaces(text)
    assert reverse_sentence(reverse_sentence(normalized)) == normalized


@pytest.mark.parametrize("text", SAMPLES)
def test_words_are_preserved(text):
    assert Counter(split_words(reverse_sentence(text))) == Counter(split_words(text))


@pytest.mark.parametrize("text", SAMPLES)
def test_matches_split_reverse_join(text):
    assert reverse_sentence(text) == " ".join(reversed(split_words(text)))


def test_reverse_with_stats_counts_words():
    result = reverse_with_stats("  hey I   am prathamesh ")
    assert result == ReversalResult(
        original="  hey I   am prathamesh ",
        reversed="prathamesh am I hey",
        word_count=4,
    )


@pytest.mark.parametrize("text", SAMPLES)
def test_reverse_with_stats_agrees_with_reverse_sentence(text):
    result = reverse_with_stats(text)
    assert result.reversed == reverse_sentence(text)
    assert result.word_count == len(split_words(text))
