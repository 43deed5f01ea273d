"""Sentence word reversal.

A single backward scan builds each word by prepending characters and flushes
it into the result when a space is reached. Runs of spaces collapse naturally
because an empty word is never flushed, and leading/trailing spaces produce no
separator in the output.

Only the plain space character separates words. The function is total over
``str`` and has no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReversalResult:
    original: str
    reversed: str
    word_count: int


def _scan(text: str) -> tuple[str, int]:
    result = ""
    word = ""
    count = 0

    for i in range(len(text) - 1, -1, -1):
        ch = text[i]
        if ch != " ":
            word = ch + word
        elif word:
            result += word if not result else " " + word
            count += 1
            word = ""

    if word:
        result += word if not result else " " + word
        count += 1

    return result, count


def reverse_sentence(text: str) -> str:
    reversed_text, _ = _scan(text)
    return reversed_text


# Short name kept for library callers.
reverse = reverse_sentence


def reverse_with_stats(text: str) -> ReversalResult:
    reversed_text, count = _scan(text)
    return ReversalResult(original=text, reversed=reversed_text, word_count=count)
