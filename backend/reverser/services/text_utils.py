from __future__ import annotations

import re


_WS_RE = re.compile(r"\s+")
_SPACES_RE = re.compile(r" +")


def normalize_whitespace(text: str) -> str:
    text = text.replace("\u00a0", " ")
    text = _WS_RE.sub(" ", text)
    return text.strip()


def normalize_spaces(text: str) -> str:
    # Only the plain space is a separator; tabs and newlines stay inside words.
    return _SPACES_RE.sub(" ", text).strip(" ")


def split_words(text: str) -> list[str]:
    return [w for w in text.split(" ") if w]
