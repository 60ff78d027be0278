"""Sentence, word and list-line tokenizers used by the analyzer."""

from __future__ import annotations

import re
from collections.abc import Iterable


_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NUMBERED_LINE_RE = re.compile(r"\s*[0-9]+\.")

BULLET_MARKERS = ("-", "•", "*")


def split_sentences(text: str) -> list[str]:
    """Split on runs of ``.``, ``!`` and ``?``; blank segments are dropped."""

    return [part.strip() for part in _SENTENCE_SPLIT_RE.split(text) if part.strip()]


def split_words(text: str) -> list[str]:
    return text.split()


def sentence_starts(sentences: Iterable[str]) -> list[str]:
    """Lowercased first word of each sentence, skipping sentences with no words."""

    starts: list[str] = []
    for sentence in sentences:
        words = sentence.split()
        if words:
            starts.append(words[0].lower())
    return starts


def count_bullet_lines(text: str) -> int:
    """Lines whose first non-whitespace character is a bullet marker."""

    return sum(1 for line in text.splitlines() if line.lstrip().startswith(BULLET_MARKERS))


def count_numbered_lines(text: str) -> int:
    """Lines of the form ``<whitespace><digits>.``."""

    return sum(1 for line in text.splitlines() if _NUMBERED_LINE_RE.match(line))
