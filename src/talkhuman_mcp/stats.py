"""Descriptive statistics reported next to analysis results."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import tiktoken

from .text import split_sentences, split_words


@lru_cache(maxsize=1)
def _encoding() -> tiktoken.Encoding:
    return tiktoken.get_encoding("cl100k_base")


def token_count(text: str) -> int:
    # User text may contain special-token strings such as <|endoftext|>.
    return len(_encoding().encode_ordinary(text))


def text_stats(text: str) -> dict[str, Any]:
    words = split_words(text)
    sentences = split_sentences(text)

    avg_length = round(len(words) / len(sentences), 4) if sentences else None
    density = round(len({w.lower() for w in words}) / len(words), 4) if words else None

    return {
        "word_count": len(words),
        "sentence_count": len(sentences),
        "avg_sentence_length": avg_length,
        "lexical_density": density,
        "token_count": token_count(text),
    }
