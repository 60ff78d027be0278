"""Heuristic detector for AI-sounding prose.

``analyze`` runs a fixed pipeline of lexical and structural checks over a
string and returns the findings in pipeline order. It is pure: the only
state it reads is the (immutable) RuleSet it is given.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .rules import DEFAULT_RULES, RuleSet
from .text import (
    count_bullet_lines,
    count_numbered_lines,
    sentence_starts,
    split_sentences,
    split_words,
)


CLICHE_PHRASES = "cliche_phrases"
REPETITIVE_STARTS = "repetitive_starts"
OVERLY_FORMAL = "overly_formal"
LIST_HEAVY = "list_heavy"
LONG_SENTENCES = "long_sentences"
LOW_DENSITY = "low_density"
GENERIC_LANGUAGE = "generic_language"
HEDGING = "hedging"
WORD_COMPLEXITY = "word_complexity"

FINDING_KINDS = (
    CLICHE_PHRASES,
    REPETITIVE_STARTS,
    OVERLY_FORMAL,
    LIST_HEAVY,
    LONG_SENTENCES,
    LOW_DENSITY,
    GENERIC_LANGUAGE,
    HEDGING,
    WORD_COMPLEXITY,
)

SLOP_SUMMARY = "AI slop detected. Revise the text to sound more human and natural."
CLEAN_SUMMARY = "No obvious AI slop detected. Text appears human-like."


@dataclass(frozen=True)
class Finding:
    kind: str
    message: str
    matches: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "matches": list(self.matches)}


@dataclass(frozen=True)
class AnalysisResult:
    findings: tuple[Finding, ...] = ()

    @property
    def has_slop(self) -> bool:
        return len(self.findings) > 0

    @property
    def summary(self) -> str:
        return SLOP_SUMMARY if self.has_slop else CLEAN_SUMMARY

    @property
    def messages(self) -> list[str]:
        return [finding.message for finding in self.findings]

    def kinds(self) -> list[str]:
        return [finding.kind for finding in self.findings]

    def to_payload(self) -> dict[str, Any]:
        """JSON shape returned by the HTTP check endpoint."""
        return {"hasSlop": self.has_slop, "findings": self.messages, "message": self.summary}


def _contained(phrases: tuple[str, ...], lowered: str) -> list[str]:
    return [phrase for phrase in phrases if phrase in lowered]


def _fixed(value: float, places: int) -> str:
    """Format with ties rounded away from zero, matching JavaScript's toFixed."""
    step = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def _cliche_finding(lowered: str, rules: RuleSet) -> Finding | None:
    found = _contained(rules.cliche_phrases, lowered)
    if not found:
        return None
    return Finding(CLICHE_PHRASES, f"AI cliché phrases: {', '.join(found)}", tuple(found))


def _repetition_finding(sentences: list[str], rules: RuleSet) -> Finding | None:
    counts = Counter(sentence_starts(sentences))
    # Counter keeps first-encounter order.
    repeated = [word for word, count in counts.items() if count >= rules.repetition_min_count]
    if not repeated:
        return None
    return Finding(
        REPETITIVE_STARTS,
        f"Repetitive sentence starts: {', '.join(repeated)}",
        tuple(repeated),
    )


def _formality_finding(lowered: str, rules: RuleSet) -> Finding | None:
    found = _contained(rules.formality_markers, lowered)
    if len(found) < rules.formality_min_matches:
        return None
    return Finding(OVERLY_FORMAL, f"Overly formal: {', '.join(found)}", tuple(found))


def _list_finding(text: str, rules: RuleSet) -> Finding | None:
    bullets = count_bullet_lines(text)
    numbered = count_numbered_lines(text)
    limit = rules.max_bullet_or_numbered_lines
    if bullets <= limit and numbered <= limit:
        return None
    return Finding(
        LIST_HEAVY,
        f"List-heavy structure: {bullets} bullets, {numbered} numbered items",
    )


def _length_finding(words: list[str], sentences: list[str], rules: RuleSet) -> Finding | None:
    if not sentences:
        return None
    average = len(words) / len(sentences)
    if average <= rules.avg_sentence_length_max:
        return None
    return Finding(
        LONG_SENTENCES,
        f"Long sentences: average {_fixed(average, 1)} words (aim for 15-20)",
    )


def _density_finding(words: list[str], rules: RuleSet) -> Finding | None:
    if not words:
        return None
    density = len({word.lower() for word in words}) / len(words)
    if density >= rules.min_lexical_density:
        return None
    return Finding(LOW_DENSITY, f"Low information density: {_fixed(density * 100, 0)}% unique words")


def _generic_finding(lowered: str, rules: RuleSet) -> Finding | None:
    found = _contained(rules.generic_phrases, lowered)
    if len(found) < rules.generic_min_matches:
        return None
    return Finding(GENERIC_LANGUAGE, f"Over-standardized language: {', '.join(found)}", tuple(found))


def _hedging_finding(lowered: str, rules: RuleSet) -> Finding | None:
    found = _contained(rules.hedging_words, lowered)
    if not found or len(found) < rules.hedging_min_matches:
        return None
    return Finding(HEDGING, f"Excessive hedging: {', '.join(found)}", tuple(found))


def _complexity_finding(lowered: str, rules: RuleSet) -> Finding | None:
    pairs = [(complex_word, simple) for complex_word, simple in rules.complexity_pairs if complex_word in lowered]
    if not pairs:
        return None
    suggestions = ", ".join(f'"{complex_word}" → "{simple}"' for complex_word, simple in pairs)
    return Finding(
        WORD_COMPLEXITY,
        f"Unnecessarily complex words: {suggestions}",
        tuple(complex_word for complex_word, _ in pairs),
    )


def analyze(text: str, rules: RuleSet = DEFAULT_RULES) -> AnalysisResult:
    """Run every check over ``text``; never raises for string input."""

    lowered = text.lower()
    sentences = split_sentences(text)
    words = split_words(text)

    candidates = (
        _cliche_finding(lowered, rules),
        _repetition_finding(sentences, rules),
        _formality_finding(lowered, rules),
        _list_finding(text, rules),
        _length_finding(words, sentences, rules),
        _density_finding(words, rules),
        _generic_finding(lowered, rules),
        _hedging_finding(lowered, rules),
        _complexity_finding(lowered, rules),
    )
    return AnalysisResult(findings=tuple(f for f in candidates if f is not None))
