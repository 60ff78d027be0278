"""Immutable phrase lists and thresholds used by the slop analyzer."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import InputError


CLICHE_PHRASES = (
    "delve into",
    "it's important to note",
    "it's worth noting",
    "in today's digital age",
    "dive deep",
    "game changer",
    "unlock the potential",
    "landscape",
    "leverage",
    "cutting-edge",
    "paradigm shift",
    "robust",
    "utilize",
    "seamless",
    "holistic",
    "synergy",
    "ecosystem",
    "journey",
    "revolutionize",
    "transform",
    "empower",
    "facilitate",
)

FORMALITY_MARKERS = (
    "furthermore",
    "moreover",
    "thus",
    "hence",
    "whereby",
    "wherein",
    "heretofore",
    "aforementioned",
    "notwithstanding",
)

GENERIC_PHRASES = (
    "in general",
    "typically",
    "usually",
    "often",
    "sometimes",
)

# Hedging and word-complexity checks are opt-in: empty on DEFAULT_RULES.
HEDGING_WORDS = (
    "perhaps",
    "possibly",
    "might",
    "could potentially",
    "somewhat",
    "fairly",
    "relatively",
    "generally",
)

COMPLEXITY_PAIRS = (
    ("utilize", "use"),
    ("facilitate", "help"),
    ("demonstrate", "show"),
    ("indicate", "show"),
    ("commence", "start"),
)

_PHRASE_FIELDS = {"cliche_phrases", "formality_markers", "generic_phrases", "hedging_words"}


@dataclass(frozen=True)
class RuleSet:
    """Phrase lists and thresholds. Tuple order is the reporting order."""

    cliche_phrases: tuple[str, ...] = CLICHE_PHRASES
    formality_markers: tuple[str, ...] = FORMALITY_MARKERS
    generic_phrases: tuple[str, ...] = GENERIC_PHRASES
    hedging_words: tuple[str, ...] = ()
    complexity_pairs: tuple[tuple[str, str], ...] = ()

    repetition_min_count: int = 3
    formality_min_matches: int = 2
    avg_sentence_length_max: float = 25.0
    min_lexical_density: float = 0.40
    max_bullet_or_numbered_lines: int = 5
    generic_min_matches: int = 3
    hedging_min_matches: int = 3

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any], base: RuleSet | None = None) -> RuleSet:
        """Build a RuleSet from JSON-style overrides on top of ``base``."""

        if not isinstance(mapping, dict):
            raise InputError("rules must be a JSON object")

        known = {f.name: f for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in mapping.items():
            if key not in known:
                raise InputError(f"unknown rule setting '{key}'")
            if key in _PHRASE_FIELDS:
                if not isinstance(value, list) or not all(isinstance(p, str) for p in value):
                    raise InputError(f"{key} must be a list of strings")
                # dict.fromkeys drops duplicates but keeps first-seen order
                values[key] = tuple(dict.fromkeys(p.lower() for p in value if p.strip()))
            elif key == "complexity_pairs":
                if not isinstance(value, dict) or not all(
                    isinstance(k, str) and isinstance(v, str) for k, v in value.items()
                ):
                    raise InputError("complexity_pairs must map complex words to simpler ones")
                values[key] = tuple((k.lower(), v) for k, v in value.items() if k.strip())
            elif isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InputError(f"{key} must be a number")
            elif known[key].type in ("int", int):
                values[key] = int(value)
            else:
                values[key] = float(value)

        start = base if base is not None else cls()
        return cls(**{**{name: getattr(start, name) for name in known}, **values})


DEFAULT_RULES = RuleSet()

EXTENDED_RULES = RuleSet(hedging_words=HEDGING_WORDS, complexity_pairs=COMPLEXITY_PAIRS)


def load_rules(path: str | Path, base: RuleSet | None = None) -> RuleSet:
    """Read a JSON file of RuleSet overrides."""

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InputError(f"invalid rules file {path}: {exc}") from exc
    return RuleSet.from_mapping(raw, base=base)
