from __future__ import annotations

import dataclasses

import pytest

from talkhuman_mcp.analyzer import (
    CLEAN_SUMMARY,
    CLICHE_PHRASES,
    FINDING_KINDS,
    GENERIC_LANGUAGE,
    HEDGING,
    LIST_HEAVY,
    LONG_SENTENCES,
    LOW_DENSITY,
    OVERLY_FORMAL,
    REPETITIVE_STARTS,
    SLOP_SUMMARY,
    WORD_COMPLEXITY,
    analyze,
)
from talkhuman_mcp.rules import EXTENDED_RULES, RuleSet


CLICHE_TEXT = "We need to leverage this robust ecosystem to delve into cutting-edge solutions."

ADDITIONALLY_TEXT = (
    "Additionally the build is slow. Additionally the tests flake. "
    "Additionally the docs drift. Additionally nobody owns the release."
)

SLOPPY_TEXT = (
    "We leverage synergy across the landscape. We moreover leverage it again. "
    "We furthermore do it typically, usually and often."
)


def _finding(result, kind):
    return next(f for f in result.findings if f.kind == kind)


def test_clean_sentence_has_no_findings() -> None:
    result = analyze("The cat sat on the mat.")
    assert result.has_slop is False
    assert result.findings == ()
    assert result.summary == CLEAN_SUMMARY


def test_empty_and_blank_text_are_total() -> None:
    for text in ("", "   \n\t ", "...!?"):
        result = analyze(text)
        assert result.findings == ()
        assert result.has_slop is False


def test_cliche_phrases_reported_in_rule_order() -> None:
    result = analyze(CLICHE_TEXT)

    assert result.kinds() == [CLICHE_PHRASES]
    finding = result.findings[0]
    assert finding.matches == ("delve into", "leverage", "cutting-edge", "robust", "ecosystem")
    assert finding.message == "AI cliché phrases: delve into, leverage, cutting-edge, robust, ecosystem"
    assert result.has_slop is True
    assert result.summary == SLOP_SUMMARY


def test_cliche_matching_is_case_insensitive_substring() -> None:
    assert analyze("DELVE INTO the LANDSCAPE now.").findings[0].matches == ("delve into", "landscape")
    assert analyze("It ran robustly.").findings[0].matches == ("robust",)


def test_repetitive_starts_detected() -> None:
    result = analyze(ADDITIONALLY_TEXT)

    assert result.kinds() == [REPETITIVE_STARTS]
    finding = result.findings[0]
    assert finding.matches == ("additionally",)
    assert "additionally" in finding.message


def test_repetition_threshold_boundary() -> None:
    two = analyze("Then we ate. Then we slept.")
    three = analyze("Then we ate. Then we slept. Then we left.")

    assert REPETITIVE_STARTS not in two.kinds()
    assert three.kinds() == [REPETITIVE_STARTS]
    assert three.findings[0].matches == ("then",)


def test_repetitive_starts_keep_first_encounter_order() -> None:
    text = "So it goes. But why. So we try. But how. So we win. But later. Fine."
    finding = _finding(analyze(text), REPETITIVE_STARTS)
    assert finding.matches == ("so", "but")


def test_short_start_words_are_counted() -> None:
    text = "I ran home. I ate dinner. I went to bed."
    assert _finding(analyze(text), REPETITIVE_STARTS).matches == ("i",)


def test_formality_needs_two_distinct_markers() -> None:
    assert OVERLY_FORMAL not in analyze("Furthermore, the plan works.").kinds()

    finding = _finding(analyze("Furthermore, the plan works. Moreover, it is cheap."), OVERLY_FORMAL)
    assert finding.matches == ("furthermore", "moreover")
    assert finding.message == "Overly formal: furthermore, moreover"


def test_formality_markers_match_inside_words() -> None:
    # "thus" inside "enthusiasm" counts under substring matching.
    finding = _finding(analyze("The enthusiasm was real, hence the turnout."), OVERLY_FORMAL)
    assert finding.matches == ("thus", "hence")


def test_list_heavy_boundary() -> None:
    five = "- apples\n- pears\n- plums\n- figs\n- kiwis"
    six = five + "\n- limes"

    assert LIST_HEAVY not in analyze(five).kinds()
    finding = _finding(analyze(six), LIST_HEAVY)
    assert finding.message == "List-heavy structure: 6 bullets, 0 numbered items"


def test_numbered_list_scenario() -> None:
    text = "\n".join(f"{i}. item" for i in range(1, 31))
    finding = _finding(analyze(text), LIST_HEAVY)
    assert finding.message == "List-heavy structure: 0 bullets, 30 numbered items"


def test_single_long_sentence() -> None:
    text = " ".join(f"word{i}" for i in range(40)) + "."
    result = analyze(text)

    assert result.kinds() == [LONG_SENTENCES]
    assert result.findings[0].message == "Long sentences: average 40.0 words (aim for 15-20)"


def test_low_lexical_density() -> None:
    result = analyze("buffalo " * 10)

    assert result.kinds() == [LOW_DENSITY]
    assert result.findings[0].message == "Low information density: 10% unique words"


def test_generic_language_needs_three_phrases() -> None:
    assert GENERIC_LANGUAGE not in analyze("Typically it works. Usually nobody minds.").kinds()

    result = analyze("In general we ship on Fridays. Typically it works. Usually nobody minds.")
    assert result.kinds() == [GENERIC_LANGUAGE]
    assert result.findings[0].matches == ("in general", "typically", "usually")


def test_findings_follow_pipeline_order() -> None:
    kinds = analyze(SLOPPY_TEXT).kinds()

    assert kinds == [CLICHE_PHRASES, REPETITIVE_STARTS, OVERLY_FORMAL, GENERIC_LANGUAGE]
    assert kinds == sorted(kinds, key=FINDING_KINDS.index)


def test_custom_rules_replace_defaults() -> None:
    rules = RuleSet(cliche_phrases=("tapestry",))
    result = analyze("A rich tapestry of leverage.", rules)
    assert result.findings[0].matches == ("tapestry",)


def test_payload_shape() -> None:
    payload = analyze(CLICHE_TEXT).to_payload()

    assert set(payload) == {"hasSlop", "findings", "message"}
    assert payload["hasSlop"] is True
    assert payload["findings"] == ["AI cliché phrases: delve into, leverage, cutting-edge, robust, ecosystem"]
    assert payload["message"] == SLOP_SUMMARY


def test_results_are_immutable() -> None:
    result = analyze(CLICHE_TEXT)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.findings[0].message = "changed"  # type: ignore[misc]


def test_density_percentage_rounds_half_up() -> None:
    result = analyze("a a a a a a a a")

    assert result.kinds() == [LOW_DENSITY]
    assert result.findings[0].message == "Low information density: 13% unique words"


def test_average_length_rounds_half_up() -> None:
    lengths = (25, 25, 25, 26)
    text = ". ".join(" ".join(f"s{j}w{i}" for i in range(n)) for j, n in enumerate(lengths)) + "."
    result = analyze(text)

    assert result.kinds() == [LONG_SENTENCES]
    assert result.findings[0].message == "Long sentences: average 25.3 words (aim for 15-20)"


def test_hedging_and_complexity_are_off_by_default() -> None:
    text = "Perhaps it works. Possibly not. It might. We demonstrate the fix."
    kinds = analyze(text).kinds()
    assert HEDGING not in kinds
    assert WORD_COMPLEXITY not in kinds


def test_excessive_hedging_with_extended_rules() -> None:
    assert analyze("Perhaps it works. It might.", EXTENDED_RULES).kinds() == []

    result = analyze("Perhaps it works. Possibly not. It might.", EXTENDED_RULES)
    assert result.kinds() == [HEDGING]
    assert result.findings[0].message == "Excessive hedging: perhaps, possibly, might"
    assert result.findings[0].matches == ("perhaps", "possibly", "might")


def test_complex_words_suggest_simpler_ones() -> None:
    result = analyze("We demonstrate the fix and commence testing.", EXTENDED_RULES)

    assert result.kinds() == [WORD_COMPLEXITY]
    finding = result.findings[0]
    assert finding.message == 'Unnecessarily complex words: "demonstrate" → "show", "commence" → "start"'
    assert finding.matches == ("demonstrate", "commence")


def test_extended_checks_run_after_the_default_pipeline() -> None:
    kinds = analyze("We utilize it. Perhaps. Possibly. It might.", EXTENDED_RULES).kinds()
    assert kinds == [CLICHE_PHRASES, HEDGING, WORD_COMPLEXITY]
    assert kinds == sorted(kinds, key=FINDING_KINDS.index)
