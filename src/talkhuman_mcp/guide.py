"""Writing-guide documents served by the rules and examples endpoints."""

from __future__ import annotations

from .errors import InputError


WRITING_RULES = """
# Anti-AI Writing Guide

Write naturally. Avoid the patterns that mark text as machine-generated while
keeping it accurate and readable.

## Hard rules

Never use:
- Significance statements: "stands as", "serves as", "testament to"
- Heritage clichés: "rich tapestry", "profound legacy"
- Editorializing: "it's important to note", "worth mentioning"
- Negative parallelisms: "not only...but also", "not just...rather"
- Ritual conclusions: "in summary", "overall", "in conclusion"
- Knowledge cutoff disclaimers and "As an AI" meta-commentary
- Placeholder templates such as [insert X here]
- Emoji headings, excessive bold or italics, em-dash spam
- Vague attributions ("experts say", "studies show")
- Reflexive rule-of-three lists
- Collaborative meta-text: "let me know", "would you like"

## Forbidden phrases

Corporate and promotional language:
- "delve into", "dive deep into"
- "leverage" (as a verb for "use"), "utilize", "facilitate"
- "robust solution", "seamless experience"
- "cutting-edge", "state-of-the-art"
- "game changer", "paradigm shift"
- "synergy", "holistic approach"
- "ecosystem" (unless biological), "journey" (unless literal travel)
- "empower", "transform", "revolutionize"
- "unlock the power/potential"
- "landscape" (for abstract concepts)

Meta-commentary:
- "it's important to note that", "it's worth noting that"
- "as previously mentioned", "as we discussed"
- "let's explore", "let me explain"

Hedging and filler:
- "quite", "rather", "fairly", "somewhat"
- "generally speaking", "typically", "usually", "in general"
- "to a certain extent", "it could be argued"

Formulaic openings and closings:
- "Certainly!", "Absolutely!"
- "I hope this helps", "Here's what you need to know"
- "Let me know if you have questions", "Would you like me to..."
- "In today's digital age", "In the fast-paced world of"
- "At the end of the day"

## Do this instead

1. State facts directly without commentary about them
2. Let significance come from specific details
3. Use varied, natural transitions
4. Break long sentences into shorter ones
5. End sections without summarizing them
6. Describe challenges specifically
7. Attribute claims precisely
8. Vary list structures, and use prose when a list adds nothing
9. Prefer concrete examples over vague claims

## Safe patterns

**Fact + Context + Example:**
"Python supports several programming paradigms. Its object model includes
classes and inheritance. collections.namedtuple builds small immutable classes."

**Description + Function + Impact:**
"The cache stores frequently read rows. This cuts database queries by 40%.
Pages render 200ms faster on average."

**Process + Application + Limitation:**
"The algorithm sorts in O(n log n) time. It works well for datasets under
100MB. Memory use grows linearly with input size."

## Style

- Write the way a person talks; vary sentence structure and length
- Don't start several sentences the same way
- Target 15-20 words per sentence on average
- Choose simple words over complex ones
- Every sentence should add information; cut filler and the obvious

## Example rewrites

**Before:** "The building stands as a testament to the region's rich cultural heritage."
**After:** "The building uses traditional regional construction methods."

**Before:** "It's important to note that researchers have made significant progress."
**After:** "Researchers identified three key mechanisms between 2020 and 2025."

**Before:** "Let me delve into the robust ecosystem of cutting-edge solutions."
**After:** "Three tools address this: X handles data, Y processes requests, Z stores results."

## The golden rule

If a phrase, structure or word choice feels like something a chatbot would
say, don't use it.
"""

EXAMPLE_CATEGORIES = ("phrases", "structure", "tone", "all")

_PHRASE_EXAMPLES = """## Overused AI Phrases

Never use:
- "delve into" → use "explore" or "examine"
- "leverage" → use "use"
- "utilize" → use "use"
- "it's important to note that" → just state it
- "in today's digital age" → be specific or omit
- "game changer" → be specific about impact
- "robust" → use concrete descriptors
- "seamless" → describe actual experience
- "ecosystem" → unless discussing biology

"""

_STRUCTURE_EXAMPLES = """## Structural Patterns to Avoid

Don't:
- Start every sentence the same way
- Use "Firstly, Secondly, Thirdly" unless truly needed
- Make everything a bulleted list
- Begin with "Certainly!" or "Absolutely!"
- End with a summary of what you just said

Do:
- Vary sentence structure naturally
- Mix short and long sentences
- Use paragraphs for flow, lists when truly helpful
- Get straight to the point

"""

_TONE_EXAMPLES = """## Tone Issues

Too AI-like:
"It's worth noting that one should carefully consider..."

Human-like:
"Consider..."

Over-hedging:
"This might potentially be somewhat useful in certain scenarios..."

Direct:
"This is useful when..."

"""

_GOLDEN_TEST = """## The Golden Test

Ask yourself: "Would a human actually write this?"
If it sounds like corporate jargon or a press release, revise it.
"""


def writing_rules(context: str | None = None) -> str:
    """The writing guide, with a context section appended when one is named."""

    rules = WRITING_RULES
    if context:
        rules += (
            "\n\n## Context-Specific Guidance\n\n"
            f"You are writing: {context}\n\n"
            "Adapt these rules to fit this context while maintaining human-like writing."
        )
    return rules


def slop_examples(category: str | None = "all") -> str:
    cat = category or "all"
    if cat not in EXAMPLE_CATEGORIES:
        raise InputError(
            f"Unknown category '{cat}'. Use one of: {', '.join(EXAMPLE_CATEGORIES)}."
        )

    examples = "# AI Slop Examples to Avoid\n\n"
    if cat in ("phrases", "all"):
        examples += _PHRASE_EXAMPLES
    if cat in ("structure", "all"):
        examples += _STRUCTURE_EXAMPLES
    if cat in ("tone", "all"):
        examples += _TONE_EXAMPLES
    if cat == "all":
        examples += _GOLDEN_TEST
    return examples
