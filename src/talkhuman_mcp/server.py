"""talkhuman-mcp MCP server (stdio transport by default)."""

from __future__ import annotations

import argparse
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from . import config
from .analyzer import AnalysisResult, analyze
from .errors import InputError, require_text
from .guide import slop_examples, writing_rules
from .stats import text_stats


config.configure_logging()
log = logging.getLogger("talkhuman-mcp")

RULES = config.configured_rules()

mcp = FastMCP("talkhuman-mcp")

REPORT_HEADER = "# AI Slop Analysis"
REPORT_FOOTER = "**Recommendation:** Revise to be more concise, direct, and natural."
CLEAN_REPORT = "No AI slop detected. Text appears natural and concise."


def render_report(result: AnalysisResult) -> str:
    """Markdown rendering of findings used by the text-returning tool."""

    if not result.has_slop:
        return CLEAN_REPORT
    lines = "\n".join(f"- {message}" for message in result.messages)
    return f"{REPORT_HEADER}\n\n{lines}\n\n{REPORT_FOOTER}"


def _invalid(message: str) -> dict[str, str]:
    return {"error": message}


def run_check(text: Any) -> AnalysisResult:
    """Validate ``text`` at the boundary, then analyze it with the process rules."""

    value = require_text(text)
    result = analyze(value, RULES)
    log.info("analyzed %d chars: %d finding(s)", len(value), len(result.findings))
    return result


@mcp.tool()
def check_for_slop(text: str) -> str:
    """
    Analyze text for AI slop indicators: cliché phrases, repetitive sentence
    starts, formality markers, list-heavy structure, long sentences, low
    lexical density and over-standardized language.
    """

    try:
        result = run_check(text)
    except InputError as exc:
        log.warning("check_for_slop rejected input: %s", exc)
        raise ToolError(str(exc)) from exc
    return render_report(result)


@mcp.tool()
def analyze_text(text: str) -> dict[str, Any]:
    """Structured slop analysis: findings with matched items plus text statistics."""

    try:
        result = run_check(text)
    except InputError as exc:
        log.warning("analyze_text rejected input: %s", exc)
        return _invalid(str(exc))

    return {
        "has_slop": result.has_slop,
        "summary": result.summary,
        "findings": [finding.to_payload() for finding in result.findings],
        "stats": text_stats(text),
    }


@mcp.tool()
def get_human_writing_rules(context: str | None = None) -> str:
    """
    Get the rules for writing like a human and avoiding AI slop. Use them as
    system-level instructions for any text generation task.

    context: optional kind of writing, e.g. 'technical documentation' or 'casual email'.
    """

    return writing_rules(context)


@mcp.tool()
def get_slop_examples(category: str = "all") -> str:
    """Examples of AI slop to avoid. category: phrases, structure, tone or all."""

    try:
        return slop_examples(category)
    except InputError as exc:
        raise ToolError(str(exc)) from exc


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="talkhuman-mcp MCP server")
    parser.add_argument("--transport", choices=config.TRANSPORTS, default=config.TRANSPORT)
    parser.add_argument("--host", default=config.HTTP_HOST, help="bind host for sse/streamable-http")
    parser.add_argument("--port", type=int, default=config.HTTP_PORT, help="bind port for sse/streamable-http")
    args = parser.parse_args(argv)

    if args.transport != "stdio":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
    log.info("starting talkhuman-mcp over %s", args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
