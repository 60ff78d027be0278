"""Process settings read from the environment at startup."""

from __future__ import annotations

import logging
import os
import sys

from .rules import DEFAULT_RULES, EXTENDED_RULES, RuleSet, load_rules


LOG_LEVEL = os.environ.get("TALKHUMAN_LOG_LEVEL", "INFO").upper()
RULES_FILE = os.environ.get("TALKHUMAN_RULES_FILE") or None
EXTENDED_CHECKS = os.environ.get("TALKHUMAN_EXTENDED_CHECKS", "").lower() in {"1", "true", "yes"}
TRANSPORT = os.environ.get("TALKHUMAN_TRANSPORT", "stdio")
HTTP_HOST = os.environ.get("TALKHUMAN_HTTP_HOST", "127.0.0.1")
HTTP_PORT = int(os.environ.get("TALKHUMAN_HTTP_PORT", "8000"))

TRANSPORTS = ("stdio", "sse", "streamable-http")


def configure_logging() -> None:
    # stdout carries the MCP JSON-RPC stream in stdio mode.
    logging.basicConfig(
        stream=sys.stderr,
        level=LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )


def configured_rules(rules_file: str | None = RULES_FILE, extended: bool = EXTENDED_CHECKS) -> RuleSet:
    """DEFAULT_RULES (or EXTENDED_RULES), overridden by a JSON rules file when one is set."""

    base = EXTENDED_RULES if extended else DEFAULT_RULES
    if rules_file is None:
        return base
    return load_rules(rules_file, base=base)
