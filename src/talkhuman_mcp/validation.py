#!/usr/bin/env python3
"""Functional validation for talkhuman-mcp."""

from __future__ import annotations

import json
import os
import subprocess
import sys
import threading
from pathlib import Path

from .analyzer import CLICHE_PHRASES, LIST_HEAVY, LONG_SENTENCES, REPETITIVE_STARTS, analyze
from .server import analyze_text, check_for_slop, get_slop_examples


ROOT = Path(__file__).resolve().parents[2]


def _assert(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionError(message)


def _scenarios() -> dict[str, str]:
    return {
        "clean": "The cat sat on the mat.",
        "cliches": "We need to leverage this robust ecosystem to delve into cutting-edge solutions.",
        "repetitive": (
            "Additionally, the build is slow. Additionally, the tests flake. "
            "Additionally, the docs drift. Additionally, nobody owns the release."
        ),
        "numbered": "\n".join(f"{i}. item" for i in range(1, 31)),
        "long": " ".join(f"w{i}" for i in range(40)) + ".",
    }


def _run_scenarios() -> list[dict[str, object]]:
    texts = _scenarios()
    rows: list[dict[str, object]] = []
    for name, text in texts.items():
        result = analyze(text)
        _assert(result == analyze(text), f"{name}: analysis is not deterministic")
        rows.append({"scenario": name, "has_slop": result.has_slop, "kinds": result.kinds()})

    by_name = {row["scenario"]: row for row in rows}
    _assert(by_name["clean"]["has_slop"] is False, "clean text flagged")
    _assert(CLICHE_PHRASES in by_name["cliches"]["kinds"], "cliches missed")
    _assert(REPETITIVE_STARTS in by_name["repetitive"]["kinds"], "repetitive starts missed")
    _assert(LIST_HEAVY in by_name["numbered"]["kinds"], "numbered list missed")
    _assert(by_name["long"]["kinds"] == [LONG_SENTENCES], "long sentence scenario mismatch")
    _assert(analyze("").findings == (), "empty text produced findings")
    return rows


def _run_tool_checks() -> dict[str, object]:
    texts = _scenarios()
    report = check_for_slop(texts["cliches"])
    _assert(report.startswith("# AI Slop Analysis"), "check_for_slop header missing")

    structured = analyze_text(texts["cliches"])
    _assert("error" not in structured, f"analyze_text failed: {structured}")
    _assert(structured["stats"]["token_count"] > 0, "token count missing")

    missing = analyze_text("")
    _assert("error" in missing, "analyze_text accepted empty text")

    examples = get_slop_examples("phrases")
    _assert("Overused AI Phrases" in examples, "phrase examples missing")
    return {"report": report, "stats": structured["stats"]}


def _stdio_handshake(timeout: float = 15.0) -> dict[str, object]:
    """Start the stdio server and check its reply to an MCP initialize request."""

    env = dict(os.environ)
    src = str(ROOT / "src")
    env["PYTHONPATH"] = os.pathsep.join(p for p in (src, env.get("PYTHONPATH")) if p)
    env["TALKHUMAN_TRANSPORT"] = "stdio"

    proc = subprocess.Popen(
        [sys.executable, "-m", "talkhuman_mcp.server"],
        cwd=str(ROOT),
        env=env,
        stdin=subprocess.PIPE,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    # readline() blocks; kill the server if it never answers.
    watchdog = threading.Timer(timeout, proc.kill)
    watchdog.start()
    try:
        request = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": "initialize",
            "params": {
                "protocolVersion": "2024-11-05",
                "capabilities": {},
                "clientInfo": {"name": "talkhuman-validate", "version": "1.0.0"},
            },
        }
        proc.stdin.write(json.dumps(request) + "\n")
        proc.stdin.flush()
        line = proc.stdout.readline()
    finally:
        watchdog.cancel()
        if proc.poll() is None:
            proc.terminate()
            try:
                proc.wait(timeout=5)
            except subprocess.TimeoutExpired:
                proc.kill()
                proc.wait(timeout=5)

    _assert(bool(line), "stdio server closed without answering initialize")
    reply = json.loads(line)
    _assert(reply.get("id") == 1, f"unexpected initialize reply: {reply}")
    server_info = reply.get("result", {}).get("serverInfo", {})
    _assert(server_info.get("name") == "talkhuman-mcp", f"unexpected server info: {server_info}")
    return {
        "server_name": server_info.get("name"),
        "protocol_version": reply["result"].get("protocolVersion"),
        "tools_capability": "tools" in reply["result"].get("capabilities", {}),
    }


def main() -> None:
    report = {
        "scenarios": _run_scenarios(),
        "tools": _run_tool_checks(),
        "stdio_handshake": _stdio_handshake(),
    }
    print(json.dumps(report, indent=2, sort_keys=True))


if __name__ == "__main__":
    main()
