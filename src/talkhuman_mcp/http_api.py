"""Plain HTTP API over the slop analyzer.

Routes:
- POST /api/check     JSON {"text": ...} -> {"hasSlop", "findings", "message"}
- GET  /api/rules     writing guide as text/plain (optional ?context=)
- GET  /api/examples  slop examples as text/plain (optional ?category=)
- POST /api/mcp       stateless JSON-RPC 2.0 tool calls (no session)
- GET  /health
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from typing import Any

import uvicorn
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from . import config
from .errors import InputError, require_text
from .guide import slop_examples, writing_rules
from .server import analyze_text, mcp, render_report, run_check


log = logging.getLogger("talkhuman-http")

SERVER_NAME = "talkhuman-mcp"
SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "2024-11-05"

PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


def _rpc_result(msg_id: Any, result: dict[str, Any]) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "id": msg_id, "result": result})


def _rpc_error(msg_id: Any, code: int, message: str, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        {"jsonrpc": "2.0", "id": msg_id, "error": {"code": code, "message": message}},
        status_code=status_code,
    )


def _text_content(text: str) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


def _call_check(args: dict[str, Any]) -> str:
    text = args.get("text")
    if not text:
        raise InputError("No text provided")
    return render_report(run_check(text))


def _call_analyze(args: dict[str, Any]) -> str:
    result = analyze_text(args.get("text"))
    if "error" in result:
        raise InputError("No text provided")
    return json.dumps(result, indent=2)


TOOL_CALLS: dict[str, Callable[[dict[str, Any]], str]] = {
    "check_for_slop": _call_check,
    "analyze_text": _call_analyze,
    "get_human_writing_rules": lambda args: writing_rules(args.get("context") or None),
    "get_slop_examples": lambda args: slop_examples(args.get("category") or "all"),
}


async def check(request: Request) -> JSONResponse:
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse({"error": "Invalid JSON body"}, status_code=400)

    try:
        text = require_text(body.get("text") if isinstance(body, dict) else None)
    except InputError as exc:
        log.warning("/api/check rejected input: %s", exc)
        return JSONResponse({"error": str(exc)}, status_code=400)

    return JSONResponse(run_check(text).to_payload())


async def rules(request: Request) -> PlainTextResponse:
    return PlainTextResponse(writing_rules(request.query_params.get("context")))


async def examples(request: Request) -> Response:
    try:
        body = slop_examples(request.query_params.get("category") or "all")
    except InputError as exc:
        return JSONResponse({"error": str(exc)}, status_code=400)
    return PlainTextResponse(body)


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok", "server": SERVER_NAME})


async def rpc(request: Request) -> Response:
    """Stateless JSON-RPC endpoint exposing the same tools as the MCP server."""

    try:
        message = await request.json()
    except ValueError:
        return _rpc_error(None, PARSE_ERROR, "Parse error", status_code=400)

    if not isinstance(message, dict) or message.get("jsonrpc") != "2.0":
        return JSONResponse({"error": "Invalid JSON-RPC version"}, status_code=400)

    method = message.get("method", "")
    msg_id = message.get("id")
    params = message.get("params")
    if not isinstance(params, dict):
        params = {}
    log.info("rpc method=%s", method)

    if method == "initialize":
        return _rpc_result(
            msg_id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
                "capabilities": {"tools": {"listChanged": False}},
            },
        )

    if method == "notifications/initialized":
        return Response(status_code=202)

    if method == "tools/list":
        tools = await mcp.list_tools()
        return _rpc_result(
            msg_id,
            {"tools": [tool.model_dump(mode="json", by_alias=True, exclude_none=True) for tool in tools]},
        )

    if method == "tools/call":
        name = params.get("name", "")
        handler = TOOL_CALLS.get(name)
        if handler is None:
            return _rpc_error(msg_id, METHOD_NOT_FOUND, f"Unknown tool: {name}")
        args = params.get("arguments")
        if not isinstance(args, dict):
            args = {}
        try:
            text = handler(args)
        except InputError as exc:
            log.warning("tools/call %s rejected input: %s", name, exc)
            return _rpc_error(msg_id, INVALID_PARAMS, str(exc))
        return _rpc_result(msg_id, _text_content(text))

    return _rpc_error(msg_id, METHOD_NOT_FOUND, "Method not found")


async def _http_error(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


def create_app() -> Starlette:
    routes = [
        Route("/api/check", check, methods=["POST"]),
        Route("/api/rules", rules, methods=["GET"]),
        Route("/api/examples", examples, methods=["GET"]),
        Route("/api/mcp", rpc, methods=["POST"]),
        Route("/health", health, methods=["GET"]),
    ]
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization", "Mcp-Session-Id"],
        )
    ]
    return Starlette(
        routes=routes,
        middleware=middleware,
        exception_handlers={HTTPException: _http_error},
    )


app = create_app()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="talkhuman-mcp HTTP API")
    parser.add_argument("--host", default=config.HTTP_HOST)
    parser.add_argument("--port", type=int, default=config.HTTP_PORT)
    args = parser.parse_args(argv)

    log.info("serving HTTP API on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
