"""Newline-delimited JSON-RPC transport over stdin/stdout."""

import json
import sys
from typing import Any, AsyncIterable

import anyio
import httpx
import structlog

from msu_mcp.config import Settings
from msu_mcp.gateway.service import TransactionQueryDispatcher

from .schemas import MCPErrorCodes, MCPJSONRPCResponse
from .service import handle_message, jsonrpc_error


logger = structlog.get_logger(__name__)


async def _respond(stdout: Any, response: MCPJSONRPCResponse) -> None:
    await stdout.write(json.dumps(response.to_wire(), ensure_ascii=False) + "\n")
    await stdout.flush()


async def serve_stdio(
    dispatcher: TransactionQueryDispatcher,
    settings: Settings,
    stdin: AsyncIterable[bytes | str],
    stdout: Any,
) -> None:
    """Read JSON-RPC messages line by line and write one response per request.
    
    Returns when the input stream is exhausted.
    
    Args:
        dispatcher: Tool dispatcher.
        settings: Application settings.
        stdin: Async iterable of input lines, raw bytes or text.
        stdout: Async file-like object with ``write`` and ``flush``.
    """
    async for raw_line in stdin:
        if not raw_line.strip():
            continue

        try:
            # Invalid UTF-8 is a parse error for this line only
            line = raw_line.decode("utf-8") if isinstance(raw_line, bytes) else raw_line
            payload = json.loads(line)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("parse_error", error=str(e))
            await _respond(stdout, jsonrpc_error(None, MCPErrorCodes.PARSE_ERROR, "Parse error"))
            continue

        response = await handle_message(dispatcher, settings, payload)
        if response is not None:
            await _respond(stdout, response)


async def run_stdio(settings: Settings) -> None:
    """Serve the MCP protocol on the process's stdin/stdout until EOF."""
    async with httpx.AsyncClient(timeout=None) as client:
        dispatcher = TransactionQueryDispatcher.from_settings(client, settings)
        logger.info("stdio_server_started", app=settings.APP_NAME, version=settings.APP_VERSION)
        await serve_stdio(
            dispatcher,
            settings,
            stdin=anyio.wrap_file(sys.stdin.buffer),
            stdout=anyio.wrap_file(sys.stdout),
        )
        logger.info("stdio_server_stopped")
