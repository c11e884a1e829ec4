"""HTTP transport for JSON-RPC messages."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from msu_mcp.config import Settings, get_settings
from msu_mcp.dependencies import get_dispatcher
from msu_mcp.gateway.service import TransactionQueryDispatcher

from .schemas import MCPErrorCodes
from .service import handle_message, jsonrpc_error


router = APIRouter(prefix="", tags=["mcp"])


@router.post("/mcp", operation_id="mcp_endpoint_post")
async def mcp_post_endpoint(
    request: Request,
    dispatcher: Annotated[TransactionQueryDispatcher, Depends(get_dispatcher)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Handle one JSON-RPC 2.0 message."""
    try:
        payload = await request.json()
    except json.JSONDecodeError:
        return JSONResponse(
            content=jsonrpc_error(None, MCPErrorCodes.PARSE_ERROR, "Parse error").to_wire()
        )

    response = await handle_message(dispatcher, settings, payload)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(content=response.to_wire())
