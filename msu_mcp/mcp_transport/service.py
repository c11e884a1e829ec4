"""Business logic for MCP protocol handlers."""

from typing import Any

import structlog
from pydantic import ValidationError

from msu_mcp.config import Settings
from msu_mcp.exceptions import (
    InvalidToolArgumentsError,
    MethodNotFoundError,
    MSUMCPError,
    UnknownToolError,
)
from msu_mcp.gateway.exceptions import (
    GatewayHTTPError,
    GatewayResponseError,
    GatewayTimeoutError,
    GatewayUnavailableError,
)
from msu_mcp.gateway.service import TransactionQueryDispatcher

from .schemas import (
    MCPErrorCodes,
    MCPInitializeParams,
    MCPJSONRPCRequest,
    MCPJSONRPCResponse,
    MCPToolCallParams,
)


logger = structlog.get_logger(__name__)

SUPPORTED_PROTOCOL_VERSIONS = ("2025-06-18", "2025-03-26", "2024-11-05")


def error_code_for(exc: MSUMCPError) -> int:
    """Map an application exception to its JSON-RPC error code."""
    if isinstance(exc, (UnknownToolError, MethodNotFoundError)):
        return MCPErrorCodes.METHOD_NOT_FOUND
    if isinstance(exc, InvalidToolArgumentsError):
        return MCPErrorCodes.INVALID_PARAMS
    if isinstance(exc, GatewayTimeoutError):
        return MCPErrorCodes.GATEWAY_TIMEOUT
    if isinstance(exc, GatewayUnavailableError):
        return MCPErrorCodes.GATEWAY_UNAVAILABLE
    if isinstance(exc, GatewayHTTPError):
        return MCPErrorCodes.GATEWAY_ERROR
    if isinstance(exc, GatewayResponseError):
        return MCPErrorCodes.GATEWAY_INVALID_RESPONSE
    return MCPErrorCodes.INTERNAL_ERROR


def jsonrpc_error(request_id: str | int | None, code: int, message: str) -> MCPJSONRPCResponse:
    return MCPJSONRPCResponse(id=request_id, error={"code": code, "message": message})


async def handle_initialize(params: MCPInitializeParams, settings: Settings) -> dict[str, Any]:
    """Handle initialize request.
    
    Args:
        params: Initialize parameters from client.
        settings: Application settings for server info.
        
    Returns:
        Server initialization response.
    """
    if params.protocolVersion in SUPPORTED_PROTOCOL_VERSIONS:
        protocol_version = params.protocolVersion
    else:
        protocol_version = SUPPORTED_PROTOCOL_VERSIONS[0]
    return {
        "protocolVersion": protocol_version,
        "capabilities": {
            "tools": {
                "listChanged": False
            }
        },
        "serverInfo": {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION
        }
    }


async def _dispatch(
    dispatcher: TransactionQueryDispatcher,
    settings: Settings,
    method: str,
    params: dict[str, Any],
) -> Any:
    if method == "initialize":
        return await handle_initialize(MCPInitializeParams(**params), settings)

    if method == "ping":
        return {}

    if method == "tools/list":
        return dispatcher.list_tools().model_dump(exclude_none=True)

    if method == "tools/call":
        call_params = MCPToolCallParams(**params)
        result = await dispatcher.call_tool(call_params.name, call_params.arguments)
        return result.model_dump(exclude_none=True)

    raise MethodNotFoundError(method)


async def handle_message(
    dispatcher: TransactionQueryDispatcher,
    settings: Settings,
    payload: Any,
) -> MCPJSONRPCResponse | None:
    """Handle one decoded JSON-RPC message.
    
    Notifications (messages without an id) never produce a response. Every
    failure of a request is returned as a JSON-RPC error carrying a
    descriptive message.
    
    Args:
        dispatcher: Tool dispatcher.
        settings: Application settings.
        payload: Decoded JSON message.
        
    Returns:
        Response to send, or None for notifications.
    """
    if not isinstance(payload, dict):
        return jsonrpc_error(None, MCPErrorCodes.INVALID_REQUEST, "Invalid Request")

    try:
        request = MCPJSONRPCRequest(**payload)
    except ValidationError:
        raw_id = payload.get("id")
        request_id = raw_id if isinstance(raw_id, (str, int)) else None
        return jsonrpc_error(request_id, MCPErrorCodes.INVALID_REQUEST, "Invalid Request")

    method = request.method
    is_notification = "id" not in payload

    if is_notification:
        logger.debug("notification_received", method=method)
        return None

    try:
        result = await _dispatch(dispatcher, settings, method, request.params or {})
        return MCPJSONRPCResponse(id=request.id, result=result)

    except MSUMCPError as e:
        return jsonrpc_error(request.id, error_code_for(e), e.message)
    except ValidationError as e:
        return jsonrpc_error(request.id, MCPErrorCodes.INVALID_PARAMS, f"Invalid params: {e.error_count()} error(s)")
    except Exception as e:
        logger.error("internal_error", method=method, error=str(e), exc_info=True)
        return jsonrpc_error(request.id, MCPErrorCodes.INTERNAL_ERROR, f"Internal error: {str(e)}")
