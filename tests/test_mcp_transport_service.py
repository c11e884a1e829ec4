"""Tests for JSON-RPC message handling."""

import json

import httpx
import pytest
from pydantic import ValidationError
from unittest.mock import AsyncMock

from msu_mcp.gateway.exceptions import GatewayTimeoutError
from msu_mcp.mcp_transport.schemas import MCPContent, MCPErrorCodes, MCPJSONRPCResponse
from msu_mcp.mcp_transport.service import SUPPORTED_PROTOCOL_VERSIONS, handle_message


def _request(method: str, params: dict | None = None, request_id: str | int = "req-1") -> dict:
    payload = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        payload["params"] = params
    return payload


def _ok_handler(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)
    return handler


@pytest.mark.asyncio
async def test_initialize_echoes_supported_version(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("initialize", {
        "protocolVersion": "2024-11-05",
        "capabilities": {},
        "clientInfo": {"name": "test", "version": "1.0"},
    }))
    
    assert response.id == "req-1"
    assert response.result["protocolVersion"] == "2024-11-05"
    assert response.result["capabilities"] == {"tools": {"listChanged": False}}
    assert response.result["serverInfo"] == {"name": "msu-mcp", "version": "1.0.0"}


@pytest.mark.asyncio
async def test_initialize_unknown_version_falls_back_to_latest(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("initialize", {"protocolVersion": "1999-01-01"}))
    
    assert response.result["protocolVersion"] == SUPPORTED_PROTOCOL_VERSIONS[0]


@pytest.mark.asyncio
async def test_notifications_get_no_response(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, {
        "jsonrpc": "2.0",
        "method": "notifications/initialized",
    })
    
    assert response is None


@pytest.mark.asyncio
async def test_ping(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("ping", request_id=7))
    
    assert response.id == 7
    assert response.result == {}
    assert response.error is None


@pytest.mark.asyncio
async def test_tools_list(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("tools/list"))
    
    tools = response.result["tools"]
    assert len(tools) == 1
    assert tools[0]["name"] == "query_transaction"
    assert tools[0]["inputSchema"]["additionalProperties"] is False


@pytest.mark.asyncio
async def test_tools_call_success(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({"status": "ERR00001"}))
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {
        "name": "query_transaction",
        "arguments": {"pgtranid": "TX123"},
    }))
    
    assert response.error is None
    content = response.result["content"]
    assert content[0]["type"] == "text"
    assert response.result["isError"] is False
    body = json.loads(content[0]["text"])
    assert body == {"status": "ERR00001", "status_explanation": "ERR00001: Invalid merchant"}


@pytest.mark.asyncio
async def test_tools_call_unknown_tool(settings, credentials):
    from msu_mcp.gateway.service import TransactionQueryDispatcher

    mock_client = AsyncMock()
    dispatcher = TransactionQueryDispatcher(
        client=mock_client,
        gateway_url=settings.MSU_API_BASE_URL,
        credentials=credentials,
    )
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"name": "void_transaction"}))
    
    assert response.result is None
    assert response.error == {
        "code": MCPErrorCodes.METHOD_NOT_FOUND,
        "message": "Unknown tool: void_transaction",
    }
    mock_client.post.assert_not_called()


@pytest.mark.asyncio
async def test_tools_call_gateway_error(make_dispatcher, settings):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text="Bad Request")
    dispatcher = make_dispatcher(handler)
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"name": "query_transaction"}))
    
    assert response.error["code"] == MCPErrorCodes.GATEWAY_ERROR
    assert response.error["message"] == "MSU API Error (400): Bad Request"


@pytest.mark.asyncio
async def test_tools_call_network_error(make_dispatcher, settings):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused")
    dispatcher = make_dispatcher(handler)
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"name": "query_transaction"}))
    
    assert response.error["code"] == MCPErrorCodes.GATEWAY_UNAVAILABLE
    assert response.error["message"] == "Network error connecting to MSU API: Connection refused"


@pytest.mark.asyncio
async def test_tools_call_timeout(settings):
    dispatcher = AsyncMock()
    dispatcher.call_tool.side_effect = GatewayTimeoutError(gateway_url="x", timeout_seconds=1.0)
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"name": "query_transaction"}))
    
    assert response.error["code"] == MCPErrorCodes.GATEWAY_TIMEOUT


@pytest.mark.asyncio
async def test_tools_call_invalid_arguments(make_dispatcher, settings, gateway_requests):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {
        "name": "query_transaction",
        "arguments": {"amount": "5"},
    }))
    
    assert response.error["code"] == MCPErrorCodes.INVALID_PARAMS
    assert "amount" in response.error["message"]
    assert gateway_requests == []


@pytest.mark.asyncio
async def test_tools_call_missing_name(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"arguments": {}}))
    
    assert response.error["code"] == MCPErrorCodes.INVALID_PARAMS


@pytest.mark.asyncio
async def test_unknown_method(make_dispatcher, settings):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, _request("resources/list"))
    
    assert response.error == {
        "code": MCPErrorCodes.METHOD_NOT_FOUND,
        "message": "Method not found: resources/list",
    }


@pytest.mark.asyncio
async def test_unexpected_exception_becomes_internal_error(settings):
    dispatcher = AsyncMock()
    dispatcher.call_tool.side_effect = RuntimeError("boom")
    
    response = await handle_message(dispatcher, settings, _request("tools/call", {"name": "query_transaction"}))
    
    assert response.error["code"] == MCPErrorCodes.INTERNAL_ERROR
    assert "boom" in response.error["message"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    ["not", "an", "object"],
    {"jsonrpc": "2.0", "id": 1},
    {"jsonrpc": "1.0", "id": 1, "method": "ping"},
])
async def test_invalid_requests(make_dispatcher, settings, payload):
    dispatcher = make_dispatcher(_ok_handler({}))
    
    response = await handle_message(dispatcher, settings, payload)
    
    assert response.error["code"] == MCPErrorCodes.INVALID_REQUEST


def test_wire_format_keeps_null_id_and_drops_unset_members():
    error = MCPJSONRPCResponse(id=None, error={"code": -32700, "message": "Parse error"})
    success = MCPJSONRPCResponse(id=3, result={"tools": []})
    
    assert error.to_wire() == {
        "jsonrpc": "2.0",
        "id": None,
        "error": {"code": -32700, "message": "Parse error"},
    }
    assert success.to_wire() == {"jsonrpc": "2.0", "id": 3, "result": {"tools": []}}


def test_content_items_are_text_only():
    assert MCPContent(type="text", text="{}").model_dump() == {"type": "text", "text": "{}"}
    with pytest.raises(ValidationError):
        MCPContent(type="image", text="x")
