"""Pydantic schemas for MCP protocol messages."""

from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field


class MCPInitializeParams(BaseModel):
    """Parameters for initialize request."""
    
    protocolVersion: str = Field(description="MCP protocol version")
    capabilities: dict[str, Any] = Field(default_factory=dict)
    clientInfo: dict[str, Any] = Field(default_factory=dict)


class MCPTool(BaseModel):
    """MCP tool definition."""
    
    model_config = ConfigDict(frozen=True)
    
    name: str
    description: str
    inputSchema: dict[str, Any]


class MCPToolListResult(BaseModel):
    """Result for tools/list."""
    
    tools: list[MCPTool]


class MCPToolCallParams(BaseModel):
    """Parameters for tools/call."""
    
    name: str
    arguments: dict[str, Any] | None = Field(default_factory=dict)


class MCPContent(BaseModel):
    """Content item in tool response."""
    
    type: Literal["text"]
    text: str


class MCPToolCallResult(BaseModel):
    """Result for tools/call."""
    
    content: list[MCPContent]
    isError: bool = False


class MCPJSONRPCRequest(BaseModel):
    """Generic JSON-RPC 2.0 request."""
    
    jsonrpc: Literal["2.0"] = "2.0"
    id: str | int | None = None
    method: str
    params: dict[str, Any] | None = None


class MCPJSONRPCResponse(BaseModel):
    """Generic JSON-RPC 2.0 response."""
    
    jsonrpc: Literal["2.0"] = "2.0"
    id: str | int | None = None
    result: Any | None = None
    error: dict[str, Any] | None = None
    
    def to_wire(self) -> dict[str, Any]:
        """Serialize for the wire, keeping a null id but dropping unset members."""
        data = self.model_dump(exclude_none=True)
        data["id"] = self.id
        return data


# Standard JSON-RPC error codes
class MCPErrorCodes:
    """Standard MCP/JSON-RPC error codes."""
    
    # JSON-RPC standard errors
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    
    # Gateway errors (-32000 to -32099)
    GATEWAY_TIMEOUT = -32003
    GATEWAY_UNAVAILABLE = -32004
    GATEWAY_ERROR = -32005
    GATEWAY_INVALID_RESPONSE = -32006
