"""Custom exceptions for the MSU MCP server."""


class MSUMCPError(Exception):
    """Base exception for all MSU MCP errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class UnknownToolError(MSUMCPError):
    """Raised when a client invokes a tool this server does not provide.
    
    Attributes:
        tool_name: Name of the requested tool.
    """
    
    def __init__(self, tool_name: str):
        super().__init__(
            message=f"Unknown tool: {tool_name}",
            code="TOOL_NOT_FOUND"
        )
        self.tool_name = tool_name


class InvalidToolArgumentsError(MSUMCPError):
    """Raised when tool arguments do not match the input schema.
    
    Attributes:
        tool_name: Name of the invoked tool.
        errors: Human-readable validation failures.
    """
    
    def __init__(self, tool_name: str, errors: list[str]):
        detail = "; ".join(errors) or "invalid arguments"
        super().__init__(
            message=f"Invalid arguments for tool '{tool_name}': {detail}",
            code="INVALID_ARGUMENTS"
        )
        self.tool_name = tool_name
        self.errors = errors


class MethodNotFoundError(MSUMCPError):
    """Raised when a JSON-RPC request names a method this server does not handle.
    
    Attributes:
        method: The requested method.
    """
    
    def __init__(self, method: str):
        super().__init__(
            message=f"Method not found: {method}",
            code="METHOD_NOT_FOUND"
        )
        self.method = method
