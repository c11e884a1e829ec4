"""Exceptions raised while talking to the MSU payment gateway."""

from msu_mcp.exceptions import MSUMCPError


class GatewayError(MSUMCPError):
    """Base exception for gateway-specific errors."""
    pass


class GatewayUnavailableError(GatewayError):
    """Raised when the gateway cannot be reached at the network layer.
    
    Attributes:
        gateway_url: URL of the unreachable gateway.
        reason: Description of the connection failure.
    """
    
    def __init__(self, gateway_url: str, reason: str = "Connection failed", code: str = "GATEWAY_UNAVAILABLE"):
        super().__init__(
            message=f"Network error connecting to MSU API: {reason}",
            code=code
        )
        self.gateway_url = gateway_url
        self.reason = reason


class GatewayTimeoutError(GatewayUnavailableError):
    """Raised when the gateway does not answer within the configured timeout.
    
    Attributes:
        gateway_url: URL of the gateway that timed out.
        timeout_seconds: Timeout duration that was exceeded.
    """
    
    def __init__(self, gateway_url: str, timeout_seconds: float | None):
        super().__init__(
            gateway_url=gateway_url,
            reason=f"request timed out after {timeout_seconds}s",
            code="GATEWAY_TIMEOUT"
        )
        self.timeout_seconds = timeout_seconds


class GatewayHTTPError(GatewayError):
    """Raised when the gateway answers with a non-success HTTP status.
    
    Attributes:
        gateway_url: URL of the gateway that returned an error.
        status_code: HTTP status code from the gateway.
        body: Raw response body text.
    """
    
    def __init__(self, gateway_url: str, status_code: int, body: str = ""):
        super().__init__(
            message=f"MSU API Error ({status_code}): {body}",
            code="GATEWAY_ERROR"
        )
        self.gateway_url = gateway_url
        self.status_code = status_code
        self.body = body


class GatewayResponseError(GatewayError):
    """Raised when a successful gateway response is not valid JSON.
    
    Attributes:
        gateway_url: URL of the gateway.
        detail: Parser error description.
    """
    
    def __init__(self, gateway_url: str, detail: str):
        super().__init__(
            message=f"MSU API returned an invalid JSON response: {detail}",
            code="GATEWAY_INVALID_RESPONSE"
        )
        self.gateway_url = gateway_url
        self.detail = detail
