"""HTTP client for posting form requests to the MSU gateway."""

from typing import Any

import httpx
import structlog

from .exceptions import (
    GatewayHTTPError,
    GatewayResponseError,
    GatewayTimeoutError,
    GatewayUnavailableError,
)


logger = structlog.get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def post_form(
    client: httpx.AsyncClient,
    gateway_url: str,
    form: dict[str, str],
    timeout: float | None = None,
) -> Any:
    """POST a form-encoded request to the gateway and return the parsed JSON body.
    
    Args:
        client: Shared HTTP client.
        gateway_url: URL of the MSU API endpoint.
        form: Ordered form fields.
        timeout: Request timeout in seconds, None for no timeout.
        
    Returns:
        Parsed JSON body of a successful response.
        
    Raises:
        GatewayTimeoutError: If the gateway doesn't respond in time.
        GatewayUnavailableError: If the request fails at the network layer.
        GatewayHTTPError: If the gateway returns a non-success status.
        GatewayResponseError: If a successful body is not valid JSON.
    """
    try:
        response = await client.post(
            gateway_url,
            data=form,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            timeout=timeout,
        )
    except httpx.TimeoutException:
        raise GatewayTimeoutError(
            gateway_url=gateway_url,
            timeout_seconds=timeout
        )
    except httpx.RequestError as e:
        raise GatewayUnavailableError(
            gateway_url=gateway_url,
            reason=str(e) or e.__class__.__name__
        )

    if not response.is_success:
        logger.warning(
            "gateway_http_error",
            gateway_url=gateway_url,
            status_code=response.status_code,
        )
        raise GatewayHTTPError(
            gateway_url=gateway_url,
            status_code=response.status_code,
            body=response.text
        )

    try:
        return response.json()
    except ValueError as e:
        raise GatewayResponseError(gateway_url=gateway_url, detail=str(e))
