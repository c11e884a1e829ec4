"""Dispatcher for tool discovery and query_transaction invocation."""

import json
from typing import Any, Mapping

import httpx
import structlog
from pydantic import ValidationError

from msu_mcp.config import Settings
from msu_mcp.errors import MSU_ERROR_CODES, annotate_error_codes
from msu_mcp.exceptions import InvalidToolArgumentsError, UnknownToolError
from msu_mcp.mcp_transport.schemas import MCPContent, MCPToolCallResult, MCPToolListResult

from .exceptions import GatewayError
from .params import build_query_form
from .proxy import post_form
from .schemas import (
    QUERY_TRANSACTION_TOOL,
    TOOL_NAME,
    MerchantCredentials,
    QueryTransactionArguments,
)


logger = structlog.get_logger(__name__)


def _format_validation_errors(exc: ValidationError) -> list[str]:
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        errors.append(f"{location}: {error['msg']}")
    return errors


def parse_arguments(arguments: Mapping[str, Any] | None) -> QueryTransactionArguments:
    """Validate raw tool arguments.
    
    Args:
        arguments: Arguments from the tools/call request, possibly None.
        
    Returns:
        Validated arguments.
        
    Raises:
        InvalidToolArgumentsError: On unknown names or non-string values.
    """
    try:
        return QueryTransactionArguments.model_validate(dict(arguments or {}))
    except ValidationError as e:
        raise InvalidToolArgumentsError(TOOL_NAME, _format_validation_errors(e))


def format_result(payload: Any) -> MCPToolCallResult:
    """Wrap a JSON payload as a single pretty-printed text content item."""
    return MCPToolCallResult(
        content=[MCPContent(
            type="text",
            text=json.dumps(payload, indent=2, ensure_ascii=False)
        )],
        isError=False
    )


class TransactionQueryDispatcher:
    """Serves tools/list and tools/call for the query_transaction tool.
    
    All configuration is supplied at construction so the dispatcher holds no
    per-call state and can serve concurrent invocations.
    
    Attributes:
        client: Shared HTTP client for gateway requests.
        gateway_url: MSU API endpoint.
        credentials: Merchant credentials added to every request.
        timeout: Outbound request timeout in seconds, None for no timeout.
        error_codes: Error-code explanations used for annotation.
    """
    
    def __init__(
        self,
        client: httpx.AsyncClient,
        gateway_url: str,
        credentials: MerchantCredentials,
        timeout: float | None = None,
        error_codes: Mapping[str, str] = MSU_ERROR_CODES,
    ) -> None:
        self.client = client
        self.gateway_url = gateway_url
        self.credentials = credentials
        self.timeout = timeout
        self.error_codes = error_codes

    @classmethod
    def from_settings(
        cls,
        client: httpx.AsyncClient,
        settings: Settings,
        error_codes: Mapping[str, str] = MSU_ERROR_CODES,
    ) -> "TransactionQueryDispatcher":
        return cls(
            client=client,
            gateway_url=settings.MSU_API_BASE_URL,
            credentials=MerchantCredentials.from_settings(settings),
            timeout=settings.MSU_REQUEST_TIMEOUT_SECONDS,
            error_codes=error_codes,
        )

    def list_tools(self) -> MCPToolListResult:
        """Return the tool descriptor list."""
        return MCPToolListResult(tools=[QUERY_TRANSACTION_TOOL])

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> MCPToolCallResult:
        """Invoke a tool by name.
        
        Args:
            name: Tool name from the tools/call request.
            arguments: Tool arguments.
            
        Returns:
            Tool result holding the annotated gateway response.
            
        Raises:
            UnknownToolError: If ``name`` is not query_transaction.
            InvalidToolArgumentsError: If the arguments fail validation.
            GatewayError: If the gateway call fails.
        """
        if name != TOOL_NAME:
            raise UnknownToolError(name)

        query = parse_arguments(arguments)
        form = build_query_form(query, self.credentials)
        logger.info(
            "tool_call_started",
            tool_name=name,
            fields=list(form),
        )

        try:
            data = await post_form(
                client=self.client,
                gateway_url=self.gateway_url,
                form=form,
                timeout=self.timeout,
            )
        except GatewayError as e:
            logger.warning("tool_call_failed", tool_name=name, error_code=e.code)
            raise

        annotated = annotate_error_codes(data, self.error_codes)
        logger.info("tool_call_completed", tool_name=name)
        return format_result(annotated)
