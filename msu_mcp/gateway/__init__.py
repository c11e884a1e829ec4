"""Gateway module - MSU request mapping, proxying and dispatch."""

from .schemas import (
    QUERY_TRANSACTION_TOOL,
    TOOL_NAME,
    MerchantCredentials,
    QueryTransactionArguments,
)
from .exceptions import (
    GatewayError,
    GatewayUnavailableError,
    GatewayTimeoutError,
    GatewayHTTPError,
    GatewayResponseError,
)
from .params import build_query_form
from .proxy import post_form
from .service import TransactionQueryDispatcher


__all__ = [
    # Schemas
    "QUERY_TRANSACTION_TOOL",
    "TOOL_NAME",
    "MerchantCredentials",
    "QueryTransactionArguments",
    # Exceptions
    "GatewayError",
    "GatewayUnavailableError",
    "GatewayTimeoutError",
    "GatewayHTTPError",
    "GatewayResponseError",
    # Mapping and transport
    "build_query_form",
    "post_form",
    # Service
    "TransactionQueryDispatcher",
]
