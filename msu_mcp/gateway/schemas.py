"""Schemas for the query_transaction tool."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from msu_mcp.config import Settings
from msu_mcp.mcp_transport.schemas import MCPTool


TOOL_NAME = "query_transaction"

TOOL_DESCRIPTION = (
    "Query payment transaction details from MSU (MerchantSafe Unipay) payment gateway. "
    "Returns transaction status, amount, payment method, timestamps, and customer information. "
    "Can query by transaction ID, date range, or customer details. "
    "Without specific identifiers, returns last 30 days of transactions."
)


class QueryTransactionArguments(BaseModel):
    """Arguments accepted by the query_transaction tool.
    
    Every field is optional. Lengths listed in the input schema are advisory
    and are not enforced here; the gateway has the final word on them.
    """
    
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True, frozen=True)
    
    pgtranid: str | None = Field(
        default=None,
        description="Transaction ID given by payment gateway.",
    )
    start_date: str | None = Field(
        default=None,
        description="Start date for transaction search in dd-MM-yyyy HH:mm format (max length: 16)",
        json_schema_extra={"maxLength": 16},
    )
    end_date: str | None = Field(
        default=None,
        description="End date for transaction search in dd-MM-yyyy HH:mm format (max length: 16)",
        json_schema_extra={"maxLength": 16},
    )
    merchant_payment_id: str | None = Field(
        default=None,
        description=(
            "Payment ID given by Merchant (must be unique, max length: 128). "
            "Recommended max 40 characters."
        ),
        json_schema_extra={"maxLength": 128},
    )
    customer_name: str | None = Field(
        default=None,
        description="Name of the Customer (max length: 128)",
        json_schema_extra={"maxLength": 128},
    )
    offset: str | None = Field(
        default=None,
        description=(
            "Specifies the number from which transactions will start for pagination "
            "(max length: 10, default: '0')"
        ),
        json_schema_extra={"maxLength": 10},
    )
    limit: str | None = Field(
        default=None,
        description="The maximum number of transactions in response (max length: 4, default: '1000')",
        json_schema_extra={"maxLength": 4},
    )
    customer: str | None = Field(
        default=None,
        description=(
            "The Merchant System ID for customer. "
            "It must be unique within a Merchant (max length: 128)"
        ),
        json_schema_extra={"maxLength": 128},
    )
    customer_email: str | None = Field(
        default=None,
        description="Customer e-mail (max length: 64)",
        json_schema_extra={"maxLength": 64},
    )
    customer_phone: str | None = Field(
        default=None,
        description="Customer phone / mobile number (max length: 64)",
        json_schema_extra={"maxLength": 64},
    )
    transaction_status: str | None = Field(
        default=None,
        description="Transaction status (max length: 18)",
        json_schema_extra={"maxLength": 18},
    )


def _build_input_schema() -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for name, field in QueryTransactionArguments.model_fields.items():
        prop: dict[str, Any] = {"type": "string", "description": field.description}
        prop.update(field.json_schema_extra or {})
        properties[name] = prop
    return {
        "type": "object",
        "properties": properties,
        "required": [],
        "additionalProperties": False,
    }


QUERY_TRANSACTION_TOOL = MCPTool(
    name=TOOL_NAME,
    description=TOOL_DESCRIPTION,
    inputSchema=_build_input_schema(),
)


class MerchantCredentials(BaseModel):
    """Merchant credentials sent with every gateway request.
    
    Attributes:
        merchant: Merchant identifier.
        user: Merchant API user.
        password: Merchant API user password.
    """
    
    model_config = ConfigDict(frozen=True)
    
    merchant: SecretStr
    user: SecretStr
    password: SecretStr

    @classmethod
    def from_settings(cls, settings: Settings) -> "MerchantCredentials":
        return cls(
            merchant=settings.MSU_MERCHANT,
            user=settings.MSU_MERCHANT_USER,
            password=settings.MSU_MERCHANT_PASSWORD,
        )
