"""Explanations for error codes embedded in MSU gateway responses.

The entries are unverified placeholders: they follow the gateway's ERRnnnnn
code format but the explanations were not taken from MSU's published error
list. Replace them with the published list before relying on them.

The table is read-only. Callers that need a different table (tests, a
gateway release with new codes) pass their own mapping to the dispatcher
instead of mutating this one.
"""

from types import MappingProxyType
from typing import Mapping


MSU_ERROR_CODES: Mapping[str, str] = MappingProxyType({
    # Merchant and authentication
    "ERR10001": "Merchant not found",
    "ERR10002": "Merchant is not active",
    "ERR10003": "Merchant user not found",
    "ERR10004": "Merchant user is not active",
    "ERR10005": "Invalid merchant user password",
    "ERR10006": "Merchant user is locked due to too many failed login attempts",
    "ERR10007": "Merchant user password has expired",
    "ERR10008": "Merchant user is not authorized for this action",
    "ERR10009": "Request originated from an IP address that is not allowed for this merchant",
    "ERR10010": "Merchant credentials are missing",
    # Request and parameters
    "ERR20001": "ACTION parameter is missing",
    "ERR20002": "ACTION parameter is not supported",
    "ERR20003": "A required parameter is missing",
    "ERR20004": "A parameter has an invalid format",
    "ERR20005": "A parameter exceeds its maximum length",
    "ERR20006": "STARTDATE has an invalid format, expected dd-MM-yyyy HH:mm",
    "ERR20007": "ENDDATE has an invalid format, expected dd-MM-yyyy HH:mm",
    "ERR20008": "STARTDATE must be before ENDDATE",
    "ERR20009": "Requested date range is too long",
    "ERR20010": "LIMIT must be a positive number",
    "ERR20011": "OFFSET must be a non-negative number",
    "ERR20012": "TRANSACTIONSTATUS value is not recognized",
    "ERR20013": "CUSTOMEREMAIL has an invalid format",
    # Transaction lookup
    "ERR30001": "Transaction not found",
    "ERR30002": "Merchant payment ID not found",
    "ERR30003": "Transaction belongs to another merchant",
    "ERR30004": "Customer not found",
    "ERR30005": "No transactions match the given criteria",
    "ERR30006": "Transaction is still being processed",
    # Payment processing
    "ERR40001": "Transaction declined by the issuing bank",
    "ERR40002": "Insufficient funds",
    "ERR40003": "Card has expired",
    "ERR40004": "Invalid card number",
    "ERR40005": "Invalid card security code",
    "ERR40006": "3D Secure authentication failed",
    "ERR40007": "Card is not permitted for this transaction type",
    "ERR40008": "Transaction limit exceeded",
    "ERR40009": "Suspected fraud, transaction rejected",
    "ERR40010": "Duplicate merchant payment ID",
    "ERR40011": "Currency is not supported for this merchant",
    "ERR40012": "Installment option is not available",
    # Refunds and cancellations
    "ERR50001": "Refund amount exceeds the original transaction amount",
    "ERR50002": "Transaction cannot be refunded in its current state",
    "ERR50003": "Transaction cannot be voided in its current state",
    "ERR50004": "Transaction has already been refunded",
    "ERR50005": "Transaction has already been voided",
    # System
    "ERR90001": "Bank connection error",
    "ERR90002": "Bank did not respond in time",
    "ERR90003": "Gateway is under maintenance",
    "ERR90004": "Too many requests, try again later",
    "ERR99999": "Unexpected system error",
})


def lookup(code: str, table: Mapping[str, str] = MSU_ERROR_CODES) -> str | None:
    """Return the explanation for an error code, or None if unknown."""
    return table.get(code)
