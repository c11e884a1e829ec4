"""Maps query_transaction arguments onto the MSU form fields."""

from .schemas import MerchantCredentials, QueryTransactionArguments


ACTION = "QUERYTRANSACTION"
DEFAULT_LIMIT = "1000"

# Optional arguments in wire order; LIMIT is handled separately
_OPTIONAL_FIELDS: tuple[tuple[str, str], ...] = (
    ("pgtranid", "PGTRANID"),
    ("start_date", "STARTDATE"),
    ("end_date", "ENDDATE"),
)
_OPTIONAL_FIELDS_AFTER_LIMIT: tuple[tuple[str, str], ...] = (
    ("merchant_payment_id", "MERCHANTPAYMENTID"),
    ("customer", "CUSTOMER"),
    ("customer_email", "CUSTOMEREMAIL"),
    ("customer_name", "CUSTOMERNAME"),
    ("customer_phone", "CUSTOMERPHONE"),
    ("transaction_status", "TRANSACTIONSTATUS"),
    ("offset", "OFFSET"),
)


def _copy_present(
    form: dict[str, str],
    arguments: QueryTransactionArguments,
    fields: tuple[tuple[str, str], ...],
) -> None:
    for arg_name, wire_name in fields:
        value = getattr(arguments, arg_name)
        if value:
            form[wire_name] = value


def build_query_form(
    arguments: QueryTransactionArguments,
    credentials: MerchantCredentials,
) -> dict[str, str]:
    """Build the form fields for a QUERYTRANSACTION request.
    
    Credentials and ACTION are always present. LIMIT is always present and
    falls back to ``DEFAULT_LIMIT``. Every other field is included only when
    its argument is a non-empty string. Values are passed through as-is.
    
    Args:
        arguments: Validated tool arguments.
        credentials: Merchant credentials.
        
    Returns:
        Ordered mapping of wire field name to value.
    """
    form: dict[str, str] = {
        "MERCHANT": credentials.merchant.get_secret_value(),
        "MERCHANTUSER": credentials.user.get_secret_value(),
        "MERCHANTPASSWORD": credentials.password.get_secret_value(),
        "ACTION": ACTION,
    }
    _copy_present(form, arguments, _OPTIONAL_FIELDS)
    form["LIMIT"] = arguments.limit or DEFAULT_LIMIT
    _copy_present(form, arguments, _OPTIONAL_FIELDS_AFTER_LIMIT)
    return form
