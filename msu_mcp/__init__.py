"""MCP server exposing MerchantSafe Unipay transaction queries."""
