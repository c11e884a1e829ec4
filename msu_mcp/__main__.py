"""Run the MSU MCP server on stdio."""

import anyio
import structlog

from .config import get_settings
from .log import configure_logging
from .mcp_transport.stdio import run_stdio


logger = structlog.get_logger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging("DEBUG" if settings.DEBUG else settings.MCP_LOG_LEVEL)

    if not settings.credentials_configured:
        logger.warning(
            "merchant_credentials_missing",
            hint="set MSU_MERCHANT, MSU_MERCHANT_USER and MSU_MERCHANT_PASSWORD",
        )

    anyio.run(run_stdio, settings)


if __name__ == "__main__":
    main()
