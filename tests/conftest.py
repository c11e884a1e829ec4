# Test configuration
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from pydantic import SecretStr

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from msu_mcp.config import Settings  # noqa: E402
from msu_mcp.gateway.schemas import MerchantCredentials  # noqa: E402
from msu_mcp.gateway.service import TransactionQueryDispatcher  # noqa: E402

GATEWAY_URL = "https://msu.test/msu/api/v2"


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the process environment and any .env file."""
    return Settings(
        _env_file=None,
        MSU_API_BASE_URL=GATEWAY_URL,
        MSU_MERCHANT=SecretStr("merchant-1"),
        MSU_MERCHANT_USER=SecretStr("api-user"),
        MSU_MERCHANT_PASSWORD=SecretStr("s3cret"),
    )


@pytest.fixture
def credentials(settings: Settings) -> MerchantCredentials:
    return MerchantCredentials.from_settings(settings)


@pytest.fixture
def error_codes() -> dict[str, str]:
    return {
        "ERR00001": "Invalid merchant",
        "ERR01234": "Transaction not found",
    }


@pytest.fixture
def gateway_requests() -> list[httpx.Request]:
    """Requests seen by the mock gateway."""
    return []


@pytest_asyncio.fixture
async def make_dispatcher(credentials, error_codes, gateway_requests):
    """Build a dispatcher whose HTTP client is served by ``handler``.
    
    ``handler`` takes an ``httpx.Request`` and returns an ``httpx.Response``
    or raises an ``httpx`` transport exception. Clients are closed at teardown.
    """
    clients: list[httpx.AsyncClient] = []

    def _make(handler, timeout: float | None = None) -> TransactionQueryDispatcher:
        def _record(request: httpx.Request) -> httpx.Response:
            gateway_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        clients.append(client)
        return TransactionQueryDispatcher(
            client=client,
            gateway_url=GATEWAY_URL,
            credentials=credentials,
            timeout=timeout,
            error_codes=error_codes,
        )

    yield _make

    for client in clients:
        await client.aclose()
