from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from .config import get_settings
from .gateway.service import TransactionQueryDispatcher
from .log import configure_logging
from .mcp_transport.http import router as mcp_router


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging("DEBUG" if settings.DEBUG else settings.MCP_LOG_LEVEL)

    # timeouts=None removes the global default timeout; the dispatcher
    # passes MSU_REQUEST_TIMEOUT_SECONDS per request
    app.state.http_client = httpx.AsyncClient(timeout=None)
    app.state.dispatcher = TransactionQueryDispatcher.from_settings(app.state.http_client, settings)

    yield

    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG
)


@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}


app.include_router(mcp_router)
