"""Global dependencies for the HTTP application."""

from fastapi import Request

from msu_mcp.gateway.service import TransactionQueryDispatcher


async def get_dispatcher(request: Request) -> TransactionQueryDispatcher:
    """Dependency to get the application-wide tool dispatcher.
    
    The dispatcher and its HTTP client are created in the main.py lifespan
    and shared across requests to enable connection pooling.
    
    Args:
        request: The FastAPI request object.
        
    Returns:
        The shared TransactionQueryDispatcher.
    """
    return request.app.state.dispatcher
