# =============================================================================
# app/cors.py - Cross-Origin Headers
# =============================================================================
# Browsers call the API directly from the web client, so every response
# carries permissive CORS headers and any OPTIONS preflight is answered
# with 204 before authentication or routing.
# =============================================================================

from fastapi import Request, Response

from app.config import settings

CORS_HEADERS = {
    "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
}


async def cors_middleware(request: Request, call_next) -> Response:
    """Answer preflights and stamp CORS headers on every other response."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
