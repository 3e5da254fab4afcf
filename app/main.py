# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Todo Summary API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.cors import cors_middleware
from app.exceptions import (
    TodoApiException,
    http_exception_handler,
    todo_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, todos, summarize, profile

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The Supabase and OpenAI clients are created lazily on first use and
    live as long as the process, so there is nothing to tear down.
    """
    logger.info(f"Starting Todo Summary API in {settings.ENVIRONMENT} mode")
    logger.info(
        "Token verification: "
        + ("local JWT secret" if settings.SUPABASE_JWT_SECRET else "Supabase Auth")
    )

    yield

    logger.info("Shutting down Todo Summary API")


# Create FastAPI application
app = FastAPI(
    title="Todo Summary API",
    description="""
## Personal Todo API with Slack Summaries

Every endpoint except `/health` requires a Supabase Auth bearer token.
Todos are private to their owner.

| Method | Path | Action |
|--------|------|--------|
| GET | `/todos` | List your todos |
| POST | `/todos` | Create a todo |
| PATCH | `/todos/{id}` | Update a todo |
| DELETE | `/todos/{id}` | Delete a todo |
| POST | `/summarize` | Summarize open todos and post them to Slack |
| GET/PATCH | `/profile` | Read or set your Slack webhook URL |
""",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Todos",
            "description": "Create, list, update and delete your todos",
        },
        {
            "name": "Summary",
            "description": "AI summary of open todos delivered to Slack",
        },
        {
            "name": "Profile",
            "description": "Slack webhook settings",
        },
        {
            "name": "Health",
            "description": "API health check",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# Preflight answers and CORS headers on every response
app.middleware("http")(cors_middleware)


# =============================================================================
# Exception Handlers
# =============================================================================

app.add_exception_handler(TodoApiException, todo_api_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    todos.router,
    prefix="/todos",
    tags=["Todos"]
)

app.include_router(
    summarize.router,
    prefix="/summarize",
    tags=["Summary"]
)

app.include_router(
    profile.router,
    prefix="/profile",
    tags=["Profile"]
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.is_development,
    )
