"""
Main FastAPI application for the Roster API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import UserStore

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


def create_store() -> UserStore:
    """Create the user store the settings ask for."""
    if settings.seed_users:
        return UserStore.seeded()
    return UserStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    store: UserStore = app.state.store
    logger.info("Starting Roster API...", users=len(store), next_id=store.next_id)

    yield

    logger.info("Shutting down Roster API...")
    store.clear()


def create_app(store: UserStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: User store to serve. A new one is created from settings if omitted.
    """
    app = FastAPI(
        title="Roster API",
        description="GraphQL API over an in-memory user collection",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store if store is not None else create_store()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__, "users": len(app.state.store)}

    from ..graphql.schema import create_graphql_router, validate_schema

    try:
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "roster.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
