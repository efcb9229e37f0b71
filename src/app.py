"""Craft Bazaar FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from pyproject.toml:
#   - unset / "test" -> in-memory providers
#   - "production"   -> PostgreSQL via DATABASE_URL
from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from identity.domain import identity
from inbox.domain import inbox
from ordering.domain import ordering
from shared.errors import register_error_handlers
from shared.logging import configure_logging, get_logger, request_context
from shared.settings import Settings, get_settings
from shared.storage import FileStorage, LocalFileStorage

configure_logging()
logger = get_logger(__name__)

identity.init()
catalogue.init()
ordering.init()
inbox.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
ROUTE_DOMAIN_MAP = {
    "/auth": identity,
    "/crafts": catalogue,
    "/cart": ordering,
    "/checkout": ordering,
    "/contact": inbox,
}


def resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context and log context for each request."""
    domain = resolve_domain(request.url.path)
    with request_context(method=request.method, path=request.url.path):
        if domain is not None:
            with domain.domain_context():
                return await call_next(request)
        # No domain match: health check, docs, uploads
        return await call_next(request)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(settings: Settings | None = None, storage: FileStorage | None = None) -> FastAPI:
    """Build the application around explicit settings and upload storage."""
    from catalogue.api import craft_router
    from identity.api import router as identity_router
    from inbox.api import contact_router
    from ordering.api import cart_router, checkout_router

    settings = settings or get_settings()

    app = FastAPI(
        title="Craft Bazaar API",
        description="Handicraft marketplace: listings, moderation, cart, checkout and contact inbox",
    )
    app.state.settings = settings
    app.state.storage = storage or LocalFileStorage(settings.upload_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(domain_context_middleware)

    register_error_handlers(app)

    app.include_router(identity_router)
    app.include_router(craft_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    app.include_router(contact_router)

    if isinstance(app.state.storage, LocalFileStorage):
        app.state.storage.upload_dir.mkdir(parents=True, exist_ok=True)
        app.mount("/uploads", StaticFiles(directory=app.state.storage.upload_dir), name="uploads")

    # -----------------------------------------------------------------------
    # Health / root
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domains": {domain.name: {"name": domain.name} for domain in (identity, catalogue, ordering, inbox)},
            }
        )

    logger.info("app_created", upload_dir=settings.upload_dir)
    return app


app = create_app()
