"""Shopfront FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.
``SHOPFRONT_SERVICES`` selects which services this process serves, so the
same code runs as one combined server or as one process per service.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
    SHOPFRONT_SERVICES=ordering uvicorn app:app --app-dir src --port 8003
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.api.errors import register_exception_handlers
from shared.config import get_settings
from shared.logging import add_context, clear_context


def _load_service(name):
    """Import a service's domain and router, returning ``(prefix, domain, router)``."""
    if name == "identity":
        from identity.api import router
        from identity.domain import identity as domain
    elif name == "cart":
        from cart.api import router
        from cart.domain import cart as domain
    elif name == "ordering":
        from ordering.api import router
        from ordering.domain import ordering as domain
    elif name == "catalogue":
        from catalogue.api import router
        from catalogue.domain import catalogue as domain
    else:
        raise ValueError(f"Unknown service: {name}")
    return router.prefix, domain, router


def create_app(services=None) -> FastAPI:
    """Build the FastAPI app for ``services`` (defaults to the configured list).

    Domains are initialized here, so uvicorn workers share them.
    PROTEAN_ENV controls which config overlay is applied:
      - "test"       → event_processing = "sync"  (handlers fire in UoW)
      - "production" → event_processing = "async" (handlers fire via Engine)
    """
    services = list(services or get_settings().services)

    route_domain_map = {}
    routers = []
    for name in services:
        prefix, domain, router = _load_service(name)
        domain.init()
        route_domain_map[prefix] = domain
        routers.append(router)

    def _resolve_domain(path: str):
        for prefix, domain in route_domain_map.items():
            if path.startswith(prefix):
                return domain
        return None

    app = FastAPI(
        title="Shopfront API",
        description=f"E-commerce services: {', '.join(services)}",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the correct Protean domain context for each request."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        domain = _resolve_domain(request.url.path)
        if domain is not None:
            with domain.domain_context():
                response = await call_next(request)
            return response
        # No domain match, pass through (health check, docs, etc.)
        return await call_next(request)

    register_exception_handlers(app)
    for router in routers:
        app.include_router(router)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "services": {prefix: domain.name for prefix, domain in route_domain_map.items()},
            }
        )

    return app


app = create_app()
