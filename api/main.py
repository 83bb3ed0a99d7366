"""FastAPI service for the Nibert Investments website."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies import get_settings
from api.models import error_body
from api.routers import company_router, contacts_router, portfolio_router, search_router
from nibert_site import __version__
from nibert_site.config import Settings
from nibert_site.contacts import ContactStore, build_store
from nibert_site.errors import SiteError, UnexpectedError
from nibert_site.portfolio import PortfolioCatalog

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-XSS-Protection": "0",
}

ENDPOINTS = [
    ("GET", "/api/health", "Health check"),
    ("GET", "/api/portfolio", "Portfolio items"),
    ("GET", "/api/portfolio/:id", "Single portfolio item"),
    ("POST", "/api/contact", "Submit contact form"),
    ("GET", "/api/contacts", "Get contacts (admin)"),
    ("GET", "/api/company", "Company information"),
    ("GET", "/api/search", "Search functionality"),
]


def _unexpected_response(request: Request, message: str, detail: str) -> JSONResponse:
    settings: Settings = request.app.state.settings
    extra = {"error": detail} if settings.expose_error_details else {}
    return JSONResponse(status_code=500, content=error_body(message, **extra))


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(UnexpectedError)
    async def unexpected_error_handler(request: Request, exc: UnexpectedError):
        logger.error(f"{exc.message}: {exc.detail}", exc_info=exc.__cause__ or exc)
        return _unexpected_response(request, exc.message, exc.detail)

    @app.exception_handler(SiteError)
    async def site_error_handler(request: Request, exc: SiteError):
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Malformed request to {request.url.path}: {exc.errors()}")
        return _unexpected_response(request, "Internal server error", "Malformed request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content=error_body(
                    "Endpoint not found",
                    path=request.url.path,
                    method=request.method,
                ),
            )
        return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", exc_info=exc)
        settings: Settings = request.app.state.settings
        detail = str(exc) if settings.expose_error_details else "Something went wrong"
        return JSONResponse(
            status_code=500,
            content=error_body("Internal server error", error=detail),
            headers=SECURITY_HEADERS,
        )


def create_app(
    settings: Optional[Settings] = None,
    *,
    catalog: Optional[PortfolioCatalog] = None,
    contact_store: Optional[ContactStore] = None,
) -> FastAPI:
    """Build an app that owns its catalog and contact store.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        catalog: Portfolio catalog; the seeded catalog when omitted.
        contact_store: Contact store; chosen from ``settings.contacts_file``
            when omitted.
    """
    settings = settings if settings is not None else get_settings()

    app = FastAPI(
        title="Nibert Investments API",
        version=__version__,
        description="Portfolio, contact intake, company info and search for the website.",
    )
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else PortfolioCatalog()
    app.state.contact_store = (
        contact_store if contact_store is not None else build_store(settings.contacts_file)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials="*" not in settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    _register_exception_handlers(app)

    @app.get("/api/health")
    def health_check() -> dict:
        return {
            "status": "OK",
            "message": "Nibert Investments API is running",
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "environment": settings.environment,
        }

    app.include_router(portfolio_router, prefix="/api/portfolio", tags=["portfolio"])
    app.include_router(contacts_router, prefix="/api", tags=["contacts"])
    app.include_router(company_router, prefix="/api", tags=["company"])
    app.include_router(search_router, prefix="/api", tags=["search"])

    return app


app = create_app()
