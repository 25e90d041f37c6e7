import hashlib
import os
import pathlib

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from contactbook.core.config import get_settings
from contactbook.core.logging import get_logger
from contactbook.domain.contacts import format_short_date
from contactbook.routers import contacts as contacts_router
from contactbook.routers import pages as pages_router

logger = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "style-src 'self'; "
            "form-action 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


app = FastAPI(title="Contactbook")

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "web")


class CachedStaticFiles(StaticFiles):
    def file_response(self, full_path, stat_result, scope, status_code=200):
        resp = super().file_response(full_path, stat_result, scope, status_code)
        # assets are versioned by a content hash in the query string
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"
        return resp


app.mount("/static", CachedStaticFiles(directory=WEB), name="static")
templates = Jinja2Templates(directory=os.path.join(BASE, "templates"))
templates.env.filters["short_date"] = format_short_date

settings = get_settings()

allowed_cors = {settings.public_base_url}
if settings.app_env != "prod":
    allowed_cors.update(
        {
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        }
    )
allowed_cors = {origin for origin in allowed_cors if origin}
if allowed_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_cors),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")


def _fingerprint_asset(rel_path: str) -> str:
    """
    Build the public href for a static asset: "contacts.css" -> "/static/contacts.css?v=<hash8>".
    """
    src = pathlib.Path(WEB) / rel_path
    href = "/static/" + rel_path.replace("\\", "/")
    if not src.exists():
        return href
    digest = hashlib.sha1(src.read_bytes()).hexdigest()[:8]
    return f"{href}?v={digest}"


CSS_HREF = _fingerprint_asset("contacts.css")
app.state.css_href = CSS_HREF
app.state.templates = templates

app.include_router(contacts_router.router)
app.include_router(pages_router.router)

pages_router.configure_pages(css_href=CSS_HREF)
logger.info("Contactbook app configured (env=%s)", settings.app_env)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    return app
