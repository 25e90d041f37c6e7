from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from contactbook.core.config import get_settings
from contactbook.domain.contacts import ContactOut
from contactbook.services.contact_service import list_contact_views
from contactbook.services.contacts_client import ContactsApiClient
from contactbook.services.dashboard import DualFetchView

router = APIRouter(prefix="", tags=["pages"])

CSS_HREF = "/static/contacts.css"


def configure_pages(*, css_href: str) -> None:
    """Configure shared assets for the dashboard page."""
    global CSS_HREF
    CSS_HREF = css_href or "/static/contacts.css"


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _api_base_url() -> str:
    # Never derived from the incoming Host header.
    settings = get_settings()
    return settings.contacts_api_base_url or settings.public_base_url


async def get_contacts_api_client() -> AsyncIterator[ContactsApiClient]:
    """Yield a client for /api/contacts; the underlying connection pool lives per request."""
    timeout = httpx.Timeout(get_settings().contacts_api_timeout)
    async with httpx.AsyncClient(base_url=_api_base_url(), timeout=timeout) as client:
        yield ContactsApiClient(client)


async def _load_direct() -> list[ContactOut]:
    return await run_in_threadpool(list_contact_views)


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    api_client: ContactsApiClient = Depends(get_contacts_api_client),
):
    view = DualFetchView(load_direct=_load_direct, load_http=api_client.fetch_contacts)
    await view.refresh()
    templates = _templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"css_href": CSS_HREF, "panels": view.panels},
    )
