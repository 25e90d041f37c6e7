"""
Dual-fetch dashboard state.

The page shows the same contacts loaded two ways: through the in-process
accessor and through the JSON endpoint. Each way gets its own ContactPanel,
and every panel holds exactly one FetchState at a time.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Sequence

from contactbook.core.logging import get_logger
from contactbook.domain.contacts import ContactOut

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Failed to fetch contacts"
SERVER_PANEL_TITLE = "Server Actions"
API_PANEL_TITLE = "API Route"

ContactLoader = Callable[[], Awaitable[Sequence[ContactOut]]]


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    status: FetchStatus
    contacts: tuple[ContactOut, ...] = ()
    error: str | None = None

    @classmethod
    def idle(cls) -> "FetchState":
        return cls(FetchStatus.IDLE)

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(FetchStatus.LOADING)

    @classmethod
    def success(cls, contacts: Sequence[ContactOut]) -> "FetchState":
        return cls(FetchStatus.SUCCESS, contacts=tuple(contacts))

    @classmethod
    def failure(cls, message: str) -> "FetchState":
        return cls(FetchStatus.ERROR, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status in (FetchStatus.IDLE, FetchStatus.LOADING)


def describe_error(exc: BaseException) -> str:
    """Reduce an exception to the text shown inside a panel."""
    return str(exc).strip() or DEFAULT_ERROR_MESSAGE


class ContactPanel:
    """
    One list panel and its fetch state.

    Every load takes a ticket from begin(). Results that carry a ticket older
    than the latest one issued are dropped, so a slow response from an earlier
    refresh cannot overwrite a newer one.
    """

    def __init__(self, title: str) -> None:
        self.title = title
        self.state = FetchState.idle()
        self._latest_ticket = 0

    def begin(self) -> int:
        self._latest_ticket += 1
        self.state = FetchState.loading()
        return self._latest_ticket

    def is_current(self, ticket: int) -> bool:
        return ticket == self._latest_ticket

    def resolve(self, ticket: int, contacts: Sequence[ContactOut]) -> bool:
        if not self.is_current(ticket):
            logger.debug("%s: dropping stale result for ticket %d", self.title, ticket)
            return False
        self.state = FetchState.success(contacts)
        return True

    def fail(self, ticket: int, message: str) -> bool:
        if not self.is_current(ticket):
            logger.debug("%s: dropping stale error for ticket %d", self.title, ticket)
            return False
        self.state = FetchState.failure(message)
        return True

    async def settle(self, ticket: int, loader: ContactLoader) -> None:
        """Await the loader and record its outcome; never raises."""
        try:
            contacts = await loader()
        except Exception as exc:
            logger.warning("%s: failed to fetch contacts: %s", self.title, exc)
            self.fail(ticket, describe_error(exc))
        else:
            self.resolve(ticket, contacts)

    async def load(self, loader: ContactLoader) -> None:
        await self.settle(self.begin(), loader)


class DualFetchView:
    """Server-call panel and HTTP panel, refreshed together."""

    def __init__(self, load_direct: ContactLoader, load_http: ContactLoader) -> None:
        self._load_direct = load_direct
        self._load_http = load_http
        self.server_panel = ContactPanel(SERVER_PANEL_TITLE)
        self.api_panel = ContactPanel(API_PANEL_TITLE)

    @property
    def panels(self) -> tuple[ContactPanel, ContactPanel]:
        return self.server_panel, self.api_panel

    async def refresh(self) -> None:
        # Both panels enter loading before either loader is awaited.
        server_ticket = self.server_panel.begin()
        api_ticket = self.api_panel.begin()
        await asyncio.gather(
            self.server_panel.settle(server_ticket, self._load_direct),
            self.api_panel.settle(api_ticket, self._load_http),
        )
