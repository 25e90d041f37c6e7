"""HTTP consumer for the /api/contacts endpoint."""
from __future__ import annotations

import httpx

from contactbook.domain.contacts import ContactOut

CONTACTS_PATH = "/api/contacts"


class ContactsApiError(Exception):
    """Raised when the contacts endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class InvalidContactsPayload(Exception):
    """Raised when a 2xx body is not a JSON list of contacts; the body itself is not echoed."""

    def __init__(self) -> None:
        super().__init__("Invalid contacts payload")


class ContactsApiClient:
    """Fetch contacts over HTTP using a caller-owned httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient, path: str = CONTACTS_PATH) -> None:
        self._client = client
        self.path = path

    async def fetch_contacts(self) -> list[ContactOut]:
        response = await self._client.get(self.path)
        if not response.is_success:
            raise ContactsApiError(response.status_code)
        try:
            payload = response.json()
            if not isinstance(payload, list):
                raise InvalidContactsPayload()
            return [ContactOut.model_validate(item) for item in payload]
        except ValueError as exc:
            # json and pydantic errors quote the body
            raise InvalidContactsPayload() from exc
