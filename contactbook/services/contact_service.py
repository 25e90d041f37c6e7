"""
Contact accessor shared by the JSON endpoint and the in-process panel.
"""

from __future__ import annotations

from contactbook.core.logging import get_logger
from contactbook.db.models import Contact
from contactbook.domain.contacts import ContactOut
from contactbook.repositories.sql_repository import ContactRepository

logger = get_logger(__name__)
_repo = ContactRepository()


def get_contacts() -> list[Contact]:
    """
    Return every persisted contact in store order.

    Store errors are not caught here; callers decide what to do with them.
    """
    contacts = _repo.list_contacts()
    logger.debug("Loaded %d contacts", len(contacts))
    return contacts


def list_contact_views() -> list[ContactOut]:
    return [ContactOut.model_validate(entity) for entity in get_contacts()]
