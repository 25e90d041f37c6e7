"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from sqlalchemy import select

from contactbook.db.models import Contact
from contactbook.db.session import get_session


class ContactRepository:
    """Read helpers wrapping the SQLAlchemy session."""

    def list_contacts(self) -> list[Contact]:
        with get_session() as session:
            return session.execute(select(Contact)).scalars().all()
