"""Contacts store: engine/session helpers and the Contact model."""

from .models import Contact
from .session import Base, get_engine, get_session

__all__ = ["Base", "Contact", "get_engine", "get_session"]
