from __future__ import annotations

from fastapi import APIRouter

from contactbook.domain.contacts import ContactOut
from contactbook.services.contact_service import get_contacts

router = APIRouter(prefix="/api", tags=["contacts"])


@router.get("/contacts", response_model=list[ContactOut])
def list_contacts():
    return get_contacts()
