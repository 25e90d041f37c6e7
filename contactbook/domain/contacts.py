"""Contact shape shared by the JSON endpoint and the dashboard panels."""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContactOut(BaseModel):
    """Public view of a Contact row (camelCase on the wire)."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str
    name: str
    email: str
    date_of_birth: Optional[date] = None
    created_at: datetime
    updated_at: datetime


def format_short_date(value: date | datetime | None) -> str:
    """Render a date as M/D/YYYY (no zero padding)."""
    if value is None:
        return ""
    return f"{value.month}/{value.day}/{value.year}"
