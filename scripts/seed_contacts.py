#!/usr/bin/env python3
"""
Insert demo contacts into the database pointed to by DATABASE_URL.

Usage:
  python scripts/seed_contacts.py [--create-tables] [--name "Ada Lovelace" --email ada@example.com [--born 1815-12-10]]
"""
from __future__ import annotations

import argparse
import sys
from datetime import date

from sqlalchemy import select

from contactbook.db.create_tables import create_all
from contactbook.db.models import Contact
from contactbook.db.session import get_session

DEMO_CONTACTS = [
    ("Ada Lovelace", "ada@example.com", date(1815, 12, 10)),
    ("Alan Turing", "alan@example.com", date(1912, 6, 23)),
    ("Grace Hopper", "grace@example.com", None),
]


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise SystemExit(f"Invalid date '{value}' (expected YYYY-MM-DD)")


def seed(rows) -> int:
    inserted = 0
    with get_session() as session:
        for name, email, born in rows:
            exists = session.execute(select(Contact.id).where(Contact.email == email)).first()
            if exists:
                print(f"  skip: {email} already exists")
                continue
            session.add(Contact(name=name, email=email, date_of_birth=born))
            inserted += 1
        session.commit()
    return inserted


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed the contacts table")
    ap.add_argument("--create-tables", action="store_true", help="Create the schema before seeding")
    ap.add_argument("--name", help="Name of a single contact to add")
    ap.add_argument("--email", help="Email of the single contact")
    ap.add_argument("--born", help="Date of birth (YYYY-MM-DD)")
    args = ap.parse_args()

    if args.create_tables:
        create_all()
    if args.name or args.email:
        name = (args.name or "").strip()
        email = (args.email or "").strip()
        if not name or not email:
            raise SystemExit("--name and --email must be given together")
        rows = [(name, email, _parse_date(args.born))]
    else:
        rows = DEMO_CONTACTS
    count = seed(rows)
    print(f"OK: {count} contact(s) inserted")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
