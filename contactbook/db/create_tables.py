"""Create the contacts schema: ``python -m contactbook.db.create_tables``."""
from __future__ import annotations

import sys

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .models import Contact
from .session import Base, get_engine


def create_all() -> bool:
    """Create missing tables; return True when the contacts table was new."""
    engine = get_engine()
    existed = inspect(engine).has_table(Contact.__tablename__)
    Base.metadata.create_all(bind=engine)
    return not existed


if __name__ == "__main__":
    try:
        created = create_all()
    except (SQLAlchemyError, RuntimeError) as exc:
        sys.stderr.write(f"Failed to create tables: {exc}\n")
        raise SystemExit(1) from exc
    print("contacts table created." if created else "contacts table already present.")
