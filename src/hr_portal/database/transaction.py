from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .extensions import db


@contextmanager
def transaction() -> Iterator[Session]:
    """Commit the scoped session on success, roll back on any error."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
