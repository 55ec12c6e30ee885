from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    # Python-side default so the same models work on SQLite in tests
    return datetime.now(timezone.utc)
