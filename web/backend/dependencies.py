#!/usr/bin/env python3
"""
FastAPI dependencies: database sessions and application config.

Tests swap both out through app.dependency_overrides.
"""

from typing import Generator
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import AppConfig
from database.database import make_engine
from .config import get_config


class DatabaseManager:
    """Owns the engine and session factory for the web process."""

    def __init__(self, config: AppConfig):
        self.engine = make_engine(
            config.database.url,
            pool_pre_ping=True  # Verify connections before using
        )
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """One session per request; services commit or roll back themselves."""
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


_db_manager = DatabaseManager(get_config())


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped database session.

    Usage:
        @router.post("/api/campaigns")
        def create_campaign(request: CampaignCreate, db: Session = Depends(get_db)):
            ...
    """
    yield from _db_manager.get_session()


def get_app_config() -> AppConfig:
    """Cached application config (scoring weights, paging, expiry, retries)."""
    return get_config()
