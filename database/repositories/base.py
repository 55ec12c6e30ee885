import functools
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.orm import Session
from tenacity import Retrying, before_sleep_log, retry_if_exception, stop_after_attempt, wait_exponential

from core.config_loader import StoreConfig
from core.exceptions import TransientStoreError

logger = logging.getLogger(__name__)


def _is_transient_error(exc: BaseException) -> bool:
    """
    Determine if a database error is worth retrying.

    Retries on:
    - OperationalError (lost connection, lock timeout, server restart)
    - Any DBAPIError that invalidated the connection

    Does NOT retry on integrity or programming errors.
    """
    if isinstance(exc, OperationalError):
        return True
    if isinstance(exc, DBAPIError):
        return bool(exc.connection_invalidated)
    return False


def transient_retry(func):
    """
    Retry a repository method on transient database errors.

    Uses the repository's StoreConfig for attempts and backoff. When the
    attempts are exhausted the error surfaces as TransientStoreError.
    """
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        retrying = Retrying(
            stop=stop_after_attempt(self.store_config.retry_attempts),
            wait=wait_exponential(multiplier=0.5, max=self.store_config.retry_wait_max_seconds),
            retry=retry_if_exception(_is_transient_error),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            return retrying(func, self, *args, **kwargs)
        except DBAPIError as e:
            if _is_transient_error(e):
                raise TransientStoreError(
                    f"Database unavailable in {func.__name__}: {e.orig}",
                    operation=func.__name__,
                ) from e
            raise
    return wrapper


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BaseRepository:
    def __init__(self, db: Session, store_config: Optional[StoreConfig] = None):
        self.db = db
        self.store_config = store_config or StoreConfig()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
