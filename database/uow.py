import contextlib
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.orm import Session

from core.config_loader import StoreConfig
from database.database import SessionLocal
from database.repositories import (
    CandidateRepository,
    InvitationRepository,
    SearchLogRepository,
    TechnologyRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class ScoutUnitOfWork:
    """Repositories sharing one Session (and therefore one transaction)."""
    session: Session
    technologies: TechnologyRepository
    candidates: CandidateRepository
    invitations: InvitationRepository
    search_log: SearchLogRepository


@contextlib.contextmanager
def scout_uow(
    session_factory: Callable[[], Session] = SessionLocal,
    store_config: Optional[StoreConfig] = None
):
    """Per-unit-of-work transaction scope.

    Yields a ScoutUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes. A bulk send inside one unit of
    work is therefore all-or-nothing with respect to transient failures,
    while duplicates are isolated per recipient by savepoints.

    Usage:
        with scout_uow() as uow:
            manager = CampaignManager(uow.invitations, uow.candidates)
            manager.expire_stale()
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield ScoutUnitOfWork(
            session=session,
            technologies=TechnologyRepository(session, store_config),
            candidates=CandidateRepository(session, store_config),
            invitations=InvitationRepository(session, store_config),
            search_log=SearchLogRepository(session, store_config),
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
