"""Unit of Work over a request-scoped SQLAlchemy session"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...domain.repositories.unit_of_work import IUnitOfWork
from .user_repository_impl import UserRepositoryImpl
from .profile_repository_impl import ProfileRepositoryImpl

logger = logging.getLogger(__name__)


class UnitOfWorkImpl(IUnitOfWork):
    """Commits on a clean exit unless the block already committed; rolls back on error.

    Domain events raised by users written through this unit are logged once
    their changes are committed.
    """

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepositoryImpl(session)
        self.profiles = ProfileRepositoryImpl(session)
        self._committed = False

    async def __aenter__(self):
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            await self.rollback()
        elif not self._committed:
            await self.commit()

    async def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        self._committed = True
        self._publish_events()

    async def rollback(self) -> None:
        self.session.rollback()
        # Events from a rolled back unit never happened
        for user in self.users.pop_written():
            user.get_events()

    def _publish_events(self) -> None:
        for user in self.users.pop_written():
            for event in user.get_events():
                logger.info("Domain event %s: %s", type(event).__name__, event)
