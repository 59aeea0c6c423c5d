"""Email verification use case"""

import logging
from datetime import datetime
from typing import Callable

from ...core.errors import InvalidTokenError, TokenExpiredError
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class EmailVerificationUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, clock: Callable[[], datetime] = datetime.utcnow):
        self.unit_of_work = unit_of_work
        self.clock = clock

    async def execute(self, token: str) -> User:
        """Verify user email with token"""
        now = self.clock()
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_verification_token(token)
            if not user:
                raise InvalidTokenError("Invalid verification token")

            if user.is_verification_token_expired(now):
                raise TokenExpiredError("Verification token has expired")

            user.verify_email(now)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Email verified: %s", user.email)
        return user
