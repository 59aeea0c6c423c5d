"""Reset password use case"""

import logging
from datetime import datetime
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from ...core.errors import InvalidTokenError, TokenExpiredError
from ...core.security import get_password_hash
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import ResetPasswordDto
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Use case for resetting password with token"""

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        token_service: TokenService,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.unit_of_work = unit_of_work
        self.token_service = token_service
        self.clock = clock

    async def execute(self, token: str, request: ResetPasswordDto) -> None:
        now = self.clock()
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_reset_token(token)
            if not user:
                raise InvalidTokenError("Invalid or expired password reset token")

            if user.is_password_reset_token_expired(now):
                raise TokenExpiredError("Password reset token has expired")

            user.reset_password(await run_in_threadpool(get_password_hash, request.password), now)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        # Forces a fresh login on every device
        self.token_service.revoke_refresh_token(str(user.id.value))
        logger.info("Password reset: %s", user.email)
