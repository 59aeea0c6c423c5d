"""Login user use case"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from ...core.config import settings
from ...core.errors import AccountLockedError, InactiveUserError, InvalidCredentialsError
from ...core.security import verify_password
from ...domain.enums import PresenceStatus
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..dtos.user_dtos import LoginUserDto
from ..services.token_service import TokenService
from .register_user import AuthResult

logger = logging.getLogger(__name__)


class LoginUserUseCase:

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        token_service: TokenService,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.unit_of_work = unit_of_work
        self.token_service = token_service
        self.clock = clock

    async def execute(self, request: LoginUserDto) -> AuthResult:
        now = self.clock()
        try:
            email = Email(request.email)
        except ValueError as e:
            raise InvalidCredentialsError() from e

        async with self.unit_of_work:
            users = self.unit_of_work.users
            user = await users.get_by_email(email)
            if not user:
                raise InvalidCredentialsError()

            if user.clear_expired_lock(now):
                await users.update(user)
                await self.unit_of_work.commit()

            if user.is_account_locked(now):
                logger.warning("Login attempt on locked account: %s", user.email)
                raise AccountLockedError()

            if not await run_in_threadpool(verify_password, request.password, user.password_hash):
                locked = user.register_failed_login(
                    max_attempts=settings.MAX_LOGIN_ATTEMPTS,
                    lockout_duration=timedelta(minutes=settings.ACCOUNT_LOCKOUT_MINUTES),
                    now=now,
                )
                # Persist the counter before failing; the error would roll back otherwise
                await users.update(user)
                await self.unit_of_work.commit()
                if locked:
                    logger.warning("Account locked after %s failed logins: %s",
                                   user.failed_login_attempts, user.email)
                raise InvalidCredentialsError()

            if not user.is_active:
                raise InactiveUserError()

            user.reset_failed_logins()
            user.record_login(now)
            await users.update(user)
            profile = await self.unit_of_work.profiles.get_by_user_id(user.id)
            await self.unit_of_work.commit()

        user_id = str(user.id.value)
        tokens = self.token_service.issue_and_store(user)
        self.token_service.set_presence(user_id, PresenceStatus.ONLINE, now)

        logger.info("User logged in: %s", user.email)
        return AuthResult(user=user, profile=profile, tokens=tokens)
