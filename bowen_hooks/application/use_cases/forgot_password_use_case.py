"""Forgot password use case"""

import logging
from datetime import datetime, timedelta
from typing import Callable

from ...core.config import settings
from ...core.security import generate_secure_token
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If an account exists with this email, a password reset link has been sent."


class ForgotPasswordUseCase:
    """Use case for handling forgot password requests"""

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        email_service: EmailService,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.unit_of_work = unit_of_work
        self.email_service = email_service
        self.clock = clock

    async def execute(self, email: str) -> str:
        """Always returns the same message so callers cannot probe for accounts"""
        try:
            address = Email(email)
        except ValueError:
            return RESET_REQUESTED_MESSAGE

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(address)
            if not user:
                return RESET_REQUESTED_MESSAGE

            reset_token = generate_secure_token()
            user.set_password_reset_token(
                reset_token,
                timedelta(hours=settings.PASSWORD_RESET_EXPIRE_HOURS),
                now=self.clock(),
            )
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        try:
            await self.email_service.send_password_reset_email(
                to_email=str(user.email),
                reset_token=reset_token,
            )
        except Exception as e:
            # The token is stored; the user can ask again if delivery failed
            logger.error("Error sending password reset email to %s: %s", user.email, e)

        logger.info("Password reset requested: %s", user.email)
        return RESET_REQUESTED_MESSAGE
