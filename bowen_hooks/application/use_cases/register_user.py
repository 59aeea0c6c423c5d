"""Register user use case"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from fastapi.concurrency import run_in_threadpool

from ...core.config import settings
from ...core.errors import DuplicateEmailError, UnderageError, ValidationError
from ...core.security import get_password_hash, generate_secure_token
from ...domain.entities.profile import Profile, calculate_age
from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService
from ..dtos.user_dtos import RegisterUserDto
from ..services.token_service import TokenPair, TokenService

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    user: User
    profile: Profile
    tokens: TokenPair


class RegisterUserUseCase:

    def __init__(
        self,
        unit_of_work: IUnitOfWork,
        token_service: TokenService,
        email_service: EmailService,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.unit_of_work = unit_of_work
        self.token_service = token_service
        self.email_service = email_service
        self.clock = clock

    async def execute(self, request: RegisterUserDto) -> AuthResult:
        now = self.clock()
        try:
            email = Email(request.email)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        self._check_university_domain(email)

        async with self.unit_of_work:
            if await self.unit_of_work.users.exists_by_email(email):
                raise DuplicateEmailError()

            if calculate_age(request.date_of_birth, today=now.date()) < settings.MINIMUM_AGE:
                raise UnderageError(
                    f"You must be at least {settings.MINIMUM_AGE} years old to register"
                )

            password_hash = await run_in_threadpool(get_password_hash, request.password)
            user = User.create(
                email=email,
                password_hash=password_hash,
                verification_token=generate_secure_token(),
                verification_expires_in=timedelta(hours=settings.VERIFICATION_TOKEN_EXPIRE_HOURS),
                now=now,
            )
            user = await self.unit_of_work.users.add(user)

            profile = Profile.create(
                user_id=user.id,
                first_name=request.first_name,
                last_name=request.last_name,
                date_of_birth=request.date_of_birth,
                gender=request.gender,
                department=request.department,
                year_of_study=request.year_of_study,
            )
            profile = await self.unit_of_work.profiles.add(profile)
            await self.unit_of_work.commit()

        tokens = self.token_service.issue_and_store(user)

        try:
            await self.email_service.send_verification_email(
                to_email=str(user.email),
                verification_token=user.verification_token,
            )
        except Exception as e:
            # The account is committed; verification can be re-requested later
            logger.error("Error sending verification email to %s: %s", user.email, e)

        logger.info("New user registered: %s", user.email)
        return AuthResult(user=user, profile=profile, tokens=tokens)

    def _check_university_domain(self, email: Email) -> None:
        if not settings.REQUIRE_EDU_EMAIL:
            return
        if email.domain not in settings.allowed_email_domains:
            raise ValidationError("Please use your university email address")
