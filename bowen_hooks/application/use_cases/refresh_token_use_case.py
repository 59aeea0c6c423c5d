"""Refresh token use case: verify, match the cached token, rotate"""

import logging

from ...core.errors import (
    InactiveUserError,
    InvalidRefreshTokenError,
    InvalidTokenError,
    TokenExpiredError,
    UserNotFoundError,
)
from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ..services.token_service import TokenPair, TokenService

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, token_service: TokenService):
        self.unit_of_work = unit_of_work
        self.token_service = token_service

    async def execute(self, refresh_token: str) -> TokenPair:
        try:
            payload = self.token_service.verify_refresh(refresh_token)
        except (InvalidTokenError, TokenExpiredError) as e:
            raise InvalidRefreshTokenError() from e

        if not self.token_service.matches_stored_refresh_token(payload.id, refresh_token):
            logger.warning("Refresh token does not match the active token for user %s", payload.id)
            raise InvalidRefreshTokenError()

        try:
            user_id = UserId.from_str(payload.id)
        except ValueError as e:
            raise InvalidRefreshTokenError() from e

        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)

        if not user:
            raise UserNotFoundError("User not found")
        if not user.is_active:
            raise InactiveUserError()

        # Overwriting the cached token invalidates the one just presented
        return self.token_service.issue_and_store(user)
