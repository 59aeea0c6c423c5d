"""Logout user use case"""

import logging

from ...domain.enums import PresenceStatus
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)


class LogoutUserUseCase:

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    async def execute(self, user_id: str) -> None:
        self.token_service.revoke_refresh_token(user_id)
        self.token_service.set_presence(user_id, PresenceStatus.OFFLINE)
        logger.info("User logged out: %s", user_id)
