"""Email service for account notifications

Delivery is handled outside this service; messages are composed and logged
so the verification and reset links are traceable in development.
"""

import logging
from dataclasses import dataclass
from typing import List

from ...core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutgoingEmail:
    to_email: str
    subject: str
    text_content: str


class EmailService:

    def __init__(self):
        self.client_url = settings.CLIENT_URL.rstrip("/")
        self.from_name = settings.PROJECT_NAME
        self.outbox: List[OutgoingEmail] = []

    async def send_email(self, to_email: str, subject: str, text_content: str) -> bool:
        """Queue an email; delivery transport is not wired in"""
        message = OutgoingEmail(to_email=to_email, subject=subject, text_content=text_content)
        self.outbox.append(message)
        logger.info("Email queued for %s: %s", to_email, subject)
        return True

    async def send_verification_email(self, to_email: str, verification_token: str) -> bool:
        verification_url = f"{self.client_url}/verify-email/{verification_token}"
        text_content = f"""
        Welcome to {self.from_name}!

        Please verify your email address by opening this link:
        {verification_url}

        The link expires in {settings.VERIFICATION_TOKEN_EXPIRE_HOURS} hours.
        """
        return await self.send_email(to_email, f"Verify your {self.from_name} account", text_content)

    async def send_password_reset_email(self, to_email: str, reset_token: str) -> bool:
        """Send password reset email"""
        reset_url = f"{self.client_url}/reset-password/{reset_token}"
        text_content = f"""
        We received a request to reset your {self.from_name} password.

        Open this link to choose a new password:
        {reset_url}

        The link expires in {settings.PASSWORD_RESET_EXPIRE_HOURS} hour(s).
        If you didn't request this reset, you can safely ignore this email.
        """
        return await self.send_email(to_email, "Reset your password", text_content)
