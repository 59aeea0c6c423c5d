"""API dependencies: wiring plus the session middleware variants"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ..core.errors import (
    AppError,
    ForbiddenError,
    InactiveUserError,
    InvalidTokenError,
    NoTokenError,
    UserNotFoundError,
)
from ..db.database import get_db
from ..domain.enums import UserRole
from ..domain.repositories.cache_client import ICacheClient
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.entity_ids import UserId
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.email_service import EmailService
from ..application.services.token_service import TokenService

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "token"


@dataclass(frozen=True)
class CurrentUser:
    """Minimal identity attached to the request by the auth dependencies"""
    id: UserId
    email: str
    role: UserRole
    is_active: bool


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_cache(request: Request) -> ICacheClient:
    """Cache client opened in the application lifespan"""
    return request.app.state.cache


def get_token_service(cache: ICacheClient = Depends(get_cache)) -> TokenService:
    """Get token service"""
    return TokenService(cache)


def get_email_service() -> EmailService:
    """Get email service"""
    return EmailService()


def extract_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, else the token cookie"""
    authorization = request.headers.get("Authorization")
    if authorization and authorization.startswith("Bearer"):
        parts = authorization.split(" ", 1)
        token = parts[1].strip() if len(parts) == 2 else ""
        return token or None
    return request.cookies.get(ACCESS_TOKEN_COOKIE) or None


async def _authenticate(
    token: str,
    unit_of_work: IUnitOfWork,
    token_service: TokenService,
) -> CurrentUser:
    payload = token_service.verify_access(token)
    try:
        user_id = UserId.from_str(payload.id)
    except ValueError as e:
        raise InvalidTokenError() from e

    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(user_id)

    if not user:
        raise UserNotFoundError()
    if not user.is_active:
        raise InactiveUserError()

    return CurrentUser(id=user.id, email=str(user.email), role=user.role, is_active=user.is_active)


async def get_current_user(
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """Get current authenticated user; 401 with a specific reason otherwise"""
    token = extract_token(request)
    if not token:
        raise NoTokenError()

    try:
        current_user = await _authenticate(token, unit_of_work, token_service)
    except AppError as e:
        logger.info("Authentication rejected: %s", e.code)
        raise

    request.state.user = current_user
    return current_user


async def get_optional_user(
    request: Request,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
) -> Optional[CurrentUser]:
    """Same as get_current_user but never fails; anonymous requests get None"""
    request.state.user = None
    token = extract_token(request)
    if not token:
        return None

    try:
        current_user = await _authenticate(token, unit_of_work, token_service)
    except AppError as e:
        logger.debug("Optional auth - %s, continuing without auth", e.code)
        return None

    request.state.user = current_user
    return current_user


async def require_verified(
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """Only users who confirmed their email"""
    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(current_user.id)

    if not user or not user.is_verified:
        raise ForbiddenError("Please verify your email to access this feature")
    return current_user


async def require_premium(
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """Only premium members; lapsed memberships are switched off on the way"""
    async with unit_of_work:
        user = await unit_of_work.users.get_by_id(current_user.id)
        if not user:
            raise UserNotFoundError("User not found")

        if not user.is_premium:
            raise ForbiddenError("This feature requires premium membership")

        if user.expire_premium_if_due():
            await unit_of_work.users.update(user)
            await unit_of_work.commit()
            logger.info("Premium membership expired for user %s", user.id)
            raise ForbiddenError("Your premium membership has expired")

    return current_user


def restrict_to(*roles: UserRole):
    """Dependency factory allowing only the listed roles"""
    allowed = frozenset(roles)

    async def dependency(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.role not in allowed:
            raise ForbiddenError()
        return current_user

    return dependency


get_current_admin_user = restrict_to(UserRole.ADMIN)
get_current_staff_user = restrict_to(UserRole.ADMIN, UserRole.MODERATOR)
