"""User repository implementation"""

from datetime import datetime
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.value_objects.entity_ids import UserId
from ...domain.enums import UserRole
from ..orm.user_model import UserModel

# Columns copied one-to-one between the entity and the ORM model
_PLAIN_FIELDS = (
    'password_hash',
    'phone',
    'is_verified',
    'is_photo_verified',
    'is_active',
    'is_premium',
    'premium_expires_at',
    'last_login',
    'login_streak',
    'account_locked',
    'locked_until',
    'failed_login_attempts',
    'graduation_year',
    'verification_token',
    'verification_token_expires',
    'password_reset_token',
    'password_reset_expires',
    'created_at',
    'updated_at',
    'deleted_at',
)


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session
        self._written: Dict[UUID, User] = {}

    def _query(self):
        return self.session.query(UserModel).filter(UserModel.deleted_at.is_(None))

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        model = self._query().filter(UserModel.id == user_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email(self, email: Email) -> Optional[User]:
        """Get user by email"""
        model = self._query().filter(UserModel.email == str(email)).first()
        return self._map_to_entity(model) if model else None

    async def get_by_verification_token(self, token: str) -> Optional[User]:
        """Get user by email verification token"""
        model = self._query().filter(UserModel.verification_token == token).first()
        return self._map_to_entity(model) if model else None

    async def get_by_reset_token(self, token: str) -> Optional[User]:
        """Get user by password reset token, expired or not"""
        model = self._query().filter(UserModel.password_reset_token == token).first()
        return self._map_to_entity(model) if model else None

    async def exists_by_email(self, email: Email) -> bool:
        """Check if an account, including a soft-deleted one, holds this email"""
        return self.session.query(UserModel).filter(UserModel.email == str(email)).first() is not None

    async def add(self, user: User) -> User:
        """Add a new user"""
        model = UserModel(id=user.id.value, email=str(user.email), role=user.role)
        self._update_model_from_entity(model, user)
        self.session.add(model)
        self.session.flush()
        self._written[user.id.value] = user
        return user

    async def update(self, user: User) -> User:
        """Update an existing user"""
        existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
        if existing:
            user.updated_at = datetime.utcnow()
            self._update_model_from_entity(existing, user)
            self.session.flush()
            self._written[user.id.value] = user
        return user

    async def soft_delete(self, user_id: UserId) -> None:
        """Mark the user deleted without removing the row"""
        user = await self.get_by_id(user_id)
        if user:
            user.soft_delete()
            await self.update(user)

    def pop_written(self) -> List[User]:
        """Users added or updated since the last call"""
        written = list(self._written.values())
        self._written.clear()
        return written

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        """Update ORM model from domain entity"""
        model.email = str(user.email)
        model.role = user.role
        for name in _PLAIN_FIELDS:
            setattr(model, name, getattr(user, name))

    def _map_to_entity(self, model: UserModel) -> User:
        """Map ORM model to domain entity"""
        values = {name: getattr(model, name) for name in _PLAIN_FIELDS}
        values['login_streak'] = values['login_streak'] or 0
        values['failed_login_attempts'] = values['failed_login_attempts'] or 0
        return User(
            id=UserId(model.id),
            email=Email(model.email),
            role=UserRole(model.role),
            **values
        )
