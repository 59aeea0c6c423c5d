"""User DTOs for API layer"""

import re
from datetime import date, datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ...domain.entities.profile import Profile
from ...domain.entities.user import User
from ...domain.enums import Gender

PASSWORD_MIN_LENGTH = 8
_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])")

T = TypeVar("T")


def check_password_strength(password: str) -> str:
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValueError("Password must be at least 8 characters long")
    if not _PASSWORD_PATTERN.match(password):
        raise ValueError(
            "Password must contain at least one uppercase letter, one lowercase letter, and one number"
        )
    return password


class RequestDto(BaseModel):
    """Request bodies accept both snake_case and camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterUserDto(RequestDto):
    """DTO for user registration"""
    email: EmailStr
    password: str
    first_name: str = Field(min_length=2, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    date_of_birth: date
    gender: Optional[Gender] = None
    department: Optional[str] = Field(default=None, max_length=100)
    year_of_study: Optional[int] = Field(default=None, ge=1, le=7)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        return check_password_strength(value)

    @field_validator("last_name", "department")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, value: date) -> date:
        if value > datetime.utcnow().date():
            raise ValueError("Date of birth cannot be in the future")
        return value


class LoginUserDto(RequestDto):
    """DTO for user login"""
    email: EmailStr
    password: str = Field(min_length=1)


class ForgotPasswordDto(RequestDto):
    """DTO for forgot password request"""
    email: EmailStr


class ResetPasswordDto(RequestDto):
    """DTO for reset password request; the token travels in the URL"""
    password: str
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        return check_password_strength(value)

    @model_validator(mode="after")
    def passwords_match(self) -> "ResetPasswordDto":
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class RefreshTokenDto(RequestDto):
    """DTO for refresh token request when the cookie is not available"""
    refresh_token: Optional[str] = None


class UserDto(BaseModel):
    """DTO for user response"""
    id: UUID
    email: str
    role: str
    is_verified: bool
    is_premium: bool = False
    premium_expires_at: Optional[datetime] = None
    login_streak: int = 0
    last_login: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDto":
        return cls(
            id=user.id.value,
            email=str(user.email),
            role=user.role.value,
            is_verified=user.is_verified,
            is_premium=user.is_premium,
            premium_expires_at=user.premium_expires_at,
            login_streak=user.login_streak,
            last_login=user.last_login,
        )


class ProfileDto(BaseModel):
    """DTO for profile response"""
    id: UUID
    first_name: str
    last_name: Optional[str] = None
    display_name: Optional[str] = None
    code_name: Optional[str] = None
    age: Optional[int] = None
    bio: Optional[str] = None
    gender: Optional[str] = None
    department: Optional[str] = None
    year_of_study: Optional[int] = None
    interests: List[str] = []
    profile_completion: int
    is_anonymous: bool = False

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileDto":
        return cls(
            id=profile.id.value,
            first_name=profile.first_name,
            last_name=profile.last_name,
            display_name=profile.display_name or profile.first_name,
            code_name=profile.code_name,
            age=profile.age,
            bio=profile.bio,
            gender=profile.gender.value if profile.gender else None,
            department=profile.department,
            year_of_study=profile.year_of_study,
            interests=list(profile.interests),
            profile_completion=profile.profile_completion,
            is_anonymous=profile.is_anonymous_active(),
        )


class AuthDataDto(BaseModel):
    """Payload returned by register and login; the refresh token goes in a cookie"""
    user: UserDto
    profile: Optional[ProfileDto] = None
    access_token: str
    token_type: str = "bearer"


class MeDto(BaseModel):
    user: UserDto
    profile: Optional[ProfileDto] = None


class AccessTokenDto(BaseModel):
    access_token: str
    token_type: str = "bearer"


class VerifiedEmailDto(BaseModel):
    user_id: UUID
    email: str
    is_verified: bool


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope shared by every endpoint"""
    status: str = "success"
    message: Optional[str] = None
    data: Optional[T] = None
