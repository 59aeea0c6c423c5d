"""Authentication routes"""

from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Response, status

from ...api.dependencies import (
    CurrentUser,
    get_current_user,
    get_email_service,
    get_token_service,
    get_unit_of_work,
)
from ...application.dtos.user_dtos import (
    AccessTokenDto,
    ApiResponse,
    AuthDataDto,
    ForgotPasswordDto,
    LoginUserDto,
    MeDto,
    ProfileDto,
    RefreshTokenDto,
    RegisterUserDto,
    ResetPasswordDto,
    UserDto,
    VerifiedEmailDto,
)
from ...application.services.token_service import TokenService
from ...application.use_cases.email_verification_use_case import EmailVerificationUseCase
from ...application.use_cases.forgot_password_use_case import ForgotPasswordUseCase
from ...application.use_cases.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.logout_user import LogoutUserUseCase
from ...application.use_cases.refresh_token_use_case import RefreshTokenUseCase
from ...application.use_cases.register_user import AuthResult, RegisterUserUseCase
from ...application.use_cases.reset_password_use_case import ResetPasswordUseCase
from ...core.config import settings
from ...core.errors import InvalidRefreshTokenError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.email_service import EmailService

router = APIRouter()

REFRESH_TOKEN_COOKIE = "refreshToken"


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=refresh_token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )


def _auth_data(result: AuthResult) -> AuthDataDto:
    return AuthDataDto(
        user=UserDto.from_entity(result.user),
        profile=ProfileDto.from_entity(result.profile) if result.profile else None,
        access_token=result.tokens.access_token,
    )


@router.post(
    "/register",
    response_model=ApiResponse[AuthDataDto],
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    user_data: RegisterUserDto,
    response: Response,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
    email_service: EmailService = Depends(get_email_service),
):
    """Register a new user"""
    use_case = RegisterUserUseCase(unit_of_work, token_service, email_service)
    result = await use_case.execute(user_data)
    set_refresh_cookie(response, result.tokens.refresh_token)
    return ApiResponse(
        message="Registration successful! Please verify your email.",
        data=_auth_data(result),
    )


@router.post("/login", response_model=ApiResponse[AuthDataDto])
async def login_user(
    login_data: LoginUserDto,
    response: Response,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """Login user"""
    use_case = LoginUserUseCase(unit_of_work, token_service)
    result = await use_case.execute(login_data)
    set_refresh_cookie(response, result.tokens.refresh_token)
    return ApiResponse(message="Login successful", data=_auth_data(result))


@router.post("/logout", response_model=ApiResponse[None])
async def logout_user(
    response: Response,
    current_user: CurrentUser = Depends(get_current_user),
    token_service: TokenService = Depends(get_token_service),
):
    """Logout user"""
    await LogoutUserUseCase(token_service).execute(str(current_user.id.value))
    response.delete_cookie(REFRESH_TOKEN_COOKIE)
    return ApiResponse(message="Logged out successfully")


@router.post("/refresh", response_model=ApiResponse[AccessTokenDto])
async def refresh_token(
    response: Response,
    body: Optional[RefreshTokenDto] = None,
    refresh_cookie: Optional[str] = Cookie(default=None, alias=REFRESH_TOKEN_COOKIE),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """Refresh access token, rotating the refresh token"""
    presented = refresh_cookie or (body.refresh_token if body else None)
    if not presented:
        raise InvalidRefreshTokenError("No refresh token provided")

    tokens = await RefreshTokenUseCase(unit_of_work, token_service).execute(presented)
    set_refresh_cookie(response, tokens.refresh_token)
    return ApiResponse(
        message="Token refreshed successfully",
        data=AccessTokenDto(access_token=tokens.access_token),
    )


@router.get("/verify/{token}", response_model=ApiResponse[VerifiedEmailDto])
async def verify_email(
    token: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Verify user email with token"""
    user = await EmailVerificationUseCase(unit_of_work).execute(token)
    return ApiResponse(
        message="Email verified successfully! You can now access all features.",
        data=VerifiedEmailDto(user_id=user.id.value, email=str(user.email), is_verified=user.is_verified),
    )


@router.post("/forgot-password", response_model=ApiResponse[None])
async def forgot_password(
    request: ForgotPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    email_service: EmailService = Depends(get_email_service),
):
    """Handle forgot password request"""
    message = await ForgotPasswordUseCase(unit_of_work, email_service).execute(request.email)
    return ApiResponse(message=message)


@router.post("/reset-password/{token}", response_model=ApiResponse[None])
async def reset_password(
    token: str,
    request: ResetPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    token_service: TokenService = Depends(get_token_service),
):
    """Reset password with token"""
    await ResetPasswordUseCase(unit_of_work, token_service).execute(token, request)
    return ApiResponse(message="Password reset successful! Please login with your new password.")


@router.get("/me", response_model=ApiResponse[MeDto])
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
):
    """Get current user info"""
    result = await GetCurrentUserUseCase(unit_of_work).execute(current_user.id)
    return ApiResponse(data=MeDto(
        user=UserDto.from_entity(result.user),
        profile=ProfileDto.from_entity(result.profile) if result.profile else None,
    ))
