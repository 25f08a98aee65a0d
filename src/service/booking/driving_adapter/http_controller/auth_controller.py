from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.command.login_use_case import LoginUseCase
from src.service.booking.app.command.logout_use_case import LogoutUseCase
from src.service.booking.app.command.refresh_token_use_case import RefreshTokenUseCase
from src.service.booking.app.command.sign_up_use_case import SignUpUseCase
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.role_auth import get_current_user
from src.service.booking.driving_adapter.http_controller.schema.auth_schema import (
    IdentityResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RefreshTokenRequest,
    RefreshTokenResponse,
    SignUpRequest,
    SignUpResponse,
)


router = APIRouter()


@router.post('/signup', status_code=status.HTTP_201_CREATED)
@Logger.io
async def sign_up(
    request: SignUpRequest,
    use_case: SignUpUseCase = Depends(SignUpUseCase.depends),
) -> ApiResponse[SignUpResponse]:
    user = await use_case.execute(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    return ApiResponse.ok(
        SignUpResponse(
            id=user.id or 0,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )
    )


@router.post('/login')
@Logger.io
async def login(
    request: LoginRequest,
    use_case: LoginUseCase = Depends(LoginUseCase.depends),
) -> ApiResponse[LoginResponse]:
    result = await use_case.execute(email=request.email, password=request.password)
    return ApiResponse.ok(
        LoginResponse(
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            email=result.email,
            name=result.name,
        )
    )


@router.post('/refresh')
@Logger.io
async def refresh(
    request: RefreshTokenRequest,
    use_case: RefreshTokenUseCase = Depends(RefreshTokenUseCase.depends),
) -> ApiResponse[RefreshTokenResponse]:
    pair = await use_case.execute(refresh_token=request.refresh_token)
    return ApiResponse.ok(
        RefreshTokenResponse(
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
            token_type=pair.token_type,
            expires_in=pair.expires_in,
        )
    )


@router.post('/logout')
@Logger.io
async def logout(
    current_user: Identity = Depends(get_current_user),
    use_case: LogoutUseCase = Depends(LogoutUseCase.depends),
) -> ApiResponse[LogoutResponse]:
    logout_at = await use_case.execute(identity=current_user)
    return ApiResponse.ok(LogoutResponse(message='Logged out', logout_at=logout_at))


@router.get('/me')
@Logger.io
async def get_me(current_user: Identity = Depends(get_current_user)) -> ApiResponse[IdentityResponse]:
    return ApiResponse.ok(
        IdentityResponse(id=current_user.id, email=current_user.email, role=current_user.role.value)
    )
