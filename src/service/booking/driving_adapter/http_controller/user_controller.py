from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.platform.response.api_response import ApiResponse
from src.service.booking.app.command.delete_user_use_case import DeleteUserUseCase
from src.service.booking.app.command.update_user_name_use_case import UpdateUserNameUseCase
from src.service.booking.app.query.get_user_use_case import GetUserUseCase
from src.service.booking.domain.value_object.identity import Identity
from src.service.booking.driving_adapter.http_controller.auth.role_auth import (
    get_current_user,
    require_admin,
)
from src.service.booking.driving_adapter.http_controller.schema.user_schema import (
    UpdateUserRequest,
    UserResponse,
)


router = APIRouter()


@router.get('/{user_id}')
@Logger.io
async def get_user(
    user_id: int,
    current_user: Identity = Depends(get_current_user),
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> ApiResponse[UserResponse]:
    user = await use_case.get_by_id(identity=current_user, user_id=user_id)
    return ApiResponse.ok(UserResponse.from_entity(user))


@router.patch('/{user_id}')
@Logger.io
async def update_user_name(
    user_id: int,
    request: UpdateUserRequest,
    current_user: Identity = Depends(get_current_user),
    use_case: UpdateUserNameUseCase = Depends(UpdateUserNameUseCase.depends),
) -> ApiResponse[UserResponse]:
    user = await use_case.execute(identity=current_user, user_id=user_id, name=request.name)
    return ApiResponse.ok(UserResponse.from_entity(user))


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: int,
    current_user: Identity = Depends(require_admin),
    use_case: DeleteUserUseCase = Depends(DeleteUserUseCase.depends),
) -> None:
    await use_case.execute(identity=current_user, user_id=user_id)
