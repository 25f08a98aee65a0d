from datetime import datetime, timedelta, timezone
from typing import Any, Sequence

import httpx
from sqlalchemy import func, select, update

from src.platform.constant.route_constant import AUTH_LOGIN, AUTH_SIGNUP
from src.platform.database.orm_db_setting import get_session_maker
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.driven_adapter.model import (
    CategoryModel,
    ClassImageModel,
    ClassModel,
    PaymentModel,
    ReservationModel,
    TimeSlotModel,
    UserModel,
)
from test.constants import DEFAULT_PASSWORD


def auth_header(token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


async def sign_up_and_login(
    client: httpx.AsyncClient,
    email: str,
    name: str,
    *,
    password: str = DEFAULT_PASSWORD,
    sign_up: bool = True,
) -> dict[str, Any]:
    """Returns id/email/name plus both tokens and a ready Authorization header."""
    user_id = None
    if sign_up:
        response = await client.post(
            AUTH_SIGNUP, json={'email': email, 'password': password, 'name': name}
        )
        assert response.status_code == 201, response.text
        user_id = response.json()['data']['id']

    response = await client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert response.status_code == 200, response.text
    data = response.json()['data']

    if user_id is None:
        async with get_session_maker()() as session:
            user_id = (
                await session.execute(select(UserModel.id).where(UserModel.email == email))
            ).scalar_one()

    return {
        'id': user_id,
        'email': email,
        'name': name,
        'access_token': data['accessToken'],
        'refresh_token': data['refreshToken'],
        'headers': auth_header(data['accessToken']),
    }


async def promote_to_admin(user_id: int) -> None:
    async with get_session_maker()() as session:
        await session.execute(
            update(UserModel).where(UserModel.id == user_id).values(role=UserRole.ADMIN.value)
        )
        await session.commit()


def hours_from_now(hours: float) -> datetime:
    return datetime.now(timezone.utc) + timedelta(hours=hours)


async def create_class_with_slots(
    *,
    teacher_id: int,
    slot_starts: Sequence[datetime],
    max_capacity: int = 5,
    price: int = 50000,
    class_name: str = 'Pottery Basics',
    image_urls: Sequence[str] = ('https://cdn.test/pottery-1.jpg',),
) -> dict[str, Any]:
    """Insert a class, its images and one 2-hour slot per start time."""
    async with get_session_maker()() as session:
        category = (
            await session.execute(select(CategoryModel).where(CategoryModel.name == 'Crafts'))
        ).scalar_one_or_none()
        if category is None:
            category = CategoryModel(name='Crafts')
            session.add(category)
            await session.flush()

        class_model = ClassModel(
            teacher_id=teacher_id,
            category_id=category.id,
            class_name=class_name,
            class_detail='Small group class',
            location='Seoul',
            latitude=37.55,
            longitude=126.92,
            max_capacity=max_capacity,
            price=price,
        )
        session.add(class_model)
        await session.flush()

        for index, url in enumerate(image_urls):
            session.add(
                ClassImageModel(class_id=class_model.id, image_url=url, is_representative=index == 0)
            )

        slots = [
            TimeSlotModel(class_id=class_model.id, start_at=start, end_at=start + timedelta(hours=2))
            for start in slot_starts
        ]
        session.add_all(slots)
        await session.flush()

        result = {'class_id': class_model.id, 'time_ids': [slot.id for slot in slots]}
        await session.commit()
        return result


async def count_confirmed_reservations(time_id: int) -> int:
    async with get_session_maker()() as session:
        return (
            await session.execute(
                select(func.count(ReservationModel.id)).where(
                    ReservationModel.time_id == time_id,
                    ReservationModel.status_code == 1,
                )
            )
        ).scalar_one()


async def count_payments() -> int:
    async with get_session_maker()() as session:
        return (await session.execute(select(func.count(PaymentModel.id)))).scalar_one()
