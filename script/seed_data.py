#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Users - teacher, student and admin accounts
2. Create Catalog - one category, two classes with images and time slots
   (past and upcoming, so both halves of the schedule views have data)

Notes:
- Expects an empty schema: run `alembic upgrade head` or `python script/reset_database.py` first
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import attrs
from pydantic import SecretStr
from sqlalchemy import func, select

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import dispose_engines, get_session_maker
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.user_role import UserRole
from src.service.booking.driven_adapter.model import (
    CategoryModel,
    ClassImageModel,
    ClassModel,
    ReservationModel,
    TimeSlotModel,
    UserModel,
)
from src.service.booking.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


DEFAULT_PASSWORD = 'P@ssw0rd'


@dataclass
class UserConfig:
    """User seed configuration"""

    email: str
    name: str
    role: UserRole


TEST_USERS = [
    UserConfig(email='t@t.com', name='init teacher', role=UserRole.USER),
    UserConfig(email='s@t.com', name='init student', role=UserRole.USER),
    UserConfig(email='a@t.com', name='init admin', role=UserRole.ADMIN),
]


@dataclass
class ClassConfig:
    """Class seed configuration"""

    class_name: str
    location: str
    latitude: float
    longitude: float
    max_capacity: int
    price: int
    image_urls: list[str]
    # Slot start offsets from now, in days; negative ones are already past
    slot_day_offsets: list[int]
    slot_hours: int = 2


TEST_CLASSES = [
    ClassConfig(
        class_name='Hand-thrown Pottery for Beginners',
        location='Seoul, Mapo-gu Wausan-ro 29',
        latitude=37.5509,
        longitude=126.9227,
        max_capacity=6,
        price=50000,
        image_urls=[
            'https://cdn.example.com/classes/pottery-1.jpg',
            'https://cdn.example.com/classes/pottery-2.jpg',
        ],
        slot_day_offsets=[-7, 3, 10],
    ),
    ClassConfig(
        class_name='One-day Leather Wallet',
        location='Seoul, Seongdong-gu Yeonmujang-gil 12',
        latitude=37.5446,
        longitude=127.0557,
        max_capacity=1,
        price=65000,
        image_urls=['https://cdn.example.com/classes/leather-1.jpg'],
        slot_day_offsets=[5],
    ),
]


async def create_users(session) -> int:
    """Create demo users

    Returns:
        int: teacher_id
    """
    print(f'👥 Creating {len(TEST_USERS)} users...')

    user_repo = UserCommandRepoImpl(session=session)
    password_hasher = BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS)

    teacher_id = None
    for config in TEST_USERS:
        user = UserEntity.create(
            email=config.email,
            name=config.name,
            plain_password=SecretStr(DEFAULT_PASSWORD),
            password_hasher=password_hasher,
        )
        if config.role != UserRole.USER:
            # Signup never grants ADMIN; only seeding and DB tooling do
            user = attrs.evolve(user, role=config.role)

        created_user = await user_repo.create(user=user)
        print(f'   ✅ Created {config.role.value}: ID={created_user.id}, Email={created_user.email}')

        if teacher_id is None:
            teacher_id = created_user.id

    if teacher_id is None:
        raise RuntimeError('Failed to create teacher: ID is None')

    print(f'   📧 Credentials: {DEFAULT_PASSWORD}')
    return teacher_id


async def create_catalog(session, teacher_id: int) -> None:
    """Create demo category, classes, images and time slots"""
    print('📚 Creating class catalog...')

    category = CategoryModel(name='Crafts')
    session.add(category)
    await session.flush()

    now = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
    for config in TEST_CLASSES:
        class_model = ClassModel(
            teacher_id=teacher_id,
            category_id=category.id,
            class_name=config.class_name,
            class_detail=f'{config.class_name} - small group, all materials provided.',
            curriculum='1. Introduction\n2. Guided practice\n3. Finish your own piece',
            included='Materials, tools, refreshments',
            required='Comfortable clothes',
            location=config.location,
            latitude=config.latitude,
            longitude=config.longitude,
            max_capacity=config.max_capacity,
            price=config.price,
        )
        session.add(class_model)
        await session.flush()

        for index, url in enumerate(config.image_urls):
            session.add(
                ClassImageModel(
                    class_id=class_model.id, image_url=url, is_representative=index == 0
                )
            )

        for offset in config.slot_day_offsets:
            start_at = now + timedelta(days=offset)
            session.add(
                TimeSlotModel(
                    class_id=class_model.id,
                    start_at=start_at,
                    end_at=start_at + timedelta(hours=config.slot_hours),
                )
            )
        await session.flush()

        print(
            f'   ✅ Created class: ID={class_model.id}, Name={config.class_name}, '
            f'Slots={len(config.slot_day_offsets)}, Capacity={config.max_capacity}'
        )


async def verify_data() -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for label, model in [
            ('User', UserModel),
            ('Category', CategoryModel),
            ('Class', ClassModel),
            ('Time slot', TimeSlotModel),
            ('Reservation', ReservationModel),
        ]:
            count = (await session.execute(select(func.count()).select_from(model))).scalar()
            print(f'   {label} count: {count}')

        result = await session.execute(
            select(TimeSlotModel.id, ClassModel.class_name, TimeSlotModel.start_at)
            .select_from(TimeSlotModel)
            .join(ClassModel, ClassModel.id == TimeSlotModel.class_id)
            .order_by(TimeSlotModel.start_at)
        )
        for time_id, class_name, start_at in result.all():
            print(f'      Time slot ID={time_id}, Class={class_name}, Start={start_at}')

    print('   ✅ Data verification completed!')


async def _seed_data() -> None:
    """Seed users and catalog in a single transaction"""
    async with get_session_maker()() as session:
        try:
            teacher_id = await create_users(session)
            print()

            await create_catalog(session, teacher_id)
            print()

            await session.commit()
            print('✅ All data committed successfully!')

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def main() -> int:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Test accounts:')
        for user in TEST_USERS:
            print(f'   {user.name}: {user.email} / {DEFAULT_PASSWORD}')
        return 0

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        return 1

    finally:
        await dispose_engines()


if __name__ == '__main__':
    raise SystemExit(asyncio.run(main()))
