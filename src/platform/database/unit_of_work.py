"""
Unit of Work Pattern - one database session shared by the repositories of a use case

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories get the shared session from the UoW
- Use cases coordinate several repositories through one UoW, so a
  reservation and its payment commit or roll back together
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
    from src.service.booking.app.interface.i_payment_command_repo import IPaymentCommandRepo
    from src.service.booking.app.interface.i_refresh_token_command_repo import (
        IRefreshTokenCommandRepo,
    )
    from src.service.booking.app.interface.i_reservation_command_repo import (
        IReservationCommandRepo,
    )
    from src.service.booking.app.interface.i_user_command_repo import IUserCommandRepo
    from src.service.booking.app.interface.i_user_query_repo import IUserQueryRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking service

    Usage:
        async with uow:
            reservation = await uow.reservation_command_repo.create(...)
            await uow.commit()

    Leaving the block without commit rolls back.
    """

    # User repositories
    user_command_repo: IUserCommandRepo
    user_query_repo: IUserQueryRepo
    refresh_token_repo: IRefreshTokenCommandRepo

    # Catalog / reservation / payment repositories
    catalog_query_repo: ICatalogQueryRepo
    reservation_command_repo: IReservationCommandRepo
    payment_command_repo: IPaymentCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation of Unit of Work"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from src.service.booking.driven_adapter.repo.catalog_query_repo_impl import (
            CatalogQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.payment_command_repo_impl import (
            PaymentCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.refresh_token_command_repo_impl import (
            RefreshTokenCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.reservation_command_repo_impl import (
            ReservationCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.user_command_repo_impl import (
            UserCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.user_query_repo_impl import (
            UserQueryRepoImpl,
        )

        # Create repositories with shared session
        self.user_command_repo = UserCommandRepoImpl(session=self.session)
        self.user_query_repo = UserQueryRepoImpl(session=self.session)
        self.refresh_token_repo = RefreshTokenCommandRepoImpl(session=self.session)
        self.catalog_query_repo = CatalogQueryRepoImpl(session=self.session)
        self.reservation_command_repo = ReservationCommandRepoImpl(session=self.session)
        self.payment_command_repo = PaymentCommandRepoImpl(session=self.session)

        return await super().__aenter__()

    async def _commit(self):
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        async def create_reservation(uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            async with uow:
                ...
                await uow.commit()
    """
    return SqlAlchemyUnitOfWork(session)
