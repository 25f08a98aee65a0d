"""
Unit tests for CreateReservationUseCase

Test Focus:
1. Business checks in order: user / slot NotFound, AlreadyReserved, CapacityExceeded
2. Lowest free seat is assigned
3. Lost insert race: unit of work is re-run and reports the proper business error
4. Retries exhausted -> ConflictError; other integrity failures are not retried
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import (
    AlreadyReservedError,
    CapacityExceededError,
    ConflictError,
    NotFoundError,
    SeatConflictError,
    UserNotFoundError,
)
from src.service.booking.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.booking.domain.entity.reservation_entity import Reservation
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.reservation_status import ReservationStatus
from test.service.booking.unit.fixtures import assign_id, make_time_slot


def _seat_taken() -> SeatConflictError:
    return SeatConflictError('Concurrent write on uq_reservation_time_seat_confirmed')


@pytest.mark.unit
class TestCreateReservation:
    @pytest.fixture
    def use_case(self, mock_uow: AsyncMock) -> CreateReservationUseCase:
        return CreateReservationUseCase(uow=mock_uow, max_retries=3)

    @pytest.fixture(autouse=True)
    def happy_path(self, mock_uow: AsyncMock, student: UserEntity) -> None:
        mock_uow.user_query_repo.get_by_id.return_value = student
        mock_uow.catalog_query_repo.get_time_slot.return_value = make_time_slot(max_capacity=3)
        mock_uow.reservation_command_repo.exists_confirmed.return_value = False
        mock_uow.reservation_command_repo.count_confirmed.return_value = 1
        mock_uow.reservation_command_repo.list_taken_seats.return_value = {1}
        mock_uow.reservation_command_repo.create.side_effect = assign_id(10)

    @pytest.mark.asyncio
    async def test_books_lowest_free_seat_and_commits(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        # Act
        reservation = await use_case.execute(time_id=1, student_id=2)

        # Assert
        assert reservation.id == 10
        assert reservation.status == ReservationStatus.CONFIRMED
        assert reservation.seat_no == 2
        assert reservation.student_id == 2
        assert reservation.time_id == 1
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_last_seat_can_still_be_booked(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        # Arrange: capacity 3 with 2 confirmed
        mock_uow.reservation_command_repo.count_confirmed.return_value = 2
        mock_uow.reservation_command_repo.list_taken_seats.return_value = {1, 3}

        # Act
        reservation = await use_case.execute(time_id=1, student_id=2)

        # Assert
        assert reservation.seat_no == 2

    @pytest.mark.asyncio
    async def test_fail_when_student_not_found(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.user_query_repo.get_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await use_case.execute(time_id=1, student_id=2)
        mock_uow.reservation_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail_when_time_slot_not_found(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.catalog_query_repo.get_time_slot.return_value = None

        with pytest.raises(NotFoundError, match='Time slot not found'):
            await use_case.execute(time_id=999, student_id=2)

    @pytest.mark.asyncio
    async def test_fail_when_already_reserved(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.reservation_command_repo.exists_confirmed.return_value = True

        with pytest.raises(AlreadyReservedError):
            await use_case.execute(time_id=1, student_id=2)
        mock_uow.reservation_command_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail_when_capacity_reached(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.reservation_command_repo.count_confirmed.return_value = 3

        with pytest.raises(CapacityExceededError):
            await use_case.execute(time_id=1, student_id=2)
        mock_uow.reservation_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_race_is_rerun_and_reports_capacity_exceeded(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        """
        Given: capacity 1, both requests saw 0 confirmed
        When: this request's insert loses on the seat index
        Then: the re-run sees the winner and raises CapacityExceeded
        """
        # Arrange
        mock_uow.catalog_query_repo.get_time_slot.return_value = make_time_slot(max_capacity=1)
        mock_uow.reservation_command_repo.count_confirmed.side_effect = [0, 1]
        mock_uow.reservation_command_repo.list_taken_seats.return_value = set()
        mock_uow.reservation_command_repo.create.side_effect = _seat_taken()

        # Act & Assert
        with pytest.raises(CapacityExceededError):
            await use_case.execute(time_id=1, student_id=2)

        assert mock_uow.reservation_command_repo.create.await_count == 1
        assert mock_uow.__aexit__.await_count == 2
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_race_then_success_on_retry(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        # Arrange: first insert collides on seat 2, second attempt gets seat 3
        mock_uow.reservation_command_repo.list_taken_seats.side_effect = [{1}, {1, 2}]
        mock_uow.reservation_command_repo.count_confirmed.side_effect = [1, 2]
        created = assign_id(11)
        mock_uow.reservation_command_repo.create.side_effect = [
            _seat_taken(),
            created(reservation=Reservation.confirm(student_id=2, time_id=1, seat_no=3)),
        ]

        # Act
        reservation = await use_case.execute(time_id=1, student_id=2)

        # Assert
        assert reservation.id == 11
        assert reservation.seat_no == 3
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_conflict_after_retries_exhausted(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        mock_uow.reservation_command_repo.create.side_effect = _seat_taken()

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(time_id=1, student_id=2)

        assert type(exc_info.value) is ConflictError
        assert mock_uow.reservation_command_repo.create.await_count == 3
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_integrity_error_is_not_retried(
        self, use_case: CreateReservationUseCase, mock_uow: AsyncMock
    ) -> None:
        # Arrange: foreign key failure, not a lost race
        mock_uow.reservation_command_repo.create.side_effect = IntegrityError(
            'INSERT INTO reservation ...', {}, Exception('FOREIGN KEY constraint failed')
        )

        # Act & Assert
        with pytest.raises(IntegrityError):
            await use_case.execute(time_id=1, student_id=2)

        assert mock_uow.reservation_command_repo.create.await_count == 1
        mock_uow.commit.assert_not_awaited()
