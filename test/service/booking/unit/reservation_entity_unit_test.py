from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    ForbiddenError,
    NotConfirmedError,
)
from src.service.booking.domain.entity.reservation_entity import Reservation, lowest_free_seat
from src.service.booking.domain.enum.reservation_status import ReservationStatus


@pytest.mark.unit
class TestReservationCancel:
    @pytest.fixture
    def confirmed_reservation(self) -> Reservation:
        created = datetime(2025, 1, 10, 10, 30, tzinfo=timezone.utc)
        return Reservation(
            id=10,
            student_id=2,
            time_id=1,
            status=ReservationStatus.CONFIRMED,
            seat_no=3,
            created_at=created,
            updated_at=created,
        )

    def test_cancel_changes_only_status_and_updated_at(
        self, confirmed_reservation: Reservation
    ) -> None:
        # Act
        cancelled = confirmed_reservation.cancel()

        # Assert
        assert cancelled.status == ReservationStatus.CANCELLED
        assert cancelled.id == confirmed_reservation.id
        assert cancelled.student_id == confirmed_reservation.student_id
        assert cancelled.time_id == confirmed_reservation.time_id
        assert cancelled.seat_no == confirmed_reservation.seat_no
        assert cancelled.created_at == confirmed_reservation.created_at
        assert cancelled.updated_at is not None
        assert confirmed_reservation.updated_at is not None
        assert cancelled.updated_at > confirmed_reservation.updated_at

    def test_cancel_does_not_mutate_original(self, confirmed_reservation: Reservation) -> None:
        confirmed_reservation.cancel()

        assert confirmed_reservation.status == ReservationStatus.CONFIRMED

    def test_cancel_twice_raises_already_cancelled(
        self, confirmed_reservation: Reservation
    ) -> None:
        cancelled = confirmed_reservation.cancel()

        with pytest.raises(AlreadyCancelledError):
            cancelled.cancel()

    def test_cancel_unknown_status_raises_not_confirmed(
        self, confirmed_reservation: Reservation
    ) -> None:
        # Arrange: a status outside the two-state lifecycle (e.g. bad data)
        confirmed_reservation.status = 99  # type: ignore[assignment]

        # Act & Assert
        with pytest.raises(NotConfirmedError):
            confirmed_reservation.cancel()

    def test_only_owner_passes_ownership_check(self, confirmed_reservation: Reservation) -> None:
        confirmed_reservation.ensure_owned_by(2)

        with pytest.raises(ForbiddenError):
            confirmed_reservation.ensure_owned_by(3)


@pytest.mark.unit
class TestReservationConfirm:
    def test_confirm_sets_status_seat_and_timestamps(self) -> None:
        reservation = Reservation.confirm(student_id=2, time_id=1, seat_no=1)

        assert reservation.is_confirmed
        assert reservation.seat_no == 1
        assert reservation.id is None
        assert reservation.created_at == reservation.updated_at
        assert reservation.created_at is not None
        assert reservation.created_at.tzinfo is not None


@pytest.mark.unit
class TestLowestFreeSeat:
    @pytest.mark.parametrize(
        'taken,capacity,expected',
        [
            (set(), 3, 1),
            ({1}, 3, 2),
            ({1, 3}, 3, 2),
            ({2, 3}, 3, 1),
            ({1, 2, 3}, 3, None),
            (set(), 0, None),
        ],
    )
    def test_lowest_free_seat(self, taken: set[int], capacity: int, expected: int | None) -> None:
        assert lowest_free_seat(taken, capacity) == expected
