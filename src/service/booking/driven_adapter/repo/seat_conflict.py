"""
Tell a lost booking race apart from any other integrity failure on flush.

PostgreSQL names the violated index; SQLite only lists its columns.
"""

from typing import NoReturn

from sqlalchemy.exc import IntegrityError

from src.platform.exception.exceptions import SeatConflictError


# index / constraint name -> columns as SQLite reports them
SEAT_CONFLICT_CONSTRAINTS = {
    'uq_reservation_time_seat_confirmed': 'reservation.time_id, reservation.seat_no',
    'uq_reservation_time_student_confirmed': 'reservation.time_id, reservation.student_id',
    'uq_payment_toss_order_id': 'payment.toss_order_id',
}


def violated_seat_constraint(e: IntegrityError) -> str | None:
    orig = e.orig
    # asyncpg errors arrive wrapped by the SQLAlchemy dbapi adapter
    constraint_name = getattr(orig, 'constraint_name', None) or getattr(
        getattr(orig, '__cause__', None), 'constraint_name', None
    )
    message = str(orig)

    for name, sqlite_columns in SEAT_CONFLICT_CONSTRAINTS.items():
        if constraint_name == name or f'"{name}"' in message:
            return name
        if f'UNIQUE constraint failed: {sqlite_columns}' in message:
            return name
    return None


def raise_seat_conflict_or_reraise(e: IntegrityError) -> NoReturn:
    constraint = violated_seat_constraint(e)
    if constraint is None:
        raise e
    raise SeatConflictError(f'Concurrent write on {constraint}') from e
