"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2025-12-06

Schema:
- user: Accounts (USER / ADMIN)
- refresh_token: At most one live refresh token per user
- category / class_offering / class_image / time_slot: Class catalog
- reservation: Seat bookings, status_code 1=CONFIRMED 2=CANCELLED
- payment: Provider confirmation, 1:1 with a reservation

Note: capacity and one-booking-per-student are enforced by two partial unique
indexes over CONFIRMED reservations:
  (time_id, seat_no)    WHERE status_code = 1
  (time_id, student_id) WHERE status_code = 1
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


CONFIRMED_ONLY = sa.text('status_code = 1')


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables with final schema."""

    # ========== STEP 1: Users ==========

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'refresh_token',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('token', sa.String(length=512), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index(op.f('ix_refresh_token_token'), 'refresh_token', ['token'], unique=True)

    # ========== STEP 2: Catalog ==========

    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )

    op.create_table(
        'class_offering',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('teacher_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('class_name', sa.String(length=255), nullable=False),
        sa.Column('class_detail', sa.Text(), nullable=True),
        sa.Column('curriculum', sa.Text(), nullable=True),
        sa.Column('included', sa.Text(), nullable=True),
        sa.Column('required', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('max_capacity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['teacher_id'], ['user.id']),
        sa.ForeignKeyConstraint(['category_id'], ['category.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_class_offering_teacher_id'), 'class_offering', ['teacher_id'], unique=False
    )

    op.create_table(
        'class_image',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('image_url', sa.String(length=1024), nullable=False),
        sa.Column('is_representative', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['class_id'], ['class_offering.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_class_image_class_id'), 'class_image', ['class_id'], unique=False)

    op.create_table(
        'time_slot',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['class_id'], ['class_offering.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_time_slot_class_id'), 'time_slot', ['class_id'], unique=False)

    # ========== STEP 3: Reservations & payments ==========

    op.create_table(
        'reservation',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('time_id', sa.Integer(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('status_code', sa.Integer(), nullable=False),
        sa.Column('seat_no', sa.Integer(), nullable=True),
        _timestamp('created_at'),
        _timestamp('updated_at'),
        sa.ForeignKeyConstraint(['time_id'], ['time_slot.id']),
        sa.ForeignKeyConstraint(['student_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reservation_time_id'), 'reservation', ['time_id'], unique=False)
    op.create_index(
        op.f('ix_reservation_student_id'), 'reservation', ['student_id'], unique=False
    )
    op.create_index(
        'uq_reservation_time_seat_confirmed',
        'reservation',
        ['time_id', 'seat_no'],
        unique=True,
        postgresql_where=CONFIRMED_ONLY,
        sqlite_where=CONFIRMED_ONLY,
    )
    op.create_index(
        'uq_reservation_time_student_confirmed',
        'reservation',
        ['time_id', 'student_id'],
        unique=True,
        postgresql_where=CONFIRMED_ONLY,
        sqlite_where=CONFIRMED_ONLY,
    )

    op.create_table(
        'payment',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('reservation_id', sa.Integer(), nullable=False),
        sa.Column('toss_order_id', sa.String(length=255), nullable=False),
        sa.Column('payment_key', sa.String(length=255), nullable=False),
        sa.Column('method', sa.String(length=50), nullable=False),
        sa.Column('status', sa.String(length=50), nullable=False),
        sa.Column('total_amount', sa.Integer(), nullable=False),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        _timestamp('created_at'),
        sa.ForeignKeyConstraint(['reservation_id'], ['reservation.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('reservation_id'),
        sa.UniqueConstraint('toss_order_id', name='uq_payment_toss_order_id'),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('payment')
    op.drop_index('uq_reservation_time_student_confirmed', table_name='reservation')
    op.drop_index('uq_reservation_time_seat_confirmed', table_name='reservation')
    op.drop_index(op.f('ix_reservation_student_id'), table_name='reservation')
    op.drop_index(op.f('ix_reservation_time_id'), table_name='reservation')
    op.drop_table('reservation')
    op.drop_index(op.f('ix_time_slot_class_id'), table_name='time_slot')
    op.drop_table('time_slot')
    op.drop_index(op.f('ix_class_image_class_id'), table_name='class_image')
    op.drop_table('class_image')
    op.drop_index(op.f('ix_class_offering_teacher_id'), table_name='class_offering')
    op.drop_table('class_offering')
    op.drop_table('category')
    op.drop_index(op.f('ix_refresh_token_token'), table_name='refresh_token')
    op.drop_table('refresh_token')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
