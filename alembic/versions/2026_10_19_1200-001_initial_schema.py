"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    # Create movies table
    op.create_table(
        'movies',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('genre', sa.String(length=100), nullable=True),
        sa.Column('director', sa.String(length=255), nullable=True),
        sa.Column('age_rating', sa.String(length=20), nullable=True),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('poster_url', sa.String(length=1000), nullable=True),
        sa.Column('recommended', sa.Boolean(), nullable=False, server_default='false'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('duration_minutes > 0', name='ck_movies_duration_positive'),
    )
    op.create_index(op.f('ix_movies_title'), 'movies', ['title'], unique=False)

    # Create theaters table
    op.create_table(
        'theaters',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('postal_code', sa.String(length=20), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_theaters_city'), 'theaters', ['city'], unique=False)

    # Create halls table
    op.create_table(
        'halls',
        sa.Column('theater_id', sa.String(length=36), nullable=False),
        sa.Column('hall_id', sa.String(length=16), nullable=False),
        sa.Column('seats_layout', JSONB(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['theater_id'], ['theaters.id'], ondelete='CASCADE', onupdate='CASCADE'),
        sa.PrimaryKeyConstraint('theater_id', 'hall_id'),
    )

    # Create screenings table
    op.create_table(
        'screenings',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('movie_id', sa.String(length=36), nullable=False),
        sa.Column('theater_id', sa.String(length=36), nullable=False),
        sa.Column('hall_id', sa.String(length=16), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('quality', sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['theater_id', 'hall_id'],
            ['halls.theater_id', 'halls.hall_id'],
            ondelete='CASCADE',
            onupdate='CASCADE',
            name='fk_screenings_hall',
        ),
        sa.CheckConstraint('price >= 0', name='ck_screenings_price_non_negative'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_screenings_movie_id'), 'screenings', ['movie_id'], unique=False)
    op.create_index(op.f('ix_screenings_theater_id'), 'screenings', ['theater_id'], unique=False)
    op.create_index(op.f('ix_screenings_start_time'), 'screenings', ['start_time'], unique=False)

    # Create bookings table
    op.create_table(
        'bookings',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('screening_id', sa.String(length=36), nullable=False),
        sa.Column('seats_number', sa.Integer(), nullable=False),
        sa.Column('total_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('booking_date', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['screening_id'], ['screenings.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bookings_user_id'), 'bookings', ['user_id'], unique=False)
    op.create_index(op.f('ix_bookings_screening_id'), 'bookings', ['screening_id'], unique=False)
    op.create_index(op.f('ix_bookings_status'), 'bookings', ['status'], unique=False)

    # Create seat_bookings table; the primary key is the one-seat-one-booking guarantee
    op.create_table(
        'seat_bookings',
        sa.Column('screening_id', sa.String(length=36), nullable=False),
        sa.Column('seat_id', sa.String(length=16), nullable=False),
        sa.Column('booking_id', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['screening_id'], ['screenings.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['booking_id'], ['bookings.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('screening_id', 'seat_id'),
    )
    op.create_index(op.f('ix_seat_bookings_booking_id'), 'seat_bookings', ['booking_id'], unique=False)


def downgrade() -> None:
    op.drop_table('seat_bookings')
    op.drop_table('bookings')
    op.drop_table('screenings')
    op.drop_table('halls')
    op.drop_table('theaters')
    op.drop_table('movies')
