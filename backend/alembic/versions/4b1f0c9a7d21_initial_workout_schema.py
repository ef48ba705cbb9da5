"""users, exercise catalog, workouts/exercises/sets, personal records

Revision ID: 4b1f0c9a7d21
Revises:
Create Date: 2026-10-19 10:12:03.418220

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f0c9a7d21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# enum types are named so they can be dropped explicitly on postgres
user_role = sa.Enum('user', 'admin', name='user_role')
record_type = sa.Enum('max_weight', 'max_reps', name='record_type')


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', user_role, nullable=False, server_default='user'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) exercise catalog
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('muscle_groups', sa.JSON(), nullable=False),
        sa.Column('secondary_muscles', sa.JSON(), nullable=False),
        sa.Column('equipment', sa.JSON(), nullable=False),
        sa.Column('difficulty', sa.String(length=20), nullable=False),
        sa.Column('exercise_type', sa.String(length=20), nullable=False),
        sa.Column('gif_url', sa.String(length=500), nullable=True),
    )
    op.create_index('ix_exercises_name', 'exercises', ['name'], unique=True)

    # 3) workouts -> workout_exercises -> workout_sets
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('ended_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('total_volume', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('difficulty_rating', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
    )
    op.create_table(
        'workout_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('distance', sa.Float(), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
    )

    # 4) personal_records (append-only history)
    op.create_table(
        'personal_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('record_type', record_type, nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('achieved_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('personal_records')
    op.drop_table('workout_sets')
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_index('ix_exercises_name', table_name='exercises')
    op.drop_table('exercises')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
    record_type.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
