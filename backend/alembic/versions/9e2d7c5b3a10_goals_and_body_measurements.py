"""goals and body measurements

Revision ID: 9e2d7c5b3a10
Revises: 4b1f0c9a7d21
Create Date: 2026-10-19 15:40:27.902114

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9e2d7c5b3a10'
down_revision: Union[str, None] = '4b1f0c9a7d21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

goal_type = sa.Enum('weight', 'strength', 'consistency', 'body_composition', name='goal_type')
goal_status = sa.Enum('active', 'achieved', 'abandoned', name='goal_status')


def upgrade() -> None:
    op.create_table(
        'goals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('goal_type', goal_type, nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('target_value', sa.Float(), nullable=False),
        sa.Column('current_value', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('deadline', sa.DateTime(timezone=True), nullable=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=True),
        sa.Column('status', goal_status, nullable=False, server_default='active'),
        sa.Column('achieved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )
    op.create_index('ix_goals_user_id', 'goals', ['user_id'])

    op.create_table(
        'body_measurements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('weight', sa.Float(), nullable=True),
        sa.Column('body_fat_percent', sa.Float(), nullable=True),
        *(sa.Column(site, sa.Float(), nullable=True)
          for site in ('chest', 'waist', 'hips', 'biceps', 'thighs', 'calves', 'shoulders', 'neck')),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )
    op.create_index('ix_body_measurements_user_id', 'body_measurements', ['user_id'])
    op.create_index('ix_body_measurements_date', 'body_measurements', ['date'])


def downgrade() -> None:
    op.drop_index('ix_body_measurements_date', table_name='body_measurements')
    op.drop_index('ix_body_measurements_user_id', table_name='body_measurements')
    op.drop_table('body_measurements')
    op.drop_index('ix_goals_user_id', table_name='goals')
    op.drop_table('goals')
    goal_status.drop(op.get_bind(), checkfirst=True)
    goal_type.drop(op.get_bind(), checkfirst=True)
