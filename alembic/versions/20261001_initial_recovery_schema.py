"""Initial recovery planner schema

Revision ID: 20261001_initial_recovery_schema
Revises:
Create Date: 2026-10-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261001_initial_recovery_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=25), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('clerk_id', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=True),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_clerk_id', 'users', ['clerk_id'], unique=True)

    op.create_table(
        'recovery_profiles',
        sa.Column('id', sa.String(length=25), nullable=False),
        sa.Column('user_id', sa.String(length=25), nullable=False),

        # Injury
        sa.Column('injury_side', sa.String(length=10), nullable=False),
        sa.Column('injury_date', sa.Date(), nullable=False),
        sa.Column('surgery_status', sa.String(length=20), nullable=False),
        sa.Column('surgery_date', sa.Date(), nullable=True),

        # Restrictions and goal documents
        sa.Column('restrictions', sa.JSON(), nullable=False),
        sa.Column('goal', sa.JSON(), nullable=False),

        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_recovery_profiles_id', 'recovery_profiles', ['id'])
    op.create_index('ix_recovery_profiles_user_id', 'recovery_profiles', ['user_id'], unique=True)

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.String(length=25), nullable=False),
        sa.Column('user_id', sa.String(length=25), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),

        # Scores
        sa.Column('pain', sa.Integer(), nullable=False),
        sa.Column('instability', sa.Integer(), nullable=False),
        sa.Column('sleep_impact', sa.Integer(), nullable=False),

        # Range of motion
        sa.Column('flexion_bucket', sa.String(length=10), nullable=False),
        sa.Column('abduction_bucket', sa.String(length=10), nullable=False),
        sa.Column('behind_back_reach', sa.String(length=20), nullable=False),

        sa.Column('sling_worn', sa.Boolean(), nullable=False),
        sa.Column('did_rehab', sa.Boolean(), nullable=False),
        sa.Column('did_cardio', sa.Boolean(), nullable=False),
        sa.Column('did_strength', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),

        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_daily_log_user_date')
    )
    op.create_index('ix_daily_logs_id', 'daily_logs', ['id'])
    op.create_index('ix_daily_logs_user_id', 'daily_logs', ['user_id'])
    op.create_index('ix_daily_logs_date', 'daily_logs', ['date'])
    op.create_index('ix_daily_log_user_date', 'daily_logs', ['user_id', 'date'])

    op.create_table(
        'milestones',
        sa.Column('id', sa.String(length=25), nullable=False),
        sa.Column('user_id', sa.String(length=25), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('type', sa.String(length=40), nullable=False),
        sa.Column('value', sa.String(length=200), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_milestones_id', 'milestones', ['id'])
    op.create_index('ix_milestones_user_id', 'milestones', ['user_id'])
    op.create_index('ix_milestone_user_date', 'milestones', ['user_id', 'date'])

    op.create_table(
        'workout_completions',
        sa.Column('id', sa.String(length=25), nullable=False),
        sa.Column('user_id', sa.String(length=25), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('kind', sa.String(length=20), nullable=False),
        sa.Column('workout_payload', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_workout_completions_id', 'workout_completions', ['id'])
    op.create_index('ix_workout_completions_user_id', 'workout_completions', ['user_id'])
    op.create_index('ix_workout_completion_user_date', 'workout_completions', ['user_id', 'date'])


def downgrade() -> None:
    op.drop_table('workout_completions')
    op.drop_table('milestones')
    op.drop_table('daily_logs')
    op.drop_table('recovery_profiles')
    op.drop_table('users')
