"""Accounts, questionnaire answers, recommendation results and lookup tables

Revision ID: initial_001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = 'initial_001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- Accounts ---
    op.create_table('register_account',
        sa.Column('account_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('account_email', sa.String(length=255), nullable=False),
        sa.Column('account_password', sa.String(length=255), nullable=False),
        sa.Column('account_name', sa.String(length=255), nullable=True),
        sa.Column('account_picture', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('account_id'),
        sa.UniqueConstraint('account_email'),
    )
    op.create_table('profile_location',
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['account_id'], ['register_account.account_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('account_id'),
    )

    # --- Questionnaire answers and results ---
    op.create_table('qa_transaction',
        sa.Column('qa_transaction_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('distance_id', sa.Integer(), nullable=False),
        sa.Column('value_id', sa.Integer(), nullable=False),
        sa.Column('location_interest_id', sa.Integer(), nullable=False),
        sa.Column('activity_id', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default='[]'),
        sa.Column('custom_activity', sa.String(length=255), nullable=True),
        sa.Column('emotional_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('qa_transaction_id'),
    )
    op.create_index('idx_qa_transaction_account', 'qa_transaction', ['account_id'])

    op.create_table('qa_results',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('result_id', sa.Integer(), nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('event_name', sa.String(length=255), nullable=False),
        sa.Column('event_description', sa.Text(), nullable=True),
        sa.Column('open_day', sa.String(length=255), nullable=True),
        sa.Column('time_schedule', sa.String(length=255), nullable=True),
        sa.Column('location_text', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('distance_text', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_qa_results_account', 'qa_results', ['account_id', 'result_id'])

    # --- Lookup tables ---
    op.create_table('qa_picture',
        sa.Column('picture_id', sa.Integer(), nullable=False),
        sa.Column('theme', sa.String(length=100), nullable=False),
        sa.Column('picture_url', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('picture_id'),
    )
    op.create_table('qa_activity',
        sa.Column('activity_id', sa.Integer(), nullable=False),
        sa.Column('activity_key', sa.String(length=50), nullable=False),
        sa.Column('activity_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('activity_id'),
    )
    op.create_table('qa_traveling',
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('trip_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('trip_id'),
    )
    op.create_table('qa_distance',
        sa.Column('distance_id', sa.Integer(), nullable=False),
        sa.Column('distance_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('distance_id'),
    )
    op.create_table('qa_value',
        sa.Column('value_id', sa.Integer(), nullable=False),
        sa.Column('value_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('value_id'),
    )
    op.create_table('qa_emotional',
        sa.Column('emotional_id', sa.Integer(), nullable=False),
        sa.Column('emotional_name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('emotional_id'),
    )
    op.create_table('province',
        sa.Column('province_id', sa.Integer(), nullable=False),
        sa.Column('province_name', sa.String(length=100), nullable=False),
        sa.Column('province_name_en', sa.String(length=100), nullable=True),
        sa.Column('region_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('province_id'),
    )
    op.create_index('ix_province_region_id', 'province', ['region_id'])


def downgrade() -> None:
    op.drop_index('ix_province_region_id', table_name='province')
    op.drop_table('province')
    op.drop_table('qa_emotional')
    op.drop_table('qa_value')
    op.drop_table('qa_distance')
    op.drop_table('qa_traveling')
    op.drop_table('qa_activity')
    op.drop_table('qa_picture')
    op.drop_index('idx_qa_results_account', table_name='qa_results')
    op.drop_table('qa_results')
    op.drop_index('idx_qa_transaction_account', table_name='qa_transaction')
    op.drop_table('qa_transaction')
    op.drop_table('profile_location')
    op.drop_table('register_account')
