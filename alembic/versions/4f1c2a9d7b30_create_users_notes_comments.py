"""Create users, notes and comments tables

Revision ID: 4f1c2a9d7b30
Revises:
Create Date: 2026-10-18 15:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notethread.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list:
    return [
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        *_base_columns(),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('username'),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
    )
    op.create_index('idx_users_username', 'users', ['username'])

    op.create_table(
        'notes',
        *_base_columns(),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('author', sa.String(length=50), nullable=False),
        sa.Column('owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
    )
    op.create_index('idx_notes_owner_id', 'notes', ['owner_id'])
    op.create_index('idx_notes_owner_created', 'notes', ['owner_id', 'created_at'])

    op.create_table(
        'comments',
        *_base_columns(),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('author', sa.String(length=50), nullable=False),
    )
    op.create_index('idx_comments_note_created', 'comments', ['note_id', 'created_at'])
    op.create_index('idx_comments_owner_id', 'comments', ['owner_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('comments')
    op.drop_table('notes')
    op.drop_table('users')
