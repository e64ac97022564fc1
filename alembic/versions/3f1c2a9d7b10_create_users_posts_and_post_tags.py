"""Create users, posts and post_tags tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2025-09-20 10:12:31.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from postbook.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('full_name', sa.String(length=100), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
        sa.CheckConstraint(
            'full_name IS NULL OR length(full_name) <= 100', name='ck_users_full_name_len'
        ),
    )
    op.create_index('idx_users_active', 'users', ['is_active'])

    op.create_table(
        'posts',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=False),
        sa.Column(
            'owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False
        ),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 100', name='ck_posts_title_len'),
        sa.CheckConstraint('length(content) <= 10000', name='ck_posts_content_len'),
        sa.CheckConstraint('length(category) <= 50', name='ck_posts_category_len'),
    )
    op.create_index('idx_posts_owner_created', 'posts', ['owner_id', 'created_at'])
    op.create_index('idx_posts_owner_category', 'posts', ['owner_id', 'category'])

    op.create_table(
        'post_tags',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column(
            'post_id', GUID(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False
        ),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=30), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 30', name='ck_post_tags_name_len'),
    )
    op.create_index('idx_post_tags_post_position', 'post_tags', ['post_id', 'position'])
    op.create_index('idx_post_tags_name', 'post_tags', ['name'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('post_tags')
    op.drop_table('posts')
    op.drop_index('idx_users_active', table_name='users')
    op.drop_table('users')
