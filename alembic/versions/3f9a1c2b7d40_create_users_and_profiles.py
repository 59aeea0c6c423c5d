"""Create users and profiles tables

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2025-03-01 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('user', 'admin', 'moderator', name='user_role')
gender = sa.Enum('male', 'female', 'non_binary', 'other', 'prefer_not_to_say', name='gender')
looking_for = sa.Enum(
    'friendship', 'dating', 'relationship', 'networking', 'study_buddy', 'anything',
    name='looking_for',
)
relationship_status = sa.Enum(
    'single', 'in_relationship', 'complicated', 'prefer_not_to_say',
    name='relationship_status',
)


def upgrade() -> None:
    """Create users and profiles"""

    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('role', user_role, nullable=False, server_default='user'),
        sa.Column('is_verified', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('is_photo_verified', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('is_premium', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('premium_expires_at', sa.DateTime(), nullable=True),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('login_streak', sa.Integer(), server_default='0', nullable=False),
        sa.Column('account_locked', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('locked_until', sa.DateTime(), nullable=True),
        sa.Column('failed_login_attempts', sa.Integer(), server_default='0', nullable=False),
        sa.Column('graduation_year', sa.Integer(), nullable=True),
        sa.Column('verification_token', sa.String(255), nullable=True),
        sa.Column('verification_token_expires', sa.DateTime(), nullable=True),
        sa.Column('password_reset_token', sa.String(255), nullable=True),
        sa.Column('password_reset_expires', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_verification_token', 'users', ['verification_token'])
    op.create_index('ix_users_password_reset_token', 'users', ['password_reset_token'])

    op.create_table('profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('display_name', sa.String(100), nullable=True),
        sa.Column('code_name', sa.String(100), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', gender, nullable=True),
        sa.Column('looking_for', looking_for, nullable=True),
        sa.Column('department', sa.String(100), nullable=True),
        sa.Column('year_of_study', sa.Integer(), nullable=True),
        sa.Column('interests', sa.JSON(), nullable=True),
        sa.Column('hobbies', sa.JSON(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('relationship_status', relationship_status, nullable=True),
        sa.Column('show_age', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('show_distance', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('anonymous_until', sa.DateTime(), nullable=True),
        sa.Column('profile_completion', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'])


def downgrade() -> None:
    """Drop profiles and users"""
    op.drop_index('ix_profiles_user_id', table_name='profiles')
    op.drop_table('profiles')
    op.drop_index('ix_users_password_reset_token', table_name='users')
    op.drop_index('ix_users_verification_token', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    bind = op.get_bind()
    for enum in (relationship_status, looking_for, gender, user_role):
        enum.drop(bind, checkfirst=True)
