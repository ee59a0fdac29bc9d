"""create users, owners, types, pets and visits

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(20), nullable=False, unique=True),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('enabled', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('password_salt', sa.String(64), nullable=False),
        sa.Column('password_hash', sa.String(128), nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=True),
    )
    op.create_table(
        'owners',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(30), nullable=False),
        sa.Column('last_name', sa.String(30), nullable=False),
        sa.Column('address', sa.String(255)),
        sa.Column('city', sa.String(80)),
        sa.Column('telephone', sa.String(20)),
    )
    op.create_table(
        'types',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(80), nullable=False, unique=True),
    )
    op.create_table(
        'pets',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(30), nullable=False),
        sa.Column('birth_date', sa.Date, nullable=False),
        sa.Column('type_id', sa.Integer, sa.ForeignKey('types.id'), nullable=False),
        sa.Column('owner_id', sa.Integer, sa.ForeignKey('owners.id'), nullable=False),
    )
    op.create_index('ix_pets_name', 'pets', ['name'])
    op.create_table(
        'visits',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('pet_id', sa.Integer, sa.ForeignKey('pets.id'), nullable=False),
        sa.Column('visit_date', sa.Date, nullable=False),
        sa.Column('description', sa.String(255), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('visits')
    op.drop_index('ix_pets_name', table_name='pets')
    op.drop_table('pets')
    op.drop_table('types')
    op.drop_table('owners')
    op.drop_table('users')
