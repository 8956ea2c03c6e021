"""create foods and entries tables

Revision ID: 3c9f1e7a2b40
Revises:
Create Date: 2024-01-01 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9f1e7a2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'foods',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(150), nullable=False),
        sa.UniqueConstraint('name'),
        sqlite_autoincrement=True,
    )

    # food_id is nullable: deleting a food may keep its entries
    op.create_table(
        'entries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('food_id', sa.Integer(), sa.ForeignKey('foods.id'), nullable=True),
        sa.Column('food_name', sa.String(150), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sqlite_autoincrement=True,
    )

    op.create_index('ix_entries_food_id', 'entries', ['food_id'])
    op.create_index('ix_entries_date', 'entries', ['date'])


def downgrade():
    op.drop_index('ix_entries_date', table_name='entries')
    op.drop_index('ix_entries_food_id', table_name='entries')
    op.drop_table('entries')
    op.drop_table('foods')
