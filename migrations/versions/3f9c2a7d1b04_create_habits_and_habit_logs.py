"""Create habits and habit_logs

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2a7d1b04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('habits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=False),
        sa.Column('goal', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('habit_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('habit_id', sa.Integer(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('log_date', sa.Date(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['habit_id'], ['habits.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('habit_id', 'log_date', name='uq_habit_logs_habit_date')
    )
    with op.batch_alter_table('habit_logs', schema=None) as batch_op:
        batch_op.create_index('ix_habit_logs_habit_id', ['habit_id'], unique=False)


def downgrade():
    with op.batch_alter_table('habit_logs', schema=None) as batch_op:
        batch_op.drop_index('ix_habit_logs_habit_id')

    op.drop_table('habit_logs')
    op.drop_table('habits')
