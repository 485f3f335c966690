"""
create users, classes and class_schedules tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('avatar', sa.String(), nullable=False),
        sa.Column('whatsapp', sa.String(), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], onupdate='CASCADE', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_classes_id'), 'classes', ['id'], unique=False)
    op.create_index(op.f('ix_classes_subject'), 'classes', ['subject'], unique=False)

    op.create_table(
        'class_schedules',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('week_day', sa.Integer(), nullable=False),
        sa.Column('from', sa.Integer(), nullable=False),
        sa.Column('to', sa.Integer(), nullable=False),
        sa.CheckConstraint('week_day >= 0 AND week_day <= 6', name='ck_class_schedules_week_day'),
        sa.CheckConstraint('"from" >= 0 AND "from" < "to" AND "to" <= 1440', name='ck_class_schedules_interval'),
        sa.ForeignKeyConstraint(['class_id'], ['classes.id'], onupdate='CASCADE', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_class_schedules_class_id'), 'class_schedules', ['class_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_class_schedules_class_id'), table_name='class_schedules')
    op.drop_table('class_schedules')
    op.drop_index(op.f('ix_classes_subject'), table_name='classes')
    op.drop_index(op.f('ix_classes_id'), table_name='classes')
    op.drop_table('classes')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
