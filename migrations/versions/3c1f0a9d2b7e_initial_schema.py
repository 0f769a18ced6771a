"""Initial schema: goals, tasks, task logs and weekly reviews

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9d2b7e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('goals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('deadline', sa.DateTime(), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('goals', schema=None) as batch_op:
        batch_op.create_index('idx_goals_user_archived', ['user_id', 'is_archived'], unique=False)

    op.create_table('tasks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('goal_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('frequency', sa.String(length=20), nullable=False),
        sa.Column('custom_days', sa.Integer(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['goal_id'], ['goals.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('tasks', schema=None) as batch_op:
        batch_op.create_index('idx_tasks_goal_id', ['goal_id'], unique=False)
        batch_op.create_index('idx_tasks_is_active', ['is_active'], unique=False)

    op.create_table('task_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('task_id', sa.Integer(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['task_id'], ['tasks.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('task_id', 'due_date', name='uq_task_logs_task_due')
    )
    with op.batch_alter_table('task_logs', schema=None) as batch_op:
        batch_op.create_index('idx_task_logs_due_date', ['due_date'], unique=False)
        batch_op.create_index('idx_task_logs_status', ['status'], unique=False)

    op.create_table('weekly_reviews',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=64), nullable=False),
        sa.Column('goal_id', sa.Integer(), nullable=False),
        sa.Column('review_date', sa.Date(), nullable=False),
        sa.Column('stayed_on_track', sa.Boolean(), nullable=False),
        sa.Column('reflection_text', sa.Text(), nullable=True),
        sa.Column('improvement_notes', sa.Text(), nullable=True),
        sa.Column('auto_suggestions', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['goal_id'], ['goals.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'goal_id', 'review_date', name='uq_weekly_reviews_user_goal_date')
    )


def downgrade():
    op.drop_table('weekly_reviews')
    with op.batch_alter_table('task_logs', schema=None) as batch_op:
        batch_op.drop_index('idx_task_logs_status')
        batch_op.drop_index('idx_task_logs_due_date')
    op.drop_table('task_logs')
    with op.batch_alter_table('tasks', schema=None) as batch_op:
        batch_op.drop_index('idx_tasks_is_active')
        batch_op.drop_index('idx_tasks_goal_id')
    op.drop_table('tasks')
    with op.batch_alter_table('goals', schema=None) as batch_op:
        batch_op.drop_index('idx_goals_user_archived')
    op.drop_table('goals')
