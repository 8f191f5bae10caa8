"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

from uxscore.constants import SEEDED_CATEGORIES

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Identity tables
    op.create_table('roles',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index('ix_roles_name', 'roles', ['name'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('username', sa.String(length=256), nullable=False),
        sa.Column('email', sa.String(length=256), nullable=True),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('email_confirmed', sa.Boolean(), nullable=False),
        sa.Column('lockout_enabled', sa.Boolean(), nullable=False),
        sa.Column('lockout_end', sa.DateTime(), nullable=True),
        sa.Column('access_failed_count', sa.Integer(), nullable=False),
        sa.Column('security_stamp', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username')
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table('user_roles',
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('role_id', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'role_id')
    )

    # Domain tables
    categories = op.create_table('categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=800), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('projects',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=800), nullable=True),
        sa.Column('websites', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('created_by', sa.String(length=200), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('updated_by', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_projects_created_by', 'projects', ['created_by'], unique=False)

    op.create_table('evaluations',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('project_id', sa.Uuid(), nullable=False),
        sa.Column('website_url', sa.String(length=200), nullable=False),
        sa.Column('notes', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('created_by', sa.String(length=200), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('updated_by', sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_evaluations_project_id', 'evaluations', ['project_id'], unique=False)
    op.create_index('ix_evaluations_created_by', 'evaluations', ['created_by'], unique=False)

    op.create_table('category_scores',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('evaluation_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('comment', sa.String(length=800), nullable=True),
        sa.Column('annotation', sa.String(length=800), nullable=True),
        sa.Column('screenshot', sa.LargeBinary(), nullable=True),
        sa.CheckConstraint('score >= 1 AND score <= 5', name='ck_category_scores_score_range'),
        sa.ForeignKeyConstraint(['evaluation_id'], ['evaluations.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_category_scores_evaluation_id', 'category_scores', ['evaluation_id'], unique=False)
    op.create_index('ix_category_scores_category_id', 'category_scores', ['category_id'], unique=False)

    op.create_table('performance_metrics',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('website_url', sa.String(length=2000), nullable=False),
        sa.Column('load_time_ms', sa.Integer(), nullable=False),
        sa.Column('response_time_ms', sa.Integer(), nullable=False),
        sa.Column('dom_content_loaded_ms', sa.Integer(), nullable=False),
        sa.Column('first_paint_ms', sa.Integer(), nullable=False),
        sa.Column('performance_score', sa.Integer(), nullable=False),
        sa.Column('test_date', sa.DateTime(), nullable=False),
        sa.Column('test_location', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('created_by', sa.String(length=200), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('updated_by', sa.String(length=200), nullable=True),
        sa.CheckConstraint(
            'performance_score >= 0 AND performance_score <= 100',
            name='ck_performance_metrics_score_range'
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_performance_metrics_created_by', 'performance_metrics', ['created_by'], unique=False)

    # Seeded scoring categories with fixed IDs
    op.bulk_insert(categories, [
        {
            'id': category_id,
            'name': name,
            'description': description,
            'is_active': True,
            'display_order': position,
        }
        for position, (category_id, name, description) in enumerate(SEEDED_CATEGORIES, start=1)
    ])


def downgrade() -> None:
    op.drop_index('ix_performance_metrics_created_by', table_name='performance_metrics')
    op.drop_table('performance_metrics')
    op.drop_index('ix_category_scores_category_id', table_name='category_scores')
    op.drop_index('ix_category_scores_evaluation_id', table_name='category_scores')
    op.drop_table('category_scores')
    op.drop_index('ix_evaluations_created_by', table_name='evaluations')
    op.drop_index('ix_evaluations_project_id', table_name='evaluations')
    op.drop_table('evaluations')
    op.drop_index('ix_projects_created_by', table_name='projects')
    op.drop_table('projects')
    op.drop_table('categories')
    op.drop_table('user_roles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_roles_name', table_name='roles')
    op.drop_table('roles')
