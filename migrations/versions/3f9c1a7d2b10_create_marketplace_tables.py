"""create_marketplace_tables

Revision ID: 3f9c1a7d2b10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f9c1a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('USER', 'BUSINESS_OWNER', 'ADMIN', name='userrole')
project_status = sa.Enum(
    'DRAFT', 'OPEN', 'ASSIGNED', 'IN_PROGRESS', 'IN_REVIEW', 'COMPLETED', 'ARCHIVED', 'CANCELLED',
    name='projectstatus',
)
project_scope = sa.Enum('BEGINNER', 'INTERMEDIATE', 'ADVANCED', 'EXPERT', name='projectscope')
project_category = sa.Enum(
    'WEB_DEVELOPMENT', 'MOBILE_DEVELOPMENT', 'UI_UX_DESIGN', 'DATA_SCIENCE',
    'MACHINE_LEARNING', 'BLOCKCHAIN', 'GAME_DEVELOPMENT', 'OTHER',
    name='projectcategory',
)
application_status = sa.Enum('PENDING', 'ACCEPTED', 'REJECTED', 'WITHDRAWN', name='applicationstatus')


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('accounts',
    sa.Column('id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('external_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('role', user_role, nullable=False),
    sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
    sa.Column('bio', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('intro', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('skills', sa.JSON(), nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_accounts_external_id'), 'accounts', ['external_id'], unique=True)

    op.create_table('educations',
    sa.Column('id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('account_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('institution', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
    sa.Column('degree', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['account_id'], ['accounts.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_educations_account_id'), 'educations', ['account_id'], unique=False)

    op.create_table('projects',
    sa.Column('id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('business_owner_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('assigned_student_id', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
    sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('required_skills', sa.JSON(), nullable=False),
    sa.Column('category', project_category, nullable=False),
    sa.Column('scope', project_scope, nullable=False),
    sa.Column('budget', sa.Float(), nullable=False),
    sa.Column('start_date', sa.DateTime(), nullable=False),
    sa.Column('estimated_end_date', sa.DateTime(), nullable=False),
    sa.Column('application_deadline', sa.DateTime(), nullable=False),
    sa.Column('is_public', sa.Boolean(), nullable=False),
    sa.Column('status', project_status, nullable=False),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.Column('assigned_at', sa.DateTime(), nullable=True),
    sa.Column('in_progress_at', sa.DateTime(), nullable=True),
    sa.Column('in_review_at', sa.DateTime(), nullable=True),
    sa.Column('completed_at', sa.DateTime(), nullable=True),
    sa.ForeignKeyConstraint(['business_owner_id'], ['accounts.id'], ),
    sa.ForeignKeyConstraint(['assigned_student_id'], ['accounts.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_projects_business_owner_id'), 'projects', ['business_owner_id'], unique=False)
    op.create_index(op.f('ix_projects_assigned_student_id'), 'projects', ['assigned_student_id'], unique=False)
    op.create_index(op.f('ix_projects_category'), 'projects', ['category'], unique=False)
    op.create_index(op.f('ix_projects_scope'), 'projects', ['scope'], unique=False)
    op.create_index(op.f('ix_projects_status'), 'projects', ['status'], unique=False)

    op.create_table('applications',
    sa.Column('id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('project_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('applicant_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('status', application_status, nullable=False),
    sa.Column('cover_letter', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('seen_by_applicant', sa.Boolean(), nullable=False, server_default='true'),
    sa.Column('applied_at', sa.DateTime(), nullable=False),
    sa.Column('status_changed_at', sa.DateTime(), nullable=False),
    sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ),
    sa.ForeignKeyConstraint(['applicant_id'], ['accounts.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_applications_project_id'), 'applications', ['project_id'], unique=False)
    op.create_index(op.f('ix_applications_applicant_id'), 'applications', ['applicant_id'], unique=False)
    op.create_index(op.f('ix_applications_status'), 'applications', ['status'], unique=False)
    # One non-withdrawn application per (project, applicant)
    op.create_index(
        'uq_applications_active_pair', 'applications', ['project_id', 'applicant_id'],
        unique=True, postgresql_where=sa.text("status <> 'WITHDRAWN'"),
    )
    # One accepted application per project
    op.create_index(
        'uq_applications_accepted_project', 'applications', ['project_id'],
        unique=True, postgresql_where=sa.text("status = 'ACCEPTED'"),
    )

    op.create_table('dead_letter_events',
    sa.Column('id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('event_type', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('event_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('account_id', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.Column('payload', sa.JSON(), nullable=True),
    sa.Column('failure_reason', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
    sa.Column('replay_attempts', sa.Integer(), nullable=False, server_default='0'),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('resolved', sa.Boolean(), nullable=False, server_default='false'),
    sa.Column('resolved_at', sa.DateTime(), nullable=True),
    sa.Column('resolution_notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_dead_letter_events_event_type'), 'dead_letter_events', ['event_type'], unique=False)
    op.create_index(op.f('ix_dead_letter_events_event_id'), 'dead_letter_events', ['event_id'], unique=False)
    op.create_index(op.f('ix_dead_letter_events_account_id'), 'dead_letter_events', ['account_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('dead_letter_events')
    op.drop_index('uq_applications_accepted_project', table_name='applications')
    op.drop_index('uq_applications_active_pair', table_name='applications')
    op.drop_table('applications')
    op.drop_table('projects')
    op.drop_table('educations')
    op.drop_table('accounts')
    bind = op.get_bind()
    for enum_type in (application_status, project_category, project_scope, project_status, user_role):
        enum_type.drop(bind, checkfirst=True)
