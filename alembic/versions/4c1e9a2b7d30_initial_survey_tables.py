"""initial_survey_tables

Revision ID: 4c1e9a2b7d30
Revises:
Create Date: 2026-10-18 10:12:41.218734

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c1e9a2b7d30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'surveys',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('owner_group', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_surveys_created_at', 'surveys', ['created_at'])

    op.create_table(
        'questions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('survey_id', sa.String(length=36), sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'type',
            sa.Enum('text', 'rating', 'multiple-choice', name='question_type', native_enum=False),
            nullable=False,
        ),
        sa.Column('label', sa.String(), nullable=False),
        sa.Column('options', sa.JSON(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_questions_survey_id', 'questions', ['survey_id'])

    op.create_table(
        'responses',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('survey_id', sa.String(length=36), sa.ForeignKey('surveys.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_ref', sa.String(), nullable=False),
        sa.Column('answers', sa.JSON(), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_responses_survey_id', 'responses', ['survey_id'])
    op.create_index('ix_responses_user_ref', 'responses', ['user_ref'])


def downgrade() -> None:
    op.drop_index('ix_responses_user_ref', table_name='responses')
    op.drop_index('ix_responses_survey_id', table_name='responses')
    op.drop_table('responses')
    op.drop_index('ix_questions_survey_id', table_name='questions')
    op.drop_table('questions')
    op.drop_index('ix_surveys_created_at', table_name='surveys')
    op.drop_table('surveys')
