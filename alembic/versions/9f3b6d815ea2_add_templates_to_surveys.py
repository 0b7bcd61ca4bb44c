"""add_templates_to_surveys

Revision ID: 9f3b6d815ea2
Revises: 4c1e9a2b7d30
Create Date: 2026-10-18 10:47:05.904112

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '9f3b6d815ea2'
down_revision = '4c1e9a2b7d30'
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Template entity refs linked to the survey, stored as a JSON list
    with op.batch_alter_table('surveys') as batch_op:
        batch_op.add_column(sa.Column('templates', sa.JSON(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('surveys') as batch_op:
        batch_op.drop_column('templates')
