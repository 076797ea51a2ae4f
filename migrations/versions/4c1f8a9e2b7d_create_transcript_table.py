"""Create transcript table

Revision ID: 4c1f8a9e2b7d
Revises: 
Create Date: 2026-10-19 10:12:41.208331

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c1f8a9e2b7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'transcript',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('video_id', sa.String(length=11), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=False),
        sa.Column('transcript', sa.Text(), nullable=True),
        sa.Column('transcript_source', sa.String(length=20), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('video_id'),
    )


def downgrade():
    op.drop_table('transcript')
