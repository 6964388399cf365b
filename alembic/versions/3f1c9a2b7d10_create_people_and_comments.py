"""Create people and comments tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-16 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('people',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False, comment='Given name'),
        sa.Column('last_name', sa.String(length=255), nullable=False, comment='Family name'),
        sa.Column('email', sa.String(length=255), nullable=False, comment='Contact email address'),
        sa.Column('job_title', sa.String(length=255), nullable=False, comment='Job title'),
        sa.Column('avatar', sa.String(length=2048), nullable=True, comment='Avatar image URL'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='When the person record was created'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='When the person record was last updated'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_people_email'), 'people', ['email'], unique=False)

    op.create_table('comments',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False, comment='Comment body'),
        sa.Column('person_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['person_id'], ['people.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_comments_person_id'), 'comments', ['person_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_comments_person_id'), table_name='comments')
    op.drop_table('comments')
    op.drop_index(op.f('ix_people_email'), table_name='people')
    op.drop_table('people')
