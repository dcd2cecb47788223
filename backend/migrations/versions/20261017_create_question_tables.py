"""create questions and main_questions tables

Revision ID: 20261017_create_question_tables
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '20261017_create_question_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'questions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('video_path', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_questions_question'), 'questions', ['question'], unique=True)

    op.create_table(
        'main_questions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('main_question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('questions', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_main_questions_main_question'), 'main_questions', ['main_question'], unique=True)


def downgrade():
    op.drop_index(op.f('ix_main_questions_main_question'), table_name='main_questions')
    op.drop_table('main_questions')
    op.drop_index(op.f('ix_questions_question'), table_name='questions')
    op.drop_table('questions')
