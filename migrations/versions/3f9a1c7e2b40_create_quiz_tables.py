"""Create quiz, question and result tables

Revision ID: 3f9a1c7e2b40
Revises: 
Create Date: 2026-10-16 23:40:12.118204

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = '3f9a1c7e2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    inspector = inspect(op.get_bind())
    tables = inspector.get_table_names()

    # Create quizzes table
    if 'quizzes' not in tables:
        op.create_table('quizzes',
            sa.Column('id', sa.String(length=32), nullable=False),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_quizzes_created_at', 'quizzes', ['created_at'], unique=False)

    # Create quiz_questions table
    if 'quiz_questions' not in tables:
        op.create_table('quiz_questions',
            sa.Column('id', sa.String(length=32), nullable=False),
            sa.Column('quiz_id', sa.String(length=32), nullable=False),
            sa.Column('question_type', sa.String(length=16), nullable=False),
            sa.Column('question_text', sa.Text(), nullable=False),
            sa.Column('options', sa.JSON(), nullable=False),
            sa.Column('correct_answers', sa.JSON(), nullable=False),
            sa.Column('order', sa.Integer(), nullable=False),
            sa.ForeignKeyConstraint(['quiz_id'], ['quizzes.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('quiz_id', 'order', name='uq_quiz_questions_quiz_order')
        )
        op.create_index('ix_quiz_questions_quiz_id', 'quiz_questions', ['quiz_id'], unique=False)

    # Create quiz_results table (quiz_id is a weak reference, no foreign key)
    if 'quiz_results' not in tables:
        op.create_table('quiz_results',
            sa.Column('id', sa.String(length=32), nullable=False),
            sa.Column('quiz_id', sa.String(length=32), nullable=False),
            sa.Column('total', sa.Integer(), nullable=False),
            sa.Column('correct_count', sa.Integer(), nullable=False),
            sa.Column('percent', sa.Float(), nullable=False),
            sa.Column('answers', sa.JSON(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_quiz_results_quiz_id', 'quiz_results', ['quiz_id'], unique=False)
        op.create_index('ix_quiz_results_created_at', 'quiz_results', ['created_at'], unique=False)


def downgrade():
    op.drop_index('ix_quiz_results_created_at', table_name='quiz_results')
    op.drop_index('ix_quiz_results_quiz_id', table_name='quiz_results')
    op.drop_table('quiz_results')

    op.drop_index('ix_quiz_questions_quiz_id', table_name='quiz_questions')
    op.drop_table('quiz_questions')

    op.drop_index('ix_quizzes_created_at', table_name='quizzes')
    op.drop_table('quizzes')
