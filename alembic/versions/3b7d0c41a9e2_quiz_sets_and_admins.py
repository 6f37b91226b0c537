"""quiz sets and admin users

Revision ID: 3b7d0c41a9e2
Revises: 
Create Date: 2026-10-19 12:04:31.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b7d0c41a9e2'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "admin_users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "quiz_sets",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("quiz_name", sa.String(200), nullable=False),
        sa.Column("quiz_1_id", sa.String(100), nullable=False),
        sa.Column("quiz_2_id", sa.String(100), nullable=False),
        sa.Column("quiz_3_id", sa.String(100), nullable=False),
        sa.Column("result_id", sa.String(100), nullable=False),
        sa.Column("question_1_text", sa.Text(), nullable=False),
        sa.Column("question_1_placeholder", sa.String(255), nullable=True),
        sa.Column("question_1_answer", sa.Text(), nullable=True),
        sa.Column("question_2_text", sa.Text(), nullable=False),
        sa.Column("question_2_placeholder", sa.String(255), nullable=True),
        sa.Column("question_2_answer", sa.Text(), nullable=True),
        sa.Column("question_3_text", sa.Text(), nullable=False),
        sa.Column("question_3_placeholder", sa.String(255), nullable=True),
        sa.Column("question_3_answer", sa.Text(), nullable=True),
        sa.Column("result_message", sa.Text(), nullable=False),
        sa.Column("reward_link", sa.String(500), nullable=False),
        sa.Column("timer_duration", sa.Integer(), nullable=False, server_default="30"),
        sa.Column("require_answer", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("CURRENT_TIMESTAMP")),
    )

    # id шагов уникальны глобально: по ним резолвится цепочка
    for column in ("quiz_1_id", "quiz_2_id", "quiz_3_id", "result_id"):
        op.create_index(f"ix_quiz_sets_{column}", "quiz_sets", [column], unique=True)
    op.create_index("ix_quiz_sets_is_active", "quiz_sets", ["is_active"])


def downgrade() -> None:
    op.drop_index("ix_quiz_sets_is_active", table_name="quiz_sets")
    for column in ("quiz_1_id", "quiz_2_id", "quiz_3_id", "result_id"):
        op.drop_index(f"ix_quiz_sets_{column}", table_name="quiz_sets")
    op.drop_table("quiz_sets")
    op.drop_table("admin_users")
