"""create users, languages and words tables

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 12:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "languages",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("head", sa.Integer(), nullable=True),
        sa.Column("total_score", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(op.f("ix_languages_user_id"), "languages", ["user_id"], unique=False)

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("language_id", sa.Integer(), sa.ForeignKey("languages.id", ondelete="CASCADE"), nullable=False),
        sa.Column("original", sa.String(length=255), nullable=False),
        sa.Column("translation", sa.String(length=255), nullable=False),
        sa.Column("next", sa.Integer(), sa.ForeignKey("words.id", ondelete="SET NULL"), nullable=True),
        sa.Column("memory_value", sa.BigInteger(), nullable=False, server_default="1"),
        sa.Column("correct_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("incorrect_count", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(op.f("ix_words_language_id"), "words", ["language_id"], unique=False)

    with op.batch_alter_table("languages", schema=None) as batch_op:
        batch_op.create_foreign_key(
            "fk_languages_head_words", "words", ["head"], ["id"], ondelete="SET NULL"
        )


def downgrade() -> None:
    with op.batch_alter_table("languages", schema=None) as batch_op:
        batch_op.drop_constraint("fk_languages_head_words", type_="foreignkey")
    op.drop_index(op.f("ix_words_language_id"), table_name="words")
    op.drop_table("words")
    op.drop_index(op.f("ix_languages_user_id"), table_name="languages")
    op.drop_table("languages")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
