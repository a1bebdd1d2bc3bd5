"""create evidence table

Revision ID: 001
Revises:
Create Date: 2026-10-19

Insert-only evidence records. id and date_time are assigned on insert;
CHECK constraints mirror the API length rules.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "evidence",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("testimony", sa.String(length=255), nullable=False),
        sa.Column(
            "date_time",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("created_by", sa.String(length=100), nullable=False),
        sa.CheckConstraint(
            "length(testimony) BETWEEN 20 AND 255",
            name="ck_evidence_testimony_length",
        ),
        sa.CheckConstraint(
            "length(created_by) BETWEEN 1 AND 100",
            name="ck_evidence_created_by_length",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_evidence_date_time", "evidence", ["date_time"])


def downgrade() -> None:
    op.drop_index("ix_evidence_date_time", table_name="evidence", if_exists=True)
    op.drop_table("evidence", if_exists=True)
