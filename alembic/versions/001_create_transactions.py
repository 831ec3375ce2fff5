"""001: create transactions table

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # gen_random_uuid() is built in from PostgreSQL 13
    op.execute("""
        CREATE TABLE transactions (
            id              UUID            PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id         VARCHAR(64)     NOT NULL,
            amount          NUMERIC(14, 2)  NOT NULL,
            description     TEXT            NOT NULL,
            category        TEXT            NOT NULL,
            type            VARCHAR(10)     NOT NULL,
            date            DATE            NOT NULL,
            time            TEXT,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_transactions_amount_gt_0 CHECK (amount > 0),
            CONSTRAINT ck_transactions_type CHECK (type IN ('income', 'expense')),
            CONSTRAINT ck_transactions_description_not_blank CHECK (btrim(description) <> '')
        );
    """)
    # Recent list: WHERE user_id ORDER BY created_at DESC LIMIT n
    op.execute(
        "CREATE INDEX idx_transactions_user_created "
        "ON transactions (user_id, created_at DESC, id DESC);"
    )
    # Monthly summary: WHERE user_id AND date >= :since ORDER BY date
    op.execute("CREATE INDEX idx_transactions_user_date ON transactions (user_id, date, created_at);")
    op.execute("COMMENT ON TABLE transactions IS 'Income/expense records — immutable once created';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS transactions CASCADE;")
