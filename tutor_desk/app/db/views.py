"""DDL for the optional precomputed monthly earnings view.

The view is not part of ``Base.metadata``; reads fall back to aggregating paid
payments when it is absent.
"""

from sqlalchemy import text
from sqlalchemy.engine import Engine

MONTHLY_EARNINGS_VIEW = "monthly_earnings"

_MONTH_EXPRESSIONS = {
    "sqlite": "strftime('%Y-%m', paid_at)",
    "postgresql": "to_char(paid_at AT TIME ZONE 'UTC', 'YYYY-MM')",
}


def create_monthly_earnings_view(bind: Engine) -> None:
    month_expr = _MONTH_EXPRESSIONS.get(bind.dialect.name)
    if month_expr is None:
        raise NotImplementedError(f"monthly earnings view is not defined for {bind.dialect.name}")
    ddl = (
        f"CREATE VIEW {MONTHLY_EARNINGS_VIEW} AS "
        f"SELECT tutor_id, {month_expr} AS month, SUM(amount) AS total "
        "FROM payments WHERE status = 'paid' AND paid_at IS NOT NULL "
        f"GROUP BY tutor_id, {month_expr}"
    )
    with bind.begin() as conn:
        conn.execute(text(f"DROP VIEW IF EXISTS {MONTHLY_EARNINGS_VIEW}"))
        conn.execute(text(ddl))


def drop_monthly_earnings_view(bind: Engine) -> None:
    with bind.begin() as conn:
        conn.execute(text(f"DROP VIEW IF EXISTS {MONTHLY_EARNINGS_VIEW}"))
