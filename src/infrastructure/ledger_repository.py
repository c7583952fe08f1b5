"""SQLAlchemy-backed repository for the ledger record store."""

from datetime import date, datetime

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    LedgerSnapshot,
)
from src.domain.models import (
    Counterparty,
    LoanTransaction,
    SpendRecord,
    SupplierTransaction,
)
from src.infrastructure.settings import DEFAULT_SNAPSHOT_ISOLATION

_SUPPLIERS_QUERY = text(
    """
    SELECT id, user_id AS owner_id, name
    FROM suppliers
    WHERE user_id = :owner_id
    ORDER BY created_at, id
    """
)

_PERSONS_QUERY = text(
    """
    SELECT id, user_id AS owner_id, name
    FROM persons
    WHERE user_id = :owner_id
    ORDER BY created_at, id
    """
)

_SUPPLIER_TRANSACTIONS_QUERY = text(
    """
    SELECT id, user_id AS owner_id, supplier_id, type, amount, description,
           due_date, is_paid, created_at
    FROM transactions
    WHERE user_id = :owner_id
    ORDER BY created_at, id
    """
)

_LOAN_TRANSACTIONS_QUERY = text(
    """
    SELECT id, user_id AS owner_id, person_id, type, amount, description,
           due_date, created_at
    FROM loan_transactions
    WHERE user_id = :owner_id
    ORDER BY created_at, id
    """
)

_SPENDS_QUERY = text(
    """
    SELECT id, user_id AS owner_id, category, amount, date, description,
           created_at
    FROM spends
    WHERE user_id = :owner_id
    ORDER BY date, created_at, id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading an owner's ledger inside a single transaction."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        isolation_level: str = DEFAULT_SNAPSHOT_ISOLATION,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            isolation_level: Isolation level used for snapshot reads.
        """
        self._db_port = db_port
        self._isolation_level = isolation_level

    def fetch_snapshot(self, owner_id: str) -> LedgerSnapshot:
        params = {"owner_id": owner_id}
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            conn = conn.execution_options(
                isolation_level=self._isolation_level
            )
            with conn.begin():
                suppliers = conn.execute(_SUPPLIERS_QUERY, params).all()
                persons = conn.execute(_PERSONS_QUERY, params).all()
                supplier_rows = conn.execute(
                    _SUPPLIER_TRANSACTIONS_QUERY,
                    params,
                ).all()
                loan_rows = conn.execute(
                    _LOAN_TRANSACTIONS_QUERY,
                    params,
                ).all()
                spend_rows = conn.execute(_SPENDS_QUERY, params).all()

        return LedgerSnapshot(
            owner_id=owner_id,
            suppliers=tuple(self._to_counterparty(row) for row in suppliers),
            persons=tuple(self._to_counterparty(row) for row in persons),
            supplier_transactions=tuple(
                SupplierTransaction(
                    id=str(row.id),
                    owner_id=str(row.owner_id),
                    counterparty_id=str(row.supplier_id),
                    kind=row.type,
                    amount=row.amount,
                    created_at=self._to_datetime(row.created_at),
                    due_date=self._to_date(row.due_date),
                    settled=bool(row.is_paid),
                    description=row.description or "",
                )
                for row in supplier_rows
            ),
            loan_transactions=tuple(
                LoanTransaction(
                    id=str(row.id),
                    owner_id=str(row.owner_id),
                    person_id=str(row.person_id),
                    kind=row.type,
                    amount=row.amount,
                    created_at=self._to_datetime(row.created_at),
                    due_date=self._to_date(row.due_date),
                    description=row.description or "",
                )
                for row in loan_rows
            ),
            spends=tuple(
                SpendRecord(
                    id=str(row.id),
                    owner_id=str(row.owner_id),
                    category=row.category,
                    amount=row.amount,
                    date=self._to_date(row.date),
                    created_at=self._to_datetime(row.created_at),
                    description=row.description or "",
                )
                for row in spend_rows
            ),
        )

    @staticmethod
    def _to_counterparty(row) -> Counterparty:
        return Counterparty(
            id=str(row.id),
            owner_id=str(row.owner_id),
            name=row.name,
        )

    @staticmethod
    def _to_datetime(value) -> datetime | None:
        """Normalize driver timestamps, which may arrive as ISO strings."""
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))

    @staticmethod
    def _to_date(value) -> date | None:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyLedgerRepository"]
