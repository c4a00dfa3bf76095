# app/core/dsa/transaction_dsa.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import case, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.errors import StorageError
from app.db.models.transaction_model import MUTABLE_FIELDS, metadata, transactions

logger = logging.getLogger(__name__)

# SQLite INTEGER PRIMARY KEY is a signed 64-bit value
MAX_ROW_ID = 2**63 - 1


def parse_row_id(raw: Any) -> Optional[int]:
    """
    Turn a path id into a row id. Anything that cannot name a row (not an
    integer, or outside the 64-bit range) gives None, which matches nothing.
    """
    try:
        row_id = int(raw)
    except (TypeError, ValueError):
        return None

    if not -MAX_ROW_ID - 1 <= row_id <= MAX_ROW_ID:
        return None
    return row_id


class TransactionDSA:
    def __init__(self, engine: AsyncEngine):
        """
        engine is a SQLAlchemy async engine
        e.g. engine = connect_to_sqlite(settings)

        Every method issues a single statement. Driver faults are logged and
        re-raised as StorageError; nothing is retried.
        """
        self.engine = engine

    # create the transactions table if missing (run at startup)
    async def initialize(self) -> None:
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
        except SQLAlchemyError as e:
            logger.exception("Schema initialization failed")
            raise StorageError() from e

    async def create(self, fields: Dict[str, Any]) -> int:
        values = {name: fields.get(name) for name in MUTABLE_FIELDS}
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(insert(transactions).values(**values))
                return result.inserted_primary_key[0]
        except SQLAlchemyError as e:
            logger.exception("Failed to insert transaction")
            raise StorageError() from e

    async def list_all(self) -> List[Dict[str, Any]]:
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(select(transactions).order_by(transactions.c.id))
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as e:
            logger.exception("Failed to list transactions")
            raise StorageError() from e

    async def get_by_id(self, transaction_id: Any) -> Optional[Dict[str, Any]]:
        row_id = parse_row_id(transaction_id)
        if row_id is None:
            return None

        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(
                    select(transactions).where(transactions.c.id == row_id)
                )
                row = result.mappings().first()
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch transaction %s", transaction_id)
            raise StorageError() from e

        return dict(row) if row is not None else None

    # partial update: a column keeps its value unless a non-null one is given.
    # Runs unconditionally, a missing id is not reported.
    async def update_by_id(self, transaction_id: Any, fields: Dict[str, Any]) -> None:
        row_id = parse_row_id(transaction_id)
        if row_id is None:
            return

        values = {
            name: func.coalesce(fields.get(name), transactions.c[name])
            for name in MUTABLE_FIELDS
        }
        try:
            async with self.engine.begin() as conn:
                await conn.execute(
                    update(transactions)
                    .where(transactions.c.id == row_id)
                    .values(**values)
                )
        except SQLAlchemyError as e:
            logger.exception("Failed to update transaction %s", transaction_id)
            raise StorageError() from e

    async def delete_by_id(self, transaction_id: Any) -> bool:
        row_id = parse_row_id(transaction_id)
        if row_id is None:
            return False

        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    delete(transactions).where(transactions.c.id == row_id)
                )
                deleted = result.rowcount
        except SQLAlchemyError as e:
            logger.exception("Failed to delete transaction %s", transaction_id)
            raise StorageError() from e

        return deleted > 0

    # income / expense totals over the whole table, 0 when there are no rows
    async def summarize(self) -> Dict[str, float]:
        def total_for(txn_type: str):
            return func.coalesce(
                func.sum(
                    case((transactions.c.type == txn_type, transactions.c.amount), else_=0)
                ),
                0,
            )

        stmt = select(
            total_for("income").label("totalIncome"),
            total_for("expense").label("totalExpenses"),
        )
        try:
            async with self.engine.connect() as conn:
                row = (await conn.execute(stmt)).mappings().one()
        except SQLAlchemyError as e:
            logger.exception("Failed to summarize transactions")
            raise StorageError() from e

        total_income = row["totalIncome"]
        total_expenses = row["totalExpenses"]
        return {
            "totalIncome": total_income,
            "totalExpenses": total_expenses,
            "balance": total_income - total_expenses,
        }
