"""
Transaction storage backends.

The API depends only on the ``TransactionStore`` interface. The default
backend is SQL (SQLite locally, any SQLAlchemy URL via ``DATABASE_URL``);
the in-memory backend keeps the same ordering and id rules without a
database.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session, sessionmaker

from database import SessionLocal, Transaction, init_db, make_engine
from logging_setup import get_logger

logger = get_logger("finance.storage")


@dataclass(frozen=True)
class TransactionRecord:
    id: int
    type: str
    category: Optional[str]
    amount: float
    date: str
    description: Optional[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransactionRecord":
        return cls(
            id=int(data["id"]),
            type=data["type"],
            category=data.get("category"),
            amount=float(data.get("amount") or 0.0),
            date=data.get("date") or "",
            description=data.get("description"),
        )

    @classmethod
    def from_row(cls, row: Transaction) -> "TransactionRecord":
        return cls(
            id=row.id,
            type=row.type,
            category=row.category,
            amount=row.amount,
            date=row.date,
            description=row.description,
        )


def _sort_key(record: TransactionRecord):
    return (record.date or "", record.id)


class TransactionStore(ABC):
    """list/create/delete over the transaction collection. No update path."""

    @abstractmethod
    def list(self) -> List[TransactionRecord]:
        """All transactions, newest date first (ties: newest id first)."""

    @abstractmethod
    def create(self, type: str, category: Optional[str], amount: float, date: str, description: Optional[str] = "") -> int:
        """Insert a transaction as given and return its new id."""

    @abstractmethod
    def delete(self, transaction_id: int) -> None:
        """Remove the transaction if it exists. Missing ids are ignored."""


class SqlTransactionStore(TransactionStore):
    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str) -> "SqlTransactionStore":
        engine = make_engine(url)
        init_db(bind=engine)
        return cls(sessionmaker(autocommit=False, autoflush=False, bind=engine))

    def list(self) -> List[TransactionRecord]:
        db: Session = self._session_factory()
        try:
            rows = db.query(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc()).all()
            return [TransactionRecord.from_row(r) for r in rows]
        finally:
            db.close()

    def create(self, type, category, amount, date, description="") -> int:
        db: Session = self._session_factory()
        try:
            txn = Transaction(type=type, category=category, amount=amount, date=date, description=description)
            db.add(txn)
            db.commit()
            logger.debug("created transaction %s (%s %s)", txn.id, type, amount)
            return txn.id
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def delete(self, transaction_id: int) -> None:
        db: Session = self._session_factory()
        try:
            deleted = db.query(Transaction).filter(Transaction.id == transaction_id).delete()
            db.commit()
            logger.debug("delete transaction %s removed %d row(s)", transaction_id, deleted)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


class InMemoryTransactionStore(TransactionStore):
    def __init__(self):
        self._records: Dict[int, TransactionRecord] = {}
        self._ids = itertools.count(1)

    def list(self) -> List[TransactionRecord]:
        return sorted(self._records.values(), key=_sort_key, reverse=True)

    def create(self, type, category, amount, date, description="") -> int:
        new_id = next(self._ids)
        self._records[new_id] = TransactionRecord(
            id=new_id, type=type, category=category, amount=amount, date=date, description=description
        )
        return new_id

    def delete(self, transaction_id: int) -> None:
        self._records.pop(transaction_id, None)
