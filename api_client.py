"""
HTTP client for the transaction API and the client-side ledger state.

Every request failure is logged and swallowed: callers get ``None`` or
``False`` back and keep whatever they were showing before.
"""

import os
from typing import List, Optional

import httpx
from dotenv import load_dotenv

from dashboard import Summary, summarize
from logging_setup import get_logger
from storage import TransactionRecord

load_dotenv()

API_URL = os.getenv("FINANCE_API_URL", "http://localhost:3000")

logger = get_logger("finance.api_client")


class FinanceClient:
    def __init__(self, base_url: str = API_URL, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client(base_url=self.base_url, timeout=None)

    def close(self):
        self.http.close()

    def fetch_transactions(self) -> Optional[List[TransactionRecord]]:
        try:
            res = self.http.get("/api/transactions")
            res.raise_for_status()
            return [TransactionRecord.from_dict(item) for item in res.json()]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.error("Error fetching transactions: %s", exc)
            return None

    def add_transaction(self, type: str, category: str, amount: float, date: str, description: str = "") -> Optional[int]:
        payload = {
            "type": type,
            "category": category,
            "amount": amount,
            "date": date,
            "description": description,
        }
        try:
            res = self.http.post("/api/transactions", json=payload)
            res.raise_for_status()
            return int(res.json()["id"])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.error("Error adding transaction: %s", exc)
            return None

    def delete_transaction(self, transaction_id: int) -> bool:
        try:
            res = self.http.delete(f"/api/transactions/{transaction_id}")
            res.raise_for_status()
            return True
        except httpx.HTTPError as exc:
            logger.error("Error deleting transaction: %s", exc)
            return False


class LedgerState:
    """
    What the dashboard shows: the last successfully fetched list.

    The list is only replaced by a full re-fetch, which runs at load and
    after every mutation.
    """

    def __init__(self, client: FinanceClient):
        self.client = client
        self.transactions: List[TransactionRecord] = []
        self.loaded = False

    def refresh(self) -> bool:
        fetched = self.client.fetch_transactions()
        self.loaded = True
        if fetched is None:
            return False
        self.transactions = fetched
        return True

    def add(self, type: str, category: str, amount: Optional[float], date: str, description: str = "") -> Optional[int]:
        if not category or amount is None or not date:
            logger.debug("add skipped: missing required field")
            return None
        new_id = self.client.add_transaction(type, category, amount, date, description)
        if new_id is not None:
            self.refresh()
        return new_id

    def remove(self, transaction_id: int) -> None:
        self.client.delete_transaction(transaction_id)
        self.refresh()

    @property
    def summary(self) -> Summary:
        return summarize(self.transactions)
