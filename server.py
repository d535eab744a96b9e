"""Transaction API: list, create and delete over FastAPI."""

import os
from contextlib import asynccontextmanager
from typing import List, Literal, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from database import init_db
from logging_setup import configure_logging, get_logger
from storage import SqlTransactionStore, TransactionStore

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

logger = get_logger("finance.server")

_default_store: Optional[TransactionStore] = None


def get_store() -> TransactionStore:
    global _default_store
    if _default_store is None:
        _default_store = SqlTransactionStore()
    return _default_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


app = FastAPI(title="Finance Tracker API", version="0.1.0", lifespan=lifespan)


class TransactionIn(BaseModel):
    type: Literal["income", "expense"]
    category: str
    amount: float
    date: str
    description: Optional[str] = ""


class TransactionOut(BaseModel):
    id: int
    type: str
    category: Optional[str] = None
    amount: float
    date: str
    description: Optional[str] = None


class CreatedResponse(BaseModel):
    id: int


class DeletedResponse(BaseModel):
    success: bool


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "storage error"})


@app.get("/api/transactions", response_model=List[TransactionOut])
def list_transactions(store: TransactionStore = Depends(get_store)):
    return [t.to_dict() for t in store.list()]


@app.post("/api/transactions", response_model=CreatedResponse)
def create_transaction(txn: TransactionIn, store: TransactionStore = Depends(get_store)):
    new_id = store.create(txn.type, txn.category, txn.amount, txn.date, txn.description)
    logger.info("created %s transaction %s", txn.type, new_id)
    return CreatedResponse(id=new_id)


@app.delete("/api/transactions/{transaction_id}", response_model=DeletedResponse)
def delete_transaction(transaction_id: str, store: TransactionStore = Depends(get_store)):
    # Any id answers success; one that is not an integer cannot match a row
    try:
        parsed_id = int(transaction_id)
    except ValueError:
        logger.debug("delete ignored non-integer id %r", transaction_id)
        return DeletedResponse(success=True)
    store.delete(parsed_id)
    logger.info("deleted transaction %s", parsed_id)
    return DeletedResponse(success=True)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run("server:app", host=HOST, port=PORT)
