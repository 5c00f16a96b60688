from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import Category, TransactionKind
from ..schemas import TransactionCreate, TransactionUpdate, TransactionResponse
from ..services import TransactionService

router = APIRouter()


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=1900, le=9999),
    type: TransactionKind | None = Query(None),
    category: Category | None = Query(None),
    search: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db)
):
    """
    Get transactions, newest first.

    If month and/or year are provided, returns transactions for that month only.
    type, category and search narrow the list further; search matches the
    description or category id, ignoring case.
    """
    return TransactionService(db).list_transactions(
        month=month, year=year, kind=type, category=category, search=search
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Get a single transaction by ID."""
    return TransactionService(db).get_transaction(transaction_id)


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(transaction: TransactionCreate, db: Session = Depends(get_db)):
    """Create a new transaction."""
    return TransactionService(db).create_transaction(transaction)


@router.api_route("/{transaction_id}", methods=["PATCH", "PUT"], response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    transaction: TransactionUpdate,
    db: Session = Depends(get_db)
):
    """Update a transaction. Fields left out keep their stored values."""
    return TransactionService(db).update_transaction(transaction_id, transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    """Delete a transaction."""
    TransactionService(db).delete_transaction(transaction_id)
    return None
