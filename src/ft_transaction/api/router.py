"""ft_transaction REST endpoints.

POST /transactions              — create, then invalidate the user's cache entries
GET  /transactions              — most recent transactions of userId (cache-aside)
GET  /transactions/monthly      — income/expense per calendar month (cache-aside)
GET  /transactions/categories   — suggested category labels per type

userId arrives from the identity layer in front of this service, as a body
field (create) or query parameter (reads).
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.database import get_db_session
from src.ft_transaction.application.schemas import (
    CategoriesResponse,
    CreateTransactionRequest,
    MonthlyBucketResponse,
    TransactionResponse,
)
from src.ft_transaction.application.service import TransactionApplicationService

router = APIRouter(prefix="/transactions", tags=["transactions"])

_service = TransactionApplicationService()


def get_transaction_service() -> TransactionApplicationService:
    """FastAPI dependency; tests override it with a service over mocks."""
    return _service


ServiceDep = Annotated[TransactionApplicationService, Depends(get_transaction_service)]
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


@router.post("", response_model=TransactionResponse)
async def create_transaction(
    body: CreateTransactionRequest,
    service: ServiceDep,
    db: SessionDep,
) -> TransactionResponse:
    return await service.create_transaction(db, body)


@router.get("", response_model=list[TransactionResponse])
async def list_recent_transactions(
    service: ServiceDep,
    db: SessionDep,
    user_id: str | None = Query(None, alias="userId"),
) -> list[TransactionResponse]:
    return await service.list_recent_transactions(db, user_id)


@router.get("/monthly", response_model=list[MonthlyBucketResponse])
async def monthly_summary(
    service: ServiceDep,
    db: SessionDep,
    user_id: str | None = Query(None, alias="userId"),
    time_filter: str | None = Query(
        None,
        alias="filter",
        description="today | this-week | this-month | this-year | all-time (default)",
    ),
) -> list[MonthlyBucketResponse]:
    return await service.monthly_summary(db, user_id, time_filter)


@router.get("/categories", response_model=CategoriesResponse)
async def suggested_categories(service: ServiceDep) -> CategoriesResponse:
    return service.suggested_categories()
