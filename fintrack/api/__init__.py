from fastapi import APIRouter

from .transactions import router as transactions_router
from .goals import router as goals_router
from .budgets import router as budgets_router
from .analytics import router as analytics_router
from .categories import router as categories_router

api_router = APIRouter()

api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(goals_router, prefix="/goals", tags=["goals"])
api_router.include_router(budgets_router, prefix="/budgets", tags=["budgets"])
api_router.include_router(analytics_router, prefix="/analytics", tags=["analytics"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
