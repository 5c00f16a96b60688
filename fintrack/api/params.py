from dataclasses import dataclass
from fastapi import Query

from ..services import current_period


@dataclass
class Period:
    month: int
    year: int


def period_params(
    month: int | None = Query(None, ge=1, le=12),
    year: int | None = Query(None, ge=1900, le=9999),
) -> Period:
    """Month/year query parameters, each defaulting to the current calendar month."""
    current_month, current_year = current_period()
    return Period(month=month or current_month, year=year or current_year)
