from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated
from pydantic import AfterValidator, Field


def _naive_utc(value: datetime | None) -> datetime | None:
    """Store timestamps as naive UTC; SQLite keeps no offset."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Money in two-place decimals; numeric or string input is coerced
PositiveMoney = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]
NonNegativeMoney = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]

Timestamp = Annotated[datetime, AfterValidator(_naive_utc)]

Month = Annotated[int, Field(ge=1, le=12)]
Year = Annotated[int, Field(ge=1900, le=9999)]
