import logging
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ..errors import ValidationError

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def parse_input(schema: Type[SchemaType], data: SchemaType | Mapping[str, Any]) -> SchemaType:
    """
    Accept either an already-validated schema or raw mapping input.

    Raw input failing validation raises the ledger's ValidationError so callers
    outside the HTTP layer see one error type.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except SchemaValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in exc.errors()
        )
        logger.warning("Rejected %s: %s", schema.__name__, problems)
        raise ValidationError(problems) from exc


def update_fields(data: BaseModel, required: tuple[str, ...]) -> dict[str, Any]:
    """Fields the caller actually sent, refusing explicit nulls for required ones."""
    update_data = data.model_dump(exclude_unset=True)
    for field in required:
        if field in update_data and update_data[field] is None:
            raise ValidationError(f"{field}: may not be null")
    return update_data
