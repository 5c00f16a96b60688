class LedgerError(Exception):
    """Base class for errors raised by the ledger services."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(LedgerError):
    """Input rejected before any write took place."""

    status_code = 400


class DuplicateBudgetError(ValidationError):
    """A budget already exists for the same category and month."""

    status_code = 409


class NotFoundError(LedgerError):
    """No record with the requested id."""

    status_code = 404

    def __init__(self, record: str, record_id: int):
        super().__init__(f"{record} not found")
        self.record = record
        self.record_id = record_id
