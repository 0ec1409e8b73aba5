from .errors import ValidationError
from .models import TransactionPayload

REQUIRED_FIELDS = ("type", "category", "amount", "date")


def is_missing(value) -> bool:
    return value is None or value == ""


def require_fields(payload: TransactionPayload) -> dict:
    """Return the payload as repository keyword arguments.

    Only absent, null or empty-string values are rejected; ``amount`` of 0
    and whitespace-only strings count as present.
    """
    missing = [name for name in REQUIRED_FIELDS if is_missing(getattr(payload, name))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    return {
        "txn_type": payload.type,
        "category": payload.category,
        "amount": payload.amount,
        "date_str": payload.date,
        "description": payload.description,
    }
