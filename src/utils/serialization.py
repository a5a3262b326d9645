"""Conversion of result dataclasses into JSON-safe structures."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


def to_jsonable(value):
    """Return a structure made of dicts, lists, strings, and numbers.

    Decimals are rendered as strings to keep their exact value, dates and
    datetimes as ISO strings.

    Args:
        value: Dataclass instance, container, or scalar.

    Returns:
        A value accepted by ``json.dumps``.
    """
    if is_dataclass(value) and not isinstance(value, type):
        payload = {
            item.name: to_jsonable(getattr(value, item.name))
            for item in fields(value)
        }
        for name in getattr(value, "__computed_fields__", ()):
            payload[name] = to_jsonable(getattr(value, name))
        return payload
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


__all__ = ["to_jsonable"]
