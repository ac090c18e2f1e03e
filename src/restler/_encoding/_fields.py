import dataclasses
import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from ..models.errors import EncodingError


def iter_fields(obj: Any) -> list[tuple[str, Any]]:
    """Top-level ``(name, value)`` pairs of an encodable object, in declaration order.

    Pydantic models use field aliases when declared. Nested values are
    returned untouched.

    Raises:
        EncodingError: If ``obj`` is not a pydantic model, a dataclass
            instance or a mapping.
    """
    if isinstance(obj, BaseModel):
        return [
            (info.alias or name, getattr(obj, name))
            for name, info in type(obj).model_fields.items()
        ]
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(field.name, getattr(obj, field.name)) for field in dataclasses.fields(obj)]
    if isinstance(obj, Mapping):
        return [(str(key), value) for key, value in obj.items()]
    raise EncodingError(
        f"Cannot encode object of type {type(obj).__name__}; "
        "expected a pydantic model, a dataclass or a mapping"
    )


def is_structured(value: Any) -> bool:
    return (
        isinstance(value, (BaseModel, Mapping))
        or (dataclasses.is_dataclass(value) and not isinstance(value, type))
    )


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def render_scalar(name: str, value: Any) -> str:
    """String form of a scalar field value as sent in queries and form parts."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return render_scalar(name, value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Field '{name}' holds a non-finite number: {value}")
        return repr(value)
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    raise EncodingError(
        f"Field '{name}' has unsupported type {type(value).__name__}"
    )
