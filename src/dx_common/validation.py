"""Shared validation helpers: pydantic parsing mapped onto SchemaViolation.

Every check raises on the first failure. A caller never receives a
partially validated record.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.dx_common.datetime_utils import parse_timestamp
from src.dx_common.errors import SchemaViolation, UnknownEnumValue

M = TypeVar("M", bound=BaseModel)

# on-chain ids and amounts are u64; coin decimals are i16
U64_MAX = 2**64 - 1
I16_MAX = 2**15 - 1

_QUOTED = re.compile(r"'([^']*)'")


def field_path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def violation_from_error(exc: ValidationError, prefix: str = "") -> SchemaViolation:
    """Map the first pydantic error onto a SchemaViolation with a dotted field path."""
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    field = field_path(prefix, loc) if loc else (prefix or "record")
    err_type = err["type"]

    if err_type == "literal_error":
        expected = err.get("ctx", {}).get("expected", "")
        return UnknownEnumValue(field, err.get("input"), _QUOTED.findall(str(expected)))
    if err_type == "missing":
        return SchemaViolation(field, "missing")
    if err_type.endswith("_type") or err_type.endswith("_parsing"):
        return SchemaViolation(field, "invalid_type", err["msg"])
    return SchemaViolation(field, err_type, err["msg"])


def parse_record(model: type[M], record: M | Mapping[str, Any], prefix: str = "") -> M:
    """Structurally parse a raw record into `model`, or raise SchemaViolation."""
    if isinstance(record, model):
        return record
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        raise violation_from_error(exc, prefix) from exc


def require_non_empty(value: str, field: str) -> None:
    if not value.strip():
        raise SchemaViolation(field, "empty")


def require_positive(value: int, field: str) -> None:
    if value <= 0:
        raise SchemaViolation(field, "must_be_positive", f"got {value}")


def require_non_negative(value: int, field: str) -> None:
    if value < 0:
        raise SchemaViolation(field, "must_be_non_negative", f"got {value}")


def require_at_most(value: int, maximum: int, field: str) -> None:
    if value > maximum:
        raise SchemaViolation(field, "out_of_range", f"got {value}, max {maximum}")


def require_timestamp(value: str, field: str) -> datetime:
    try:
        return parse_timestamp(value)
    except (ValueError, OverflowError) as exc:
        raise SchemaViolation(field, "invalid_timestamp", f"got {value!r}") from exc
