"""Batch ingestion: validate + normalize each record independently.

A rejected record is logged and reported back; it never aborts the batch
and never enters application state.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from src.dx_common.errors import AppError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Rejection:
    index: int
    error: AppError


@dataclass
class IngestResult(Generic[T]):
    accepted: list[T] = field(default_factory=list)
    rejected: list[Rejection] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected


def ingest_records(
    records: Iterable[Any],
    parse: Callable[[Any], T],
    kind: str,
) -> IngestResult[T]:
    """Run `parse` over every record, splitting results into accepted / rejected.

    Only AppError is caught: anything else is a bug and propagates.
    """
    result: IngestResult[T] = IngestResult()
    for index, record in enumerate(records):
        try:
            result.accepted.append(parse(record))
        except AppError as exc:
            logger.warning("Rejected %s record #%d: [%d] %s", kind, index, exc.code, exc.message)
            result.rejected.append(Rejection(index=index, error=exc))
    logger.debug(
        "Ingested %s batch: accepted=%d rejected=%d",
        kind, len(result.accepted), len(result.rejected),
    )
    return result
