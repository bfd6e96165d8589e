# vehicles/summary.py
from dataclasses import dataclass
from typing import Sequence

from .records import (
    STATUS_AWAITING_PARTS,
    STATUS_COMPLETED,
    STATUS_IN_PRODUCTION,
    STATUS_QUALITY_CHECK,
    STATUS_SHIPPED,
    VehicleRecord,
)

FINISHED_STATUSES = (STATUS_COMPLETED, STATUS_SHIPPED)
IN_PROGRESS_STATUSES = (STATUS_IN_PRODUCTION, STATUS_QUALITY_CHECK, STATUS_AWAITING_PARTS)


@dataclass(frozen=True)
class ProductionSummary:
    total: int
    completed_or_shipped: int
    in_progress: int


def total(records: Sequence[VehicleRecord]) -> int:
    return len(records)


def completed_or_shipped(records: Sequence[VehicleRecord]) -> int:
    return sum(1 for v in records if v.status in FINISHED_STATUSES)


def in_progress(records: Sequence[VehicleRecord]) -> int:
    return sum(1 for v in records if v.status in IN_PROGRESS_STATUSES)


def summarize(records: Sequence[VehicleRecord]) -> ProductionSummary:
    """
    Números dos cards de resumo.

    Os dois grupos são filtrados de forma independente, por igualdade exata
    (sensível a maiúsculas). Um status fora dos cinco conhecidos entra só no
    total, apesar de aparecer no gráfico de status.
    """
    return ProductionSummary(
        total=total(records),
        completed_or_shipped=completed_or_shipped(records),
        in_progress=in_progress(records),
    )
