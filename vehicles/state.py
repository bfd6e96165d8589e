# vehicles/state.py
"""
Estado da view do dashboard como variante explícita:

    Loading  ->  Ready(records)
             ->  Failed(reason)

A carga acontece uma única vez; não há retry nem volta para Loading.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from .data_sources import VehicleDataSource
from .panels import TABLE_COLUMNS, build_chart_panels, build_summary_cards, build_table_rows
from .records import VehicleRecord, record_to_dict
from .summary import summarize

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Failed to load vehicle data"
LOADING_MESSAGE = "Loading dashboard..."


@dataclass(frozen=True)
class Loading:
    name = "loading"


@dataclass(frozen=True)
class Ready:
    records: Tuple[VehicleRecord, ...]
    name = "ready"


@dataclass(frozen=True)
class Failed:
    reason: str
    name = "error"


DashboardState = Union[Loading, Ready, Failed]


async def load_dashboard_state(source: VehicleDataSource) -> Union[Ready, Failed]:
    """
    Aguarda a fonte uma vez e resolve o estado final.

    Qualquer erro da fonte (DataLoadFailure ou outro) vira Failed com a
    mensagem fixa; a causa vai apenas para o log.
    """
    try:
        records = await source.fetch()
    except Exception:
        logger.exception("Falha ao carregar dados de veículos de %s", type(source).__name__)
        return Failed(reason=LOAD_ERROR_MESSAGE)
    return Ready(records=tuple(records))


def dashboard_payload(state: DashboardState) -> Dict:
    """
    Serializa o estado para o front. Agregados e resumo são recalculados
    a cada chamada a partir dos registros.
    """
    if isinstance(state, Loading):
        return {"state": state.name, "message": LOADING_MESSAGE}
    if isinstance(state, Failed):
        return {"state": state.name, "error": state.reason}

    records = state.records
    summary = summarize(records)
    return {
        "state": state.name,
        "charts": [panel.to_dict() for panel in build_chart_panels(records)],
        "table": {
            "columns": [label for _, label in TABLE_COLUMNS],
            "rows": build_table_rows(records),
        },
        "summary": {
            "total": summary.total,
            "completed_or_shipped": summary.completed_or_shipped,
            "in_progress": summary.in_progress,
            "cards": [card.to_dict() for card in build_summary_cards(summary)],
        },
        "records": [record_to_dict(v) for v in records],
    }
