# vehicles/panels.py
"""
Modelos de renderização dos widgets do dashboard (gráficos, tabela, cards).

Cada widget é função pura da sua entrada: nenhum guarda estado próprio e
todos são reconstruídos sempre que os registros mudam.
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .aggregation import (
    AggregateBucket,
    color_for,
    pie_labels,
    prepare_color_data,
    prepare_plant_data,
    prepare_status_data,
    prepare_year_data,
)
from .records import VehicleRecord
from .summary import ProductionSummary

PIE = "pie"
BAR = "bar"

DEFAULT_BAR_FILL = "#8884d8"
YEAR_BAR_FILL = "#82ca9d"

# (atributo do registro, cabeçalho da coluna)
TABLE_COLUMNS: Tuple[Tuple[str, str], ...] = (
    ("id", "ID"),
    ("model", "Model"),
    ("year", "Year"),
    ("color", "Color"),
    ("status", "Status"),
    ("plant", "Plant"),
    ("assembly_line", "Assembly Line"),
)


def vehicles_tooltip(value: int) -> str:
    return f"{value} vehicles"


@dataclass(frozen=True)
class ChartPanel:
    key: str
    title: str
    kind: str
    buckets: Tuple[AggregateBucket, ...]
    layout: str = "horizontal"   # "vertical" = barras deitadas, categorias no eixo Y
    fill: str = DEFAULT_BAR_FILL

    def colors(self) -> List[str]:
        if self.kind == PIE:
            return [color_for(i) for i in range(len(self.buckets))]
        return [self.fill] * len(self.buckets)

    def to_dict(self) -> Dict:
        data = {
            "key": self.key,
            "title": self.title,
            "kind": self.kind,
            "layout": self.layout,
            "labels": [b.name for b in self.buckets],
            "values": [b.value for b in self.buckets],
            "colors": self.colors(),
            "tooltips": [vehicles_tooltip(b.value) for b in self.buckets],
        }
        if self.kind == PIE:
            data["slice_labels"] = pie_labels(self.buckets)
        return data


def build_chart_panels(records: Sequence[VehicleRecord]) -> List[ChartPanel]:
    """
    Os quatro painéis, na ordem da tela: status (pizza), fábrica (barras
    horizontais), ano-modelo (barras) e cor (pizza).
    """
    return [
        ChartPanel(
            key="status",
            title="Production Status",
            kind=PIE,
            buckets=tuple(prepare_status_data(records)),
        ),
        ChartPanel(
            key="plant",
            title="Vehicles by Plant",
            kind=BAR,
            buckets=tuple(prepare_plant_data(records)),
            layout="vertical",
        ),
        ChartPanel(
            key="year",
            title="Vehicles by Model Year",
            kind=BAR,
            buckets=tuple(prepare_year_data(records)),
            fill=YEAR_BAR_FILL,
        ),
        ChartPanel(
            key="color",
            title="Vehicle Colors",
            kind=PIE,
            buckets=tuple(prepare_color_data(records)),
        ),
    ]


def build_table_rows(records: Sequence[VehicleRecord]) -> List[List]:
    """
    Uma linha por registro, na ordem da fonte; sem paginação, filtro ou ordenação.
    """
    return [[getattr(v, attr) for attr, _ in TABLE_COLUMNS] for v in records]


@dataclass(frozen=True)
class SummaryCard:
    title: str
    value: int
    tone: str

    def to_dict(self) -> Dict:
        return {"title": self.title, "value": self.value, "tone": self.tone}


def build_summary_cards(summary: ProductionSummary) -> List[SummaryCard]:
    return [
        SummaryCard("Total Vehicles", summary.total, "blue"),
        SummaryCard("Completed/Shipped", summary.completed_or_shipped, "green"),
        SummaryCard("In Progress", summary.in_progress, "yellow"),
    ]
