# vehicles/aggregation.py
"""
Agrupamentos usados pelos gráficos do dashboard.

Funções puras: mesma entrada, mesma saída, sem estado escondido.
"""
import math
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, List, Sequence

from .records import VehicleRecord

PLANT_PREFIX = "Toyota Plant "

# Paleta fixa dos gráficos de pizza; o índice do bucket escolhe a cor.
PALETTE = ("#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8", "#83a6ed", "#8dd1e1")


@dataclass(frozen=True)
class AggregateBucket:
    name: str
    value: int


def group_count(
    records: Iterable[VehicleRecord],
    field_of: Callable[[VehicleRecord], Hashable],
    name_of: Callable[[Hashable], str] = str,
) -> List[AggregateBucket]:
    """
    Conta os registros por valor de um campo, numa única passada.

    A ordem dos buckets é a da primeira ocorrência de cada valor na entrada
    (dict preserva ordem de inserção), não alfabética nem numérica.
    `name_of` converte a chave bruta no nome exibido.
    """
    counts: Dict[Hashable, int] = {}
    for record in records:
        key = field_of(record)
        counts[key] = counts.get(key, 0) + 1
    return [AggregateBucket(name=name_of(key), value=count) for key, count in counts.items()]


def strip_plant_prefix(plant: str) -> str:
    """
    "Toyota Plant Aichi" -> "Aichi". Só remove o prefixo se ele estiver no início.
    """
    if plant.startswith(PLANT_PREFIX):
        return plant[len(PLANT_PREFIX):]
    return plant


# -----------------------------
# Séries de cada gráfico
# -----------------------------
def prepare_status_data(records: Iterable[VehicleRecord]) -> List[AggregateBucket]:
    return group_count(records, lambda v: v.status)


def prepare_plant_data(records: Iterable[VehicleRecord]) -> List[AggregateBucket]:
    # Agrupa pelo nome completo e só remove o prefixo na exibição.
    return group_count(records, lambda v: v.plant, name_of=strip_plant_prefix)


def prepare_year_data(records: Iterable[VehicleRecord]) -> List[AggregateBucket]:
    return group_count(records, lambda v: v.year)


def prepare_color_data(records: Iterable[VehicleRecord]) -> List[AggregateBucket]:
    return group_count(records, lambda v: v.color)


# -----------------------------
# Rótulos e cores
# -----------------------------
def percent_of(value: int, total: int) -> int:
    """
    Percentual inteiro, arredondando .5 para cima (12.5 -> 13).
    """
    if total <= 0:
        return 0
    return math.floor(100 * value / total + 0.5)


def pie_label(bucket: AggregateBucket, total: int) -> str:
    return f"{bucket.name}: {percent_of(bucket.value, total)}%"


def pie_labels(buckets: Sequence[AggregateBucket]) -> List[str]:
    """
    Rótulos "<nome>: <pct>%" em relação à soma dos buckets do próprio gráfico.
    """
    total = sum(b.value for b in buckets)
    return [pie_label(b, total) for b in buckets]


def color_for(index: int, palette: Sequence[str] = PALETTE) -> str:
    """
    Cor do bucket na posição `index`; volta ao início da paleta quando acaba.
    """
    return palette[index % len(palette)]
