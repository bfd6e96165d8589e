# vehicles/data_sources.py
"""
Fontes de dados do dashboard.

Toda fonte expõe `async fetch()` devolvendo a lista ordenada de registros.
Qualquer exceção em `fetch()` é tratada pela view como falha de carga, então
trocar a fonte (constante, banco, arquivo) não mexe em mais nada.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from asgiref.sync import sync_to_async
from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import DataLoadFailure
from .records import SAMPLE_VEHICLES, VehicleRecord, record_from_dict

logger = logging.getLogger(__name__)


@runtime_checkable
class VehicleDataSource(Protocol):
    async def fetch(self) -> List[VehicleRecord]:
        ...


class StaticDataSource:
    """
    Lista fixa em memória (por padrão os sete registros de exemplo). Nunca falha.
    """

    def __init__(self, records: Optional[Iterable[VehicleRecord]] = None):
        self._records = tuple(SAMPLE_VEHICLES if records is None else records)

    async def fetch(self) -> List[VehicleRecord]:
        return list(self._records)


class DatabaseDataSource:
    """
    Lê a tabela Vehicle pelo ORM, em ordem de id.
    Erros do banco sobem sem tratamento; quem decide é a view.
    """

    def _load(self) -> List[VehicleRecord]:
        from .models import Vehicle

        return [v.to_record() for v in Vehicle.objects.order_by("id")]

    async def fetch(self) -> List[VehicleRecord]:
        records = await sync_to_async(self._load)()
        logger.debug("Carregados %d veículos do banco", len(records))
        return records


class JsonFileDataSource:
    """
    Lê um array JSON de registros no formato de troca (mesmas chaves da API).
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> List[VehicleRecord]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DataLoadFailure(f"Não foi possível ler {self.path}: {exc}") from exc

        if not isinstance(raw, list):
            raise DataLoadFailure(f"{self.path} não contém uma lista de veículos")

        try:
            return [record_from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            raise DataLoadFailure(f"Registro inválido em {self.path}: {exc!r}") from exc

    async def fetch(self) -> List[VehicleRecord]:
        records = await sync_to_async(self._load, thread_sensitive=False)()
        logger.debug("Carregados %d veículos de %s", len(records), self.path)
        return records


def get_data_source() -> VehicleDataSource:
    """
    Instancia a fonte configurada em settings.VEHICLE_DATA_SOURCE,
    passando settings.VEHICLE_DATA_SOURCE_OPTIONS como kwargs.
    """
    path = getattr(settings, "VEHICLE_DATA_SOURCE", "vehicles.data_sources.StaticDataSource")
    options: Dict = getattr(settings, "VEHICLE_DATA_SOURCE_OPTIONS", None) or {}
    source_cls = import_string(path)
    return source_cls(**options)
