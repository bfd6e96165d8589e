# vehicles/records.py
from dataclasses import dataclass
from typing import Dict, Mapping, Tuple

# -----------------------------
# Status conhecidos
# -----------------------------
# O conjunto não é fechado: qualquer string vinda da fonte é aceita.
STATUS_IN_PRODUCTION = "In Production"
STATUS_COMPLETED = "Completed"
STATUS_QUALITY_CHECK = "Quality Check"
STATUS_AWAITING_PARTS = "Awaiting Parts"
STATUS_SHIPPED = "Shipped"

KNOWN_STATUSES = (
    STATUS_IN_PRODUCTION,
    STATUS_COMPLETED,
    STATUS_QUALITY_CHECK,
    STATUS_AWAITING_PARTS,
    STATUS_SHIPPED,
)

# Chaves do formato de troca (JSON), na ordem em que o front as exibe.
WIRE_FIELDS = (
    "id", "model", "year", "color", "vin", "status", "plant", "assembly_line", "createdAt",
)


@dataclass(frozen=True)
class VehicleRecord:
    """
    Um veículo na linha de produção. Imutável depois de criado.
    """
    id: str
    model: str
    year: int
    color: str
    vin: str
    status: str
    plant: str
    assembly_line: str
    created_at: str  # ISO-8601; não participa de nenhum cálculo


def record_from_dict(data: Mapping) -> VehicleRecord:
    """
    Constrói um VehicleRecord a partir do formato de troca.

    Levanta KeyError se faltar alguma chave e ValueError se o ano não for inteiro.
    """
    year = data["year"]
    if isinstance(year, bool) or not isinstance(year, (int, str)):
        raise ValueError(f"Ano inválido para o veículo {data.get('id')!r}: {year!r}")
    return VehicleRecord(
        id=str(data["id"]),
        model=str(data["model"]),
        year=int(year),
        color=str(data["color"]),
        vin=str(data["vin"]),
        status=str(data["status"]),
        plant=str(data["plant"]),
        assembly_line=str(data["assembly_line"]),
        created_at=str(data["createdAt"]),
    )


def record_to_dict(record: VehicleRecord) -> Dict:
    """
    Serializa um registro para o front (mesmas chaves de `record_from_dict`).
    """
    return {
        "id": record.id,
        "model": record.model,
        "year": record.year,
        "color": record.color,
        "vin": record.vin,
        "status": record.status,
        "plant": record.plant,
        "assembly_line": record.assembly_line,
        "createdAt": record.created_at,
    }


# -----------------------------
# Dados de exemplo (fonte estática)
# -----------------------------
SAMPLE_VEHICLES: Tuple[VehicleRecord, ...] = (
    VehicleRecord(
        id="V001", model="Camry", year=2024, color="White", vin="JT12345XYZ67890",
        status=STATUS_IN_PRODUCTION, plant="Toyota Plant Aichi", assembly_line="Line 3",
        created_at="2025-03-27T08:00:00Z",
    ),
    VehicleRecord(
        id="V002", model="Corolla", year=2024, color="Blue", vin="JT67890XYZ12345",
        status=STATUS_COMPLETED, plant="Toyota Plant Kentucky", assembly_line="Line 2",
        created_at="2025-03-26T10:30:00Z",
    ),
    VehicleRecord(
        id="V003", model="RAV4", year=2025, color="Red", vin="JT11122ABC33344",
        status=STATUS_QUALITY_CHECK, plant="Toyota Plant Texas", assembly_line="Line 1",
        created_at="2025-03-25T14:20:00Z",
    ),
    VehicleRecord(
        id="V004", model="Highlander", year=2025, color="Black", vin="JT55566DEF77788",
        status=STATUS_IN_PRODUCTION, plant="Toyota Plant Aichi", assembly_line="Line 4",
        created_at="2025-03-27T09:15:00Z",
    ),
    VehicleRecord(
        id="V005", model="Tacoma", year=2024, color="Silver", vin="JT99900GHI11122",
        status=STATUS_AWAITING_PARTS, plant="Toyota Plant Mexico", assembly_line="Line 2",
        created_at="2025-03-24T16:45:00Z",
    ),
    VehicleRecord(
        id="V006", model="Supra", year=2025, color="Yellow", vin="JT22233JKL44455",
        status=STATUS_COMPLETED, plant="Toyota Plant Japan", assembly_line="Line 5",
        created_at="2025-03-22T12:10:00Z",
    ),
    VehicleRecord(
        id="V007", model="Land Cruiser", year=2024, color="Green", vin="JT88877MNO66699",
        status=STATUS_SHIPPED, plant="Toyota Plant South Africa", assembly_line="Line 3",
        created_at="2025-03-21T18:30:00Z",
    ),
)
