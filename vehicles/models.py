# vehicles/models.py
from datetime import timezone as dt_timezone

from django.db import models
from django.utils import timezone

from .records import VehicleRecord


class Vehicle(models.Model):
    id = models.CharField("ID", max_length=16, primary_key=True)     # ex: V001
    model = models.CharField("Modelo", max_length=80)
    year = models.PositiveIntegerField("Ano")
    color = models.CharField("Cor", max_length=30)
    vin = models.CharField("VIN/Chassi", max_length=32, unique=True)
    status = models.CharField("Status", max_length=40)                 # ex: In Production, Completed, Shipped
    plant = models.CharField("Fábrica", max_length=80)                 # ex: Toyota Plant Aichi
    assembly_line = models.CharField("Linha de montagem", max_length=40)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.id} {self.model} {self.year}"

    def to_record(self) -> VehicleRecord:
        """
        Converte a linha do banco no registro imutável usado pelo dashboard.
        """
        created = self.created_at
        if timezone.is_aware(created):
            created = created.astimezone(dt_timezone.utc).replace(tzinfo=None)
        return VehicleRecord(
            id=self.id,
            model=self.model,
            year=self.year,
            color=self.color,
            vin=self.vin,
            status=self.status,
            plant=self.plant,
            assembly_line=self.assembly_line,
            created_at=created.isoformat(timespec="seconds") + "Z",
        )
