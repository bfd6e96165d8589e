# vehicles/management/commands/seed_vehicles.py
from django.core.management.base import BaseCommand
from django.db import transaction
from datetime import datetime, timezone
from faker import Faker
import random

from vehicles.models import Vehicle
from vehicles.records import KNOWN_STATUSES, SAMPLE_VEHICLES

MODELS = ["Camry", "Corolla", "RAV4", "Highlander", "Tacoma", "Supra", "Land Cruiser", "Prius", "Tundra"]
PLANTS = [
    "Toyota Plant Aichi",
    "Toyota Plant Kentucky",
    "Toyota Plant Texas",
    "Toyota Plant Mexico",
    "Toyota Plant Japan",
    "Toyota Plant South Africa",
]
COLORS = ["White", "Blue", "Red", "Black", "Silver", "Yellow", "Green", "Gray"]
LINES = [f"Line {n}" for n in range(1, 6)]

# VIN real não usa I, O, Q. Vamos gerar 17 chars sem esses.
_VIN_CHARS = "ABCDEFGHJKLMNPRSTUVWXYZ0123456789"

def unique_vin():
    return "".join(random.choices(_VIN_CHARS, k=17))

def next_vehicle_id(taken):
    n = len(taken) + 1
    while f"V{n:03d}" in taken:
        n += 1
    return f"V{n:03d}"

class Command(BaseCommand):
    help = "Popula o banco com veículos de produção (fake ou os 7 de exemplo)."

    def add_arguments(self, parser):
        parser.add_argument("--min", "--n", dest="n", type=int, default=50,
                            help="Quantidade de veículos fake a criar (alias: --min, --n)")
        parser.add_argument("--sample", action="store_true",
                            help="Carrega os 7 registros de exemplo em vez de dados fake")
        parser.add_argument("--clear", action="store_true",
                            help="Apaga os veículos existentes antes de popular")

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Vehicle.objects.all().delete()
            self.stdout.write(f"Veículos removidos: {deleted}")

        if options["sample"]:
            created = self._load_sample()
        else:
            created = self._load_fake(options["n"])

        self.stdout.write(self.style.SUCCESS(f"Veículos criados: {created}"))

    def _load_sample(self):
        created = 0
        for record in SAMPLE_VEHICLES:
            _, was_created = Vehicle.objects.update_or_create(
                id=record.id,
                defaults={
                    "model": record.model,
                    "year": record.year,
                    "color": record.color,
                    "vin": record.vin,
                    "status": record.status,
                    "plant": record.plant,
                    "assembly_line": record.assembly_line,
                    "created_at": datetime.fromisoformat(
                        record.created_at.replace("Z", "+00:00")
                    ),
                },
            )
            created += int(was_created)
        return created

    def _load_fake(self, target):
        fake = Faker("en_US")
        ids = set(Vehicle.objects.values_list("id", flat=True))
        vins_lote = set()
        created = 0

        for _ in range(target):
            vin = unique_vin()
            # Evita colisão tanto no banco quanto no lote atual
            while vin in vins_lote or Vehicle.objects.filter(vin=vin).exists():
                vin = unique_vin()
            vins_lote.add(vin)

            vehicle_id = next_vehicle_id(ids)
            ids.add(vehicle_id)

            Vehicle.objects.create(
                id=vehicle_id,
                model=random.choice(MODELS),
                year=random.randint(2022, 2026),
                color=random.choice(COLORS),
                vin=vin,
                status=random.choice(KNOWN_STATUSES),
                plant=random.choice(PLANTS),
                assembly_line=random.choice(LINES),
                created_at=fake.date_time_between(start_date="-90d", end_date="now", tzinfo=timezone.utc),
            )
            created += 1

        return created
