import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                ("id", models.CharField(max_length=16, primary_key=True, serialize=False, verbose_name="ID")),
                ("model", models.CharField(max_length=80, verbose_name="Modelo")),
                ("year", models.PositiveIntegerField(verbose_name="Ano")),
                ("color", models.CharField(max_length=30, verbose_name="Cor")),
                ("vin", models.CharField(max_length=32, unique=True, verbose_name="VIN/Chassi")),
                ("status", models.CharField(max_length=40, verbose_name="Status")),
                ("plant", models.CharField(max_length=80, verbose_name="Fábrica")),
                ("assembly_line", models.CharField(max_length=40, verbose_name="Linha de montagem")),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
