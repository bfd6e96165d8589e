# vehicle_production/asgi.py
# O endpoint de dados do dashboard é uma view assíncrona; servir via ASGI
# (uvicorn/daphne) evita a ponte async->sync do WSGI.
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vehicle_production.settings")

application = get_asgi_application()
