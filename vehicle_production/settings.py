# vehicle_production/settings.py
"""
Configurações do projeto vehicle_production.

Tudo que muda entre desenvolvimento e produção vem de variáveis de ambiente,
assim nenhum segredo fica versionado no repositório.
"""
import os
from pathlib import Path
from typing import List

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool) -> bool:
    """
    Lê uma variável de ambiente booleana ("1", "true", "yes", "on"...).
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_csv(name: str, default: List[str]) -> List[str]:
    """
    Lê uma lista separada por vírgulas, descartando itens vazios.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]


DEBUG = _env_bool("DJANGO_DEBUG", default=True)

_DEV_SECRET_KEY = "dev-only-insecure-secret-key"
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or (_DEV_SECRET_KEY if DEBUG else "")
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY é obrigatória quando DJANGO_DEBUG=False.")

ALLOWED_HOSTS = _env_csv("DJANGO_ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "[::1]"])

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "vehicles.apps.VehiclesConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "vehicle_production.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

WSGI_APPLICATION = "vehicle_production.wsgi.application"
ASGI_APPLICATION = "vehicle_production.asgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------
# Fonte de dados do dashboard
# -----------------------------
# Qualquer classe com `async fetch()` serve. As três embutidas:
#   vehicles.data_sources.StaticDataSource    (padrão: os 7 registros fixos)
#   vehicles.data_sources.DatabaseDataSource  (tabela Vehicle via ORM)
#   vehicles.data_sources.JsonFileDataSource  (arquivo JSON em VEHICLE_DATA_FILE)
VEHICLE_DATA_SOURCE = os.getenv(
    "VEHICLE_DATA_SOURCE", "vehicles.data_sources.StaticDataSource"
)
VEHICLE_DATA_FILE = os.getenv("VEHICLE_DATA_FILE", str(BASE_DIR / "vehicles.json"))
VEHICLE_DATA_SOURCE_OPTIONS = (
    {"path": VEHICLE_DATA_FILE}
    if VEHICLE_DATA_SOURCE.endswith("JsonFileDataSource")
    else {}
)

# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "console",
        },
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "vehicles": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}
