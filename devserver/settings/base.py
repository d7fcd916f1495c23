from pathlib import Path
import os


def _level(env_name: str, default: str = "INFO") -> str:
    val = os.getenv(env_name, default).upper()
    return val if val in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"} else default


def _list(env_name: str) -> list[str]:
    return [v.strip() for v in os.getenv(env_name, "").split(",") if v.strip()]


BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-change-me")
DEBUG = False  # override in dev

ALLOWED_HOSTS = _list("DJANGO_ALLOWED_HOSTS")

INSTALLED_APPS = [
    "importmaps",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "importmaps.middleware.ImportMapAdmissionMiddleware",
    "devserver.middleware.cors.DevCorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

ROOT_URLCONF = "devserver.urls"

TEMPLATES = []

ASGI_APPLICATION = "devserver.asgi.application"

# pas de modèles : aucune base
DATABASES = {}

LANGUAGE_CODE = "fr-fr"
TIME_ZONE = "Europe/Paris"
USE_I18N = False
USE_TZ = True

# --- Gateway d'import map ---
# IMPORT_MAP_TIMEOUT en millisecondes ; COMMAND None -> "serve" si DEBUG, sinon "build"
AIM = {
    "IS_ROOT": os.getenv("AIM_IS_ROOT", "1") == "1",
    "IS_BARE_IDENTIFIER": "importmaps.options.default_is_bare_identifier",
    "IMPORT_MAP_ENDPOINT": "/__current_import_map",
    "IMPORT_MAP_SENDER_ENDPOINT": "/__collagejs-import-map-sender.js",
    "ALLOWED_ORIGINS": _list("AIM_ALLOWED_ORIGINS"),
    "PATH_EXCEPTIONS": [],
    "IMPORT_MAP_TIMEOUT": int(os.getenv("AIM_IMPORT_MAP_TIMEOUT", "5000")),
    "LOG_LEVEL": None,
    "BANNER": True,
    "EXTERNALS": None,
    "BASE": "/",
    "COMMAND": None,
    "SOURCE_ROOT": Path(os.getenv("AIM_SOURCE_ROOT", BASE_DIR / "pieces")),
}

# bundler config reçue par le hook de build (cf. manage.py checkexternals)
AIM_BUILD_CONFIG = {}

# LOGS
# comments in English
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "skip_receiver_rejections": {"()": "devserver.logging_filters.IgnoreImportMapEndpointRejections"},
    },
    "formatters": {
        "console": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "console"},
    },
    "root": {
        "handlers": ["console"],
        "level": _level("DJANGO_LOG_LEVEL", "INFO"),
    },
    "loggers": {
        # handled by root ("console")
        "importmaps": {
            "level": _level("AIM_LOG_LEVEL", "INFO"),
        },
        # the gateway already logs its own 4xx, drop Django's duplicates
        "django.request": {
            "handlers": ["console"],
            "level": "WARNING",
            "filters": ["skip_receiver_rejections"],
            "propagate": False,
        },
    },
}
