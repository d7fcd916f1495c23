from .base import *
from .base import _level, _list
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env.dev into process env for local development only.
load_dotenv(Path(BASE_DIR) / ".env.dev")

DEBUG = True
ALLOWED_HOSTS = []

AIM = {
    **AIM,
    "IS_ROOT": os.getenv("AIM_IS_ROOT", "1") == "1",
    "ALLOWED_ORIGINS": _list("AIM_ALLOWED_ORIGINS"),
    "IMPORT_MAP_TIMEOUT": int(os.getenv("AIM_IMPORT_MAP_TIMEOUT", "5000")),
    "SOURCE_ROOT": Path(os.getenv("AIM_SOURCE_ROOT", BASE_DIR / "pieces")),
    # la sonde de liveness ne doit jamais attendre l'import map
    "PATH_EXCEPTIONS": ["/healthz"],
}
LOGGING["loggers"]["importmaps"]["level"] = _level("AIM_LOG_LEVEL", "INFO")
