from .base import *
from .base import _list
import re

DEBUG = False
ALLOWED_HOSTS = _list("DJANGO_ALLOWED_HOSTS") or ["localhost"]

AIM = {
    **AIM,
    "COMMAND": "build",
    "BANNER": False,
    # tout ce que l'import map fournit au runtime reste hors du bundle
    "EXTERNALS": [re.compile(r"^@")],
}

AIM_BUILD_CONFIG = {
    "build": {
        "rollupOptions": {
            "external": ["react", "react-dom"],
        },
    },
}
