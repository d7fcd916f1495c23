from __future__ import annotations

import uvicorn
from django.core.management.base import BaseCommand

from devserver.banner import show_banner
from importmaps.gateway import current_gateway


class Command(BaseCommand):
    help = "Lance le serveur de dev ASGI (uvicorn) avec le gateway d'import map."

    def add_arguments(self, parser):
        parser.add_argument("--host", default="127.0.0.1")
        parser.add_argument("--port", type=int, default=4101)
        parser.add_argument("--reload", action="store_true", help="Recharge sur modification du code Python.")

    def handle(self, *args, **opts):
        gateway = current_gateway()
        if gateway.options.banner:
            show_banner(self.stdout, self.style)

        options = gateway.options
        self.stdout.write(f"Import map endpoint : {options.endpoint_url}")
        if options.is_root:
            self.stdout.write(f"Sender script       : {options.sender_url}")
        self.stdout.write(f"Modules served from : {options.source_root}")

        try:
            uvicorn.run(
                "devserver.asgi:application",
                host=opts["host"],
                port=opts["port"],
                reload=opts["reload"],
                log_level="info",
            )
        finally:
            # fin de session : inventaire des modules laissés à l'import map
            gateway.report_externalized()
