# importmaps/apps.py
from django.apps import AppConfig


class ImportmapsConfig(AppConfig):
    name = "importmaps"
    verbose_name = "Import map gateway"

    def ready(self):
        from django.conf import settings

        from .gateway import ImportMapGateway
        from .options import GatewayOptions

        # une seule instance par processus de serveur de dev
        self.gateway = ImportMapGateway(GatewayOptions.from_settings(settings))
