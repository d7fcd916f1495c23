# devserver/logging_filters.py
from __future__ import annotations
import logging


class IgnoreImportMapEndpointRejections(logging.Filter):
    """Filtre les 4xx de django.request sur l'endpoint de réception (déjà journalisés par le gateway)."""

    def filter(self, record: logging.LogRecord) -> bool:
        request = getattr(record, "request", None)
        status = getattr(record, "status_code", None)
        if request is None or status is None or not 400 <= status < 500:
            return True

        from importmaps.gateway import current_gateway

        return getattr(request, "path", None) != current_gateway().options.endpoint_url
