# comments in French
from __future__ import annotations

from django.http import HttpResponse
from django.urls import include, path


def healthz(_request) -> HttpResponse:
    """endpoint très simple pour les sondes de liveness."""
    return HttpResponse("ok", content_type="text/plain")


urlpatterns = [
    path("healthz", healthz),

    # gateway d'import map + modules des pièces (route attrape-tout en dernier)
    path("", include(("importmaps.urls", "importmaps"), namespace="importmaps")),
]
