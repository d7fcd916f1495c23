from django.conf import settings
from django.urls import path, re_path

from . import views
from .options import GatewayOptions

app_name = "importmaps"

_options = GatewayOptions.from_settings(settings)

urlpatterns = [
    # réception de l'import map (POST depuis le sender, pré-vol OPTIONS)
    path(_options.endpoint_url.lstrip("/"), views.receive_import_map, name="receive"),

    # runtime client du serveur de dev, sender injecté
    path(_options.client_url.lstrip("/"), views.client_runtime, name="client"),
]

# le script sender n'est servi que par l'application racine
if _options.is_root:
    urlpatterns.append(path(_options.sender_url.lstrip("/"), views.import_map_sender, name="sender"))

# tout le reste : modules des pièces servis depuis SOURCE_ROOT
urlpatterns.append(re_path(r"^(?P<path>.*)$", views.serve_module, name="module"))
