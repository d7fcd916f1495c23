"""
Vues de l'application "importmaps".

Contenu :
- réception de l'import map envoyée par le navigateur (POST / OPTIONS)
- script « sender » pour l'application racine
- runtime client du serveur de dev (sender injecté)
- service des modules des pièces depuis SOURCE_ROOT

Points notables :
- le POST n'est accepté que depuis une origine de bouclage ou listée dans
  ALLOWED_ORIGINS ; la forme de l'import map est validée avant tout stockage
- l'import map est remplacée d'un bloc, puis le loquet est ouvert : les
  requêtes retenues par le middleware d'admission repartent ensuite
"""
from __future__ import annotations

import json
import logging
import mimetypes
from pathlib import Path

from django.core.exceptions import SuspiciousFileOperation
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.utils._os import safe_join
from django.views.decorators.csrf import csrf_exempt

from devserver.entetes_static import ajouter_entetes

from . import fmt
from .analysis import import_specifiers
from .exceptions import ImportMapError, MalformedShape, MethodNotAllowed, OriginRejected, SenderScriptUnavailable
from .gateway import CLIENT_ASSET, current_gateway
from .options import join_paths
from .validation import Invalid, as_mapping, validate

logger = logging.getLogger("importmaps")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
JS_EXTENSIONS = (".js", ".mjs")


def _error(exc: ImportMapError, **headers: str) -> JsonResponse:
    resp = JsonResponse({"error": exc.message}, status=exc.status)
    for name, val in headers.items():
        resp[name] = val
    return resp


# ---------------------------------------------------------------------------
# Réception de l'import map
# ---------------------------------------------------------------------------

@csrf_exempt
async def receive_import_map(request: HttpRequest) -> HttpResponse:
    """
    POST    : valide puis stocke l'import map, ouvre le loquet.
    OPTIONS : pré-vol CORS.
    Autres  : 405.
    """
    gateway = current_gateway()

    if request.method == "OPTIONS":
        resp = HttpResponse(status=200)
        for name, val in CORS_HEADERS.items():
            resp[name] = val
        return resp

    if request.method != "POST":
        return _error(MethodNotAllowed(), Allow="POST, OPTIONS")

    origin = request.headers.get("Origin") or request.headers.get("Referer")
    if not gateway.is_origin_allowed(origin):
        logger.warning("Rejected import map from unauthorized origin: %s", origin)
        return _error(OriginRejected())

    try:
        raw = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.error("Failed to parse import map: %s", exc)
        return _error(MalformedShape())

    result = validate(raw)
    if isinstance(result, Invalid):
        logger.error("Failed to parse import map: %s", result.reason)
        return _error(result.error)

    import_map = result.import_map
    gateway.replace_import_map(import_map)

    imports = as_mapping(import_map.get("imports"))
    scopes = as_mapping(import_map.get("scopes"))
    logger.info(fmt.success(
        f"Received import map from {origin}: {len(imports)} imports, {len(scopes)} scopes"
    ))
    for key, target in imports.items():
        logger.info("  %s -> %s", fmt.keyword(key), fmt.url(target))
    for prefix, mapping in scopes.items():
        logger.info("  scope %s: %s entries", fmt.url(prefix), fmt.value(len(as_mapping(mapping))))

    resp = JsonResponse({"success": True, "imports": len(imports)})
    for name, val in CORS_HEADERS.items():
        resp[name] = val
    return resp


# ---------------------------------------------------------------------------
# Scripts du serveur de dev
# ---------------------------------------------------------------------------

def import_map_sender(request: HttpRequest) -> HttpResponse:
    """Script sender (application racine uniquement), placeholders substitués."""
    try:
        script = current_gateway().render_sender_script()
    except SenderScriptUnavailable as exc:
        logger.error("Failed to read sender script: %s", exc.detail)
        return _error(exc)
    resp = HttpResponse(script, content_type="application/javascript")
    resp["Access-Control-Allow-Origin"] = "*"
    return resp


def client_runtime(request: HttpRequest) -> HttpResponse:
    """Runtime client ; le sender y est injecté après le dernier import."""
    gateway = current_gateway()
    code = CLIENT_ASSET.read_text(encoding="utf-8")
    try:
        code = gateway.transform(code, str(CLIENT_ASSET)) or code
    except SenderScriptUnavailable as exc:
        logger.error("Failed to read sender script: %s", exc.detail)
        return _error(exc)
    resp = HttpResponse(code, content_type="text/javascript")
    resp["Cache-Control"] = "no-store"
    return resp


# ---------------------------------------------------------------------------
# Modules des pièces
# ---------------------------------------------------------------------------

def serve_module(request: HttpRequest, path: str = "") -> HttpResponse:
    """
    Sert un fichier de SOURCE_ROOT ("/" -> index.html).

    Pour un module JS, les specifiers importés passent par le hook de
    résolution (diagnostic + inventaire des externals) ; le code n'est pas
    réécrit, l'import map du navigateur fait la résolution.
    """
    gateway = current_gateway()
    root = gateway.options.source_root
    if root is None:
        raise Http404("SOURCE_ROOT non configuré")

    base = join_paths(gateway.options.base).strip("/")
    rel = path.strip("/")
    if base:
        if rel != base and not rel.startswith(base + "/"):
            raise Http404(path)
        rel = rel[len(base):].lstrip("/")
    rel = rel or "index.html"

    try:
        full = Path(safe_join(root, rel))
    except SuspiciousFileOperation as exc:
        raise Http404(path) from exc
    if not full.is_file():
        raise Http404(path)

    url = request.path
    if full.suffix in JS_EXTENSIONS:
        code = full.read_text(encoding="utf-8")
        for specifier in import_specifiers(code):
            gateway.resolve_id(specifier, importer=url)
        resp = HttpResponse(code, content_type="text/javascript")
    else:
        content_type = mimetypes.guess_type(full.name)[0] or "application/octet-stream"
        resp = HttpResponse(full.read_bytes(), content_type=content_type)

    ajouter_entetes(resp, str(full), url)
    return resp
