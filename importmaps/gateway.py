"""
Gateway de synchronisation de l'import map, une instance par processus de dev.

L'instance possède :
- l'import map courante (remplacée d'un bloc à chaque POST valide),
- le loquet de disponibilité (ReadinessLatch), ouvert après le premier POST,
- l'ensemble des modules externalisés pendant la session (rapport de fin).

Elle expose les hooks consommés par le serveur de dev : filtre d'admission,
résolution des identifiants nus, transformation du runtime client, fusion des
externals de build.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional, Set
from urllib.parse import urlsplit

from django.apps import apps

from . import fmt
from .exceptions import SenderScriptUnavailable
from .externals import apply_build_externals
from .injection import inject_script
from .latch import ReadinessLatch, WaitResult
from .options import GatewayOptions, join_paths
from .resolver import resolve
from .validation import ImportMap

logger = logging.getLogger("importmaps")

LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}
ASSETS_DIR = Path(__file__).resolve().parent / "static" / "importmaps"
SENDER_ASSET = ASSETS_DIR / "import-map-sender.js"
CLIENT_ASSET = ASSETS_DIR / "client.js"

_RE_SENDER_CALL = re.compile(r"\}\)\(\);\s*$")


@dataclass(frozen=True)
class ResolvedId:
    id: str
    external: bool = True


class ImportMapGateway:
    def __init__(self, options: GatewayOptions) -> None:
        self.options = options
        self.import_map: ImportMap = {"imports": {}}
        self.ready = ReadinessLatch()
        self.externalized_modules: Dict[str, None] = {}

        root = join_paths(options.base)
        exceptions: Set[str] = {
            root,
            root.rstrip("/") + "/",
            join_paths(options.base, "/index.html"),
            options.client_url,
            # le endpoint de réception passe avant le filtre, quelle que soit la méthode
            options.endpoint_url,
        }
        if options.is_root:
            exceptions.add(options.sender_url)
        exceptions.update(join_paths(options.base, p) for p in options.path_exceptions)
        self.path_exceptions = frozenset(exceptions)

        if options.log_level:
            logger.setLevel(options.log_level.upper())

    # ------------------------------------------------------------------ store

    def replace_import_map(self, import_map: ImportMap) -> None:
        """Remplace l'import map d'un bloc puis ouvre le loquet (jamais avant)."""
        self.import_map = import_map
        self.ready.signal()

    # --------------------------------------------------------------- origins

    def is_origin_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return False
        try:
            host = urlsplit(origin).hostname
        except ValueError:
            host = None
        if host in LOOPBACK_HOSTS:
            return True
        return any(allowed in origin for allowed in self.options.allowed_origins)

    # ------------------------------------------------------------- admission

    def should_block(self, method: str, path: str) -> bool:
        """Vrai si la requête doit attendre l'import map avant d'être servie."""
        if self.options.command != "serve":
            return False
        if method != "GET":
            return False
        if self.ready.is_set:
            return False
        if path in self.path_exceptions:
            return False
        return True

    async def wait_for_import_map(self, path: str) -> WaitResult:
        logger.warning("Blocking request until the import map is received: %s", fmt.url(path))
        result = await self.ready.wait(self.options.timeout_seconds)
        if result is WaitResult.TIMED_OUT:
            logger.warning("Timeout waiting for import map, proceeding without it for: %s", fmt.url(path))
        else:
            logger.info(fmt.success(f"Import map received, proceeding with: {path}"))
        return result

    # ------------------------------------------------------------ resolution

    def resolve(self, specifier: str) -> Optional[str]:
        return resolve(self.import_map, specifier)

    def resolve_id(self, specifier: str, importer: Optional[str] = None) -> Optional[ResolvedId]:
        """
        Hook de résolution : tout identifiant nu est externalisé (le navigateur
        le résoudra via son import map). L'URL résolue, si elle existe, ne sert
        qu'au diagnostic.
        """
        if not self.options.is_bare_identifier(specifier):
            return None
        resolved = self.resolve(specifier)
        module_id = resolved or specifier
        self.externalized_modules.setdefault(module_id, None)
        if resolved:
            logger.debug("%s -> %s (external)", fmt.keyword(specifier), fmt.url(resolved))
        else:
            logger.debug("%s not in the import map, kept external (importer: %s)", fmt.keyword(specifier), importer)
        return ResolvedId(id=module_id, external=True)

    def report_externalized(self) -> None:
        if self.externalized_modules:
            logger.info("Externalized modules: %s", fmt.value(", ".join(self.externalized_modules)))

    # ---------------------------------------------------------------- sender

    def render_sender_script(self) -> str:
        """Script sender avec le drapeau racine et l'URL de réception substitués."""
        try:
            script = SENDER_ASSET.read_text(encoding="utf-8")
        except OSError as exc:
            raise SenderScriptUnavailable(str(exc)) from exc
        args = f"}})({'true' if self.options.is_root else 'false'}, {json.dumps(self.options.endpoint_url)});"
        return _RE_SENDER_CALL.sub(lambda _m: args, script, count=1)

    def transform(self, code: str, module_id: str) -> Optional[str]:
        """Hook de transformation, limité au runtime client du serveur de dev."""
        if self.options.command != "serve":
            return None
        if Path(module_id).resolve() != CLIENT_ASSET:
            return None
        return inject_script(code, self.render_sender_script())

    # ----------------------------------------------------------------- build

    def config(self, build_config: MutableMapping[str, Any], command: Optional[str] = None) -> MutableMapping[str, Any]:
        return apply_build_externals(build_config, self.options.externals, command or self.options.command)


def current_gateway() -> ImportMapGateway:
    """Instance portée par la config de l'app `importmaps`."""
    return apps.get_app_config("importmaps").gateway
