from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Tuple

from django.utils.module_loading import import_string

from .externals import ExternalOption

DEFAULT_IMPORT_MAP_ENDPOINT = "/__current_import_map"
DEFAULT_SENDER_ENDPOINT = "/__collagejs-import-map-sender.js"
DEFAULT_TIMEOUT_MS = 5_000
CLIENT_PATH = "/@aim/client"


def default_is_bare_identifier(specifier: str) -> bool:
    """Par défaut, seuls les specifiers « @scope/... » sont considérés comme nus."""
    return specifier.startswith("@")


def join_paths(base: str, *parts: str) -> str:
    """Joint des segments d'URL sur la base : join_paths("/app/", "/x.js") -> "/app/x.js"."""
    segments = [p.strip().strip("/") for p in (base, *parts)]
    return "/" + "/".join(s for s in segments if s)


def _callable(value: Any) -> Callable[[str], bool]:
    if isinstance(value, str):
        return import_string(value)
    if not callable(value):
        raise TypeError(f"IS_BARE_IDENTIFIER doit être un callable ou un chemin pointé, reçu {value!r}")
    return value


@dataclass(frozen=True)
class GatewayOptions:
    """Options du gateway (réglage Django `AIM`), figées pour la durée du processus."""

    is_root: bool = True
    is_bare_identifier: Callable[[str], bool] = default_is_bare_identifier
    import_map_endpoint: str = DEFAULT_IMPORT_MAP_ENDPOINT
    import_map_sender_endpoint: str = DEFAULT_SENDER_ENDPOINT
    allowed_origins: Tuple[str, ...] = ()
    path_exceptions: Tuple[str, ...] = ()
    import_map_timeout: int = DEFAULT_TIMEOUT_MS
    log_level: Optional[str] = None
    banner: bool = True
    externals: Optional[ExternalOption] = None
    base: str = "/"
    command: str = "serve"
    source_root: Optional[Path] = None

    @property
    def endpoint_url(self) -> str:
        return join_paths(self.base, self.import_map_endpoint)

    @property
    def sender_url(self) -> str:
        return join_paths(self.base, self.import_map_sender_endpoint)

    @property
    def client_url(self) -> str:
        return join_paths(self.base, CLIENT_PATH)

    @property
    def timeout_seconds(self) -> float:
        return max(self.import_map_timeout, 0) / 1000

    @classmethod
    def from_settings(cls, settings: Any) -> "GatewayOptions":
        conf: Mapping[str, Any] = getattr(settings, "AIM", {}) or {}
        command = conf.get("COMMAND") or ("serve" if settings.DEBUG else "build")
        source_root = conf.get("SOURCE_ROOT")
        return cls(
            is_root=bool(conf.get("IS_ROOT", True)),
            is_bare_identifier=_callable(conf.get("IS_BARE_IDENTIFIER", default_is_bare_identifier)),
            import_map_endpoint=conf.get("IMPORT_MAP_ENDPOINT", DEFAULT_IMPORT_MAP_ENDPOINT),
            import_map_sender_endpoint=conf.get("IMPORT_MAP_SENDER_ENDPOINT", DEFAULT_SENDER_ENDPOINT),
            allowed_origins=tuple(o for o in conf.get("ALLOWED_ORIGINS", ()) if o),
            path_exceptions=tuple(conf.get("PATH_EXCEPTIONS", ())),
            import_map_timeout=int(conf.get("IMPORT_MAP_TIMEOUT", DEFAULT_TIMEOUT_MS)),
            log_level=conf.get("LOG_LEVEL"),
            banner=bool(conf.get("BANNER", True)),
            externals=conf.get("EXTERNALS"),
            base=conf.get("BASE", "/"),
            command=command,
            source_root=Path(source_root) if source_root else None,
        )
