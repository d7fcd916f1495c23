from __future__ import annotations

import re
from typing import Any, Callable, Dict, MutableMapping, Optional, Sequence, Union

ExternalPredicate = Callable[[str, Optional[str], bool], bool]
ExternalOption = Union[str, "re.Pattern[str]", Sequence[Union[str, "re.Pattern[str]"]], ExternalPredicate]


def _matches(option: Any, source: str, importer: Optional[str], is_resolved: bool) -> bool:
    if isinstance(option, str):
        return source == option
    if isinstance(option, re.Pattern):
        return option.search(source) is not None
    if isinstance(option, (list, tuple, set, frozenset)):
        return any(
            (isinstance(o, str) and o == source) or (isinstance(o, re.Pattern) and o.search(source) is not None)
            for o in option
        )
    if callable(option):
        return bool(option(source, importer, is_resolved))
    raise TypeError(f"Option d'externalisation non prise en charge : {option!r}")


def merge_external_options(*options: ExternalOption) -> ExternalPredicate:
    """
    Fusionne plusieurs options « external » (chaîne exacte, motif, liste, prédicat)
    en un seul prédicat : vrai dès qu'une des options correspond.

    Les motifs sont testés avec `search`, comme `RegExp.test` côté bundler.
    """
    kept = tuple(o for o in options if o is not None)

    def is_external(source: str, importer: Optional[str] = None, is_resolved: bool = False) -> bool:
        return any(_matches(opt, source, importer, is_resolved) for opt in kept)

    return is_external


def apply_build_externals(
        config: MutableMapping[str, Any],
        externals: Optional[ExternalOption],
        command: str,
) -> MutableMapping[str, Any]:
    """
    Hook de configuration : en mode "build", fusionne `externals` dans
    config["build"]["rollupOptions"]["external"]. Sans valeur existante, les
    externals sont installés tels quels. Hors build, la config n'est pas touchée.
    """
    if command != "build" or not externals:
        return config

    build: Dict[str, Any] = config.setdefault("build", {})
    rollup_options: Dict[str, Any] = build.setdefault("rollupOptions", {})
    existing = rollup_options.get("external")
    if existing:
        rollup_options["external"] = merge_external_options(existing, externals)
    else:
        rollup_options["external"] = externals
    return config
