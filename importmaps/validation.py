from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, TypedDict, Union

from .exceptions import MalformedShape


class ImportMap(TypedDict, total=False):
    """
    Import map telle que reçue du navigateur.

    imports : specifier -> URL
    scopes  : préfixe de portée -> (specifier -> URL)
    """
    imports: Dict[str, str]
    scopes: Dict[str, Dict[str, str]]


REQUIRED_KEYS = ["imports", "scopes"]


@dataclass(frozen=True)
class Valid:
    import_map: ImportMap


@dataclass(frozen=True)
class Invalid:
    reason: str
    error: MalformedShape


ValidationResult = Union[Valid, Invalid]


def validate(raw: Any) -> ValidationResult:
    """
    Vérifie la forme d'une import map déjà décodée (JSON).

    Seule la clé de premier niveau est contrôlée : un objet non nul dont
    l'ensemble trié des clés vaut exactement ["imports", "scopes"]. Les valeurs
    internes ne sont pas inspectées. Aucune coercition : tout écart est rejeté.
    """
    if not isinstance(raw, dict):
        return Invalid("Import map must be an object.", MalformedShape())
    if sorted(raw.keys()) != REQUIRED_KEYS:
        return Invalid('Import map can only contain "imports" and "scopes" keys.', MalformedShape())
    return Valid(raw)  # type: ignore[arg-type]


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Valeur interne de l'import map, lue comme table (vide si ce n'en est pas une)."""
    return value if isinstance(value, Mapping) else {}
