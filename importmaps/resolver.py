from __future__ import annotations

from typing import Any, Mapping, Optional

from .validation import ImportMap, as_mapping


def resolve(import_map: ImportMap, specifier: str) -> Optional[str]:
    """
    Résout un identifiant nu à partir de l'import map courante.

    1. correspondance exacte : imports[specifier]
    2. correspondance par préfixe (clé terminée par "/") : la *première* clé
       rencontrée dans l'ordre d'insertion gagne, pas la plus longue.
       ex. {"@demo/": "http://localhost:4101/"} : "@demo/a.js" -> "http://localhost:4101/a.js"
    3. sinon None
    """
    imports: Mapping[str, Any] = as_mapping(import_map.get("imports"))

    exact = imports.get(specifier)
    if exact and isinstance(exact, str):
        return exact

    for key, value in imports.items():
        if key.endswith("/") and specifier.startswith(key) and isinstance(value, str):
            return value + specifier[len(key):]

    return None
