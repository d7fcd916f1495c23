from __future__ import annotations

import re
from typing import List

# from "x" / import "x" / import("x") ; lecture seule, le code servi n'est pas modifié
_RE_SPECIFIER = re.compile(
    r"""(?:\bfrom[ \t]*|^[ \t]*import[ \t]*|\bimport[ \t]*\([ \t]*)(['"])([^'"\n]+)\1""",
    re.MULTILINE,
)


def import_specifiers(code: str) -> List[str]:
    """Liste (sans doublon, dans l'ordre) des specifiers importés par un module ES."""
    seen: dict[str, None] = {}
    for m in _RE_SPECIFIER.finditer(code):
        seen.setdefault(m.group(2), None)
    return list(seen)
