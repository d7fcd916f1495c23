"""
Injection du script « sender » dans le runtime client du serveur de dev.

Heuristique volontairement légère, ligne par ligne, réservée à ce seul fichier
d'amorçage : on repère la dernière instruction `import` statique complète
(clause `from` comprise) et on insère le script juste après. Sans import, le script est placé en
tête. Les imports statiques existants ne sont jamais réécrits.
"""
from __future__ import annotations

import re

# import x from "y";  import {a, b as c} from 'y'  import * as ns from "y"  import "y";
_RE_IMPORT_LINE = re.compile(
    r"""^[ \t]*import[ \t]+(?:[\w$*{},\s]+?[ \t]+from[ \t]*)?(['"])[^'"\n]+\1[ \t]*;?[ \t]*$""",
    re.MULTILINE,
)


def find_last_import_statement(code: str) -> int:
    """Index juste après la dernière ligne d'import, ou -1 s'il n'y en a aucune."""
    last = -1
    for m in _RE_IMPORT_LINE.finditer(code):
        last = m.end()
    return last


def inject_script(code: str, script: str) -> str:
    """Insère `script` après le dernier import de `code` (ou en tête)."""
    index = find_last_import_statement(code)
    if index == -1:
        return script + "\n" + code
    return code[:index] + "\n" + script + "\n" + code[index:]
