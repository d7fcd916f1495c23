# devserver/entetes_static.py
import re

_RE_HASH = re.compile(r"\.[0-9a-f]{8,}\.")  # ex: piece.55e7cbb9ba48.js


def ajouter_entetes(headers, path, url):
    """Force no-store sur les modules JS non fingerprintés servis par le serveur de dev."""
    if path.endswith((".js", ".mjs")) and not _RE_HASH.search(url):
        headers["Cache-Control"] = "no-store"
