from __future__ import annotations

from django.core.management.color import Style

_WIDTH = 47


def _line(text: str = "") -> str:
    return text.center(_WIDTH)


def show_banner(stdout, style: Style) -> None:
    """Bandeau affiché au démarrage de `manage.py runaim`."""
    border = "═" * _WIDTH
    stdout.write("")
    stdout.write(style.HTTP_INFO(f"  ╔{border}╗"))
    stdout.write(style.HTTP_INFO("  ║") + style.SUCCESS(_line("Import map dev server")) + style.HTTP_INFO("║"))
    stdout.write(style.HTTP_INFO("  ║") + _line("Bare identifiers resolved by the browser") + style.HTTP_INFO("║"))
    stdout.write(style.HTTP_INFO(f"  ╚{border}╝"))
    stdout.write("")
