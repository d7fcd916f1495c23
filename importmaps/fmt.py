from __future__ import annotations

from typing import Any

from django.core.management.color import supports_color
from django.utils.termcolors import colorize


def _paint(text: Any, **kwargs: Any) -> str:
    text = str(text)
    return colorize(text, **kwargs) if supports_color() else text


def url(value: Any) -> str:
    return _paint(value, fg="blue", opts=("bold",))


def keyword(value: Any) -> str:
    return _paint(value, fg="cyan")


def value(v: Any) -> str:
    return _paint(v, opts=("reverse",))


def success(text: Any) -> str:
    return _paint(text, fg="white", bg="green")
