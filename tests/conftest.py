# comments in English
from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from django.apps import apps

from importmaps.gateway import ImportMapGateway
from importmaps.options import GatewayOptions


def _write_pieces(root: Path) -> None:
    (root / "index.html").write_text(
        '<!doctype html><script type="module" src="/@aim/client"></script>', encoding="utf-8"
    )
    (root / "piece.js").write_text(
        'import { mount } from "@team/widget";\nimport "./local.js";\nmount();\n', encoding="utf-8"
    )
    (root / "local.js").write_text("export const x = 1;\n", encoding="utf-8")


@pytest.fixture
def make_gateway(tmp_path):
    """Install a fresh gateway on the app config; restore the previous one afterwards."""
    config = apps.get_app_config("importmaps")
    previous = config.gateway
    _write_pieces(tmp_path)

    def _make(**overrides) -> ImportMapGateway:
        options = dataclasses.replace(
            GatewayOptions(command="serve", source_root=tmp_path, path_exceptions=("/healthz",)),
            **overrides,
        )
        config.gateway = ImportMapGateway(options)
        return config.gateway

    yield _make
    config.gateway = previous


@pytest.fixture
def gateway(make_gateway):
    return make_gateway()
