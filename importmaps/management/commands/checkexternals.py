from __future__ import annotations

import copy

from django.conf import settings
from django.core.management.base import BaseCommand

from importmaps.externals import merge_external_options
from importmaps.gateway import current_gateway


class Command(BaseCommand):
    help = (
        "Applique le hook de build (fusion des EXTERNALS dans AIM_BUILD_CONFIG) "
        "et indique, pour chaque specifier, s'il reste hors du bundle."
    )

    def add_arguments(self, parser):
        parser.add_argument("specifiers", nargs="+")
        parser.add_argument("--importer", default=None)

    def handle(self, *args, **opts):
        gateway = current_gateway()
        config = gateway.config(copy.deepcopy(getattr(settings, "AIM_BUILD_CONFIG", {})), command="build")
        external = config.get("build", {}).get("rollupOptions", {}).get("external")
        is_external = merge_external_options(external)

        for specifier in opts["specifiers"]:
            if is_external(specifier, opts["importer"], False):
                gateway.externalized_modules.setdefault(specifier, None)
                self.stdout.write(f"{specifier}: " + self.style.WARNING("external"))
            else:
                self.stdout.write(f"{specifier}: " + self.style.SUCCESS("bundled"))

        gateway.report_externalized()
