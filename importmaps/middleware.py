from __future__ import annotations

from asgiref.sync import markcoroutinefunction

from .gateway import current_gateway


class ImportMapAdmissionMiddleware:
    """
    Retient les requêtes GET de modules tant que l'import map n'est pas reçue.

    Unique point de suspension : l'attente sur le loquet, bornée par
    IMPORT_MAP_TIMEOUT. À l'expiration, la requête est servie quand même.
    """

    async_capable = True
    sync_capable = False

    def __init__(self, get_response):
        self.get_response = get_response
        markcoroutinefunction(self)

    async def __call__(self, request):
        gateway = current_gateway()
        if gateway.should_block(request.method, request.path):
            await gateway.wait_for_import_map(request.get_full_path())
        return await self.get_response(request)
