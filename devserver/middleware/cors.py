# devserver/middleware/cors.py
from asgiref.sync import iscoroutinefunction, markcoroutinefunction


class DevCorsMiddleware:
    """Autorise le chargement cross-origin des modules (la page racine charge les pièces d'autres serveurs)."""

    async_capable = True
    sync_capable = True

    def __init__(self, get_response):
        self.get_response = get_response
        self._is_async = iscoroutinefunction(get_response)
        if self._is_async:
            markcoroutinefunction(self)

    def __call__(self, request):
        if self._is_async:
            return self.__acall__(request)
        return self._add_headers(self.get_response(request))

    async def __acall__(self, request):
        return self._add_headers(await self.get_response(request))

    @staticmethod
    def _add_headers(resp):
        # une réponse qui fixe déjà ses en-têtes CORS les garde
        if "Access-Control-Allow-Origin" not in resp:
            resp["Access-Control-Allow-Origin"] = "*"
        return resp
