# comments in English
import logging

from django.http import HttpResponse
from django.test import RequestFactory

from devserver.entetes_static import ajouter_entetes
from devserver.logging_filters import IgnoreImportMapEndpointRejections
from devserver.middleware.cors import DevCorsMiddleware


def _record(path, status):
    record = logging.LogRecord("django.request", logging.WARNING, __file__, 1, "Forbidden: %s", (path,), None)
    record.request = RequestFactory().post(path)
    record.status_code = status
    return record


def test_filter_drops_receiver_rejections(gateway):
    f = IgnoreImportMapEndpointRejections()
    assert not f.filter(_record("/__current_import_map", 403))
    assert not f.filter(_record("/__current_import_map", 400))
    assert f.filter(_record("/__current_import_map", 500))
    assert f.filter(_record("/piece.js", 404))


def test_filter_keeps_records_without_request(gateway):
    record = logging.LogRecord("django.request", logging.ERROR, __file__, 1, "boom", (), None)
    assert IgnoreImportMapEndpointRejections().filter(record)


def test_cors_middleware_keeps_existing_header():
    def view(request):
        resp = HttpResponse("x")
        resp["Access-Control-Allow-Origin"] = "http://shell.example"
        return resp

    resp = DevCorsMiddleware(view)(RequestFactory().get("/"))
    assert resp["Access-Control-Allow-Origin"] == "http://shell.example"
    assert DevCorsMiddleware(lambda r: HttpResponse())(RequestFactory().get("/"))["Access-Control-Allow-Origin"] == "*"


def test_static_headers_no_store_for_plain_js():
    headers = {}
    ajouter_entetes(headers, "/src/piece.js", "/piece.js")
    assert headers == {"Cache-Control": "no-store"}

    headers = {}
    ajouter_entetes(headers, "/src/piece.55e7cbb9ba48.js", "/piece.55e7cbb9ba48.js")
    assert headers == {}
