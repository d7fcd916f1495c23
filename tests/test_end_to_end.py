import asyncio
import json

import pytest

ENDPOINT = "/__current_import_map"
IMPORT_MAP = {"imports": {"@x": "http://localhost:4101/x.js"}, "scopes": {}}


async def _post(async_client, body, origin):
    return await async_client.post(
        ENDPOINT,
        data=json.dumps(body),
        content_type="application/json",
        headers={"Origin": origin},
    )


@pytest.mark.asyncio
async def test_blocked_request_resumes_after_post(async_client, gateway):
    pending = asyncio.create_task(async_client.get("/piece.js"))
    await asyncio.sleep(0.1)
    assert not pending.done()

    widget_map = {"imports": {"@team/widget": "http://localhost:4102/widget.js"}, "scopes": {}}
    r = await _post(async_client, widget_map, "http://localhost:5555")
    assert r.status_code == 200
    assert r.json() == {"success": True, "imports": 1}

    resumed = await asyncio.wait_for(pending, timeout=2)
    assert resumed.status_code == 200
    assert b"@team/widget" in resumed.content
    # the released request resolved against the map stored by the POST
    assert list(gateway.externalized_modules) == ["http://localhost:4102/widget.js"]


@pytest.mark.asyncio
async def test_every_blocked_request_released_by_one_post(async_client, gateway):
    pending = [asyncio.create_task(async_client.get(p)) for p in ("/piece.js", "/local.js", "/piece.js")]
    await asyncio.sleep(0.1)
    assert not any(p.done() for p in pending)

    await _post(async_client, IMPORT_MAP, "http://127.0.0.1:5555")
    responses = await asyncio.wait_for(asyncio.gather(*pending), timeout=2)
    assert [r.status_code for r in responses] == [200, 200, 200]


@pytest.mark.asyncio
async def test_rejected_origin_keeps_requests_blocked(async_client, make_gateway):
    gw = make_gateway(import_map_timeout=300)
    pending = asyncio.create_task(async_client.get("/local.js"))
    await asyncio.sleep(0.05)

    r = await _post(async_client, IMPORT_MAP, "http://evil.example")
    assert r.status_code == 403
    assert r.json() == {"error": "Origin not allowed"}
    assert gw.import_map == {"imports": {}}
    assert not gw.ready.is_set

    await asyncio.sleep(0.05)
    assert not pending.done()
    # fail open once the timeout elapses
    assert (await asyncio.wait_for(pending, timeout=2)).status_code == 200


@pytest.mark.asyncio
async def test_missing_scopes_is_rejected(async_client, gateway):
    r = await _post(async_client, {"imports": {}}, "http://localhost:5555")
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid import map data"}
    assert not gateway.ready.is_set


@pytest.mark.asyncio
async def test_exception_paths_not_held(async_client, gateway):
    for path in ("/", "/index.html", "/@aim/client", "/__collagejs-import-map-sender.js"):
        r = await asyncio.wait_for(async_client.get(path), timeout=1)
        assert r.status_code == 200, path
