import pytest


def _assert_cors(resp):
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-methods"] == "GET, POST, OPTIONS"
    assert resp.headers["access-control-allow-headers"] == "Content-Type"


@pytest.mark.parametrize("path", ["/", "/text", "/some/where"])
def test_options_is_empty_204(client, fake_gemini, path):
    resp = client.options(path)
    assert resp.status_code == 204
    assert resp.content == b""
    _assert_cors(resp)
    assert fake_gemini.requests == []


def test_preflight_with_browser_headers(client):
    resp = client.options("/", headers={
        "Origin": "https://roast.example.com",
        "Access-Control-Request-Method": "POST",
    })
    assert resp.status_code == 204
    _assert_cors(resp)


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH"])
def test_other_methods_are_405(client, method):
    resp = client.request(method, "/")
    assert resp.status_code == 405
    assert resp.text == "Method not allowed"
    _assert_cors(resp)


def test_cors_on_success(client):
    resp = client.post("/", content=b"\xff\xd8jpeg")
    assert resp.status_code == 200
    _assert_cors(resp)


def test_cors_on_bad_request(client):
    resp = client.post("/", content=b"")
    assert resp.status_code == 400
    _assert_cors(resp)


def test_cors_on_unhandled_failure(client):
    resp = client.post("/text", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 500
    _assert_cors(resp)


def test_cors_on_missing_key(make_client):
    resp = make_client(gemini_api_key=None).post("/", content=b"img")
    assert resp.status_code == 500
    _assert_cors(resp)


@pytest.mark.parametrize("variant", ["vision", "sound"])
@pytest.mark.parametrize("path,kwargs", [
    ("/", {"content": b"\xff\xd8jpeg"}),
    ("/", {"content": b""}),
    ("/text", {"json": {"text": "hi"}}),
    ("/text", {"content": b"garbage"}),
    ("/anything", {"content": b"img"}),
])
def test_missing_key_is_500_before_network(make_client, fake_gemini, variant, path, kwargs):
    resp = make_client(gemini_api_key=None, roast_variant=variant).post(path, **kwargs)
    assert resp.status_code == 500
    assert resp.json() == {"error": "GEMINI_API_KEY not configured. Please set it as a secret."}
    assert fake_gemini.requests == []


def test_cors_on_text_success(client, fake_gemini):
    fake_gemini.reply("Socks with sandals: a bold cry for help.")
    resp = client.post("/text", json={"text": "socks with sandals"})
    assert resp.status_code == 200
    assert resp.json()["roast_text"]
    _assert_cors(resp)


def test_cors_on_text_degraded_upstream_error(client, fake_gemini):
    fake_gemini.fail(403, "API key not valid")
    resp = client.post("/text", json={"text": "socks with sandals"})
    assert resp.status_code == 200
    assert resp.json()["status"] == 403
    _assert_cors(resp)
