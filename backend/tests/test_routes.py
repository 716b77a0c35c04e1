from urllib.parse import quote

from conftest import MRBEAST_ID
from errors import UpstreamError


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "OK"
    assert "/api/youtube-age" in body["endpoints"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


def test_post_channel_id(client, directory):
    response = client.post("/api/youtube-age", json={"channel": MRBEAST_ID})

    assert response.status_code == 200
    body = response.json()
    assert body["channel_id"] == MRBEAST_ID
    assert body["is_cached"] is False
    assert set(body) >= {
        "channel_id",
        "channel_name",
        "profile_image_url",
        "creation_date",
        "account_age",
        "age_days",
        "country",
        "verification_status",
        "accuracy",
        "subscribers",
        "description",
    }
    assert directory.channel_calls == [MRBEAST_ID]


def test_post_handle_then_cache_hit(client, directory):
    client.post("/api/youtube-age", json={"channel": "@MrBeast"})
    response = client.post("/api/youtube-age", json={"channel": "@MrBeast"})

    assert response.json()["is_cached"] is True
    assert directory.channel_calls == [MRBEAST_ID]


def test_get_with_encoded_profile_url(client, directory):
    url = quote("https://www.youtube.com/@MrBeast", safe="")
    response = client.get(f"/api/youtube-age/{url}")

    assert response.status_code == 200
    assert response.json()["channel_id"] == MRBEAST_ID
    assert directory.handle_calls == ["MrBeast"]


def test_get_with_channel_id(client):
    response = client.get(f"/api/youtube-age/{MRBEAST_ID}")
    assert response.status_code == 200
    assert response.json()["channel_id"] == MRBEAST_ID


def test_empty_body_is_400(client, directory):
    for payload in ({"channel": ""}, {}):
        response = client.post("/api/youtube-age", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Channel URL or ID is required"}
    assert directory.channel_calls == []


def test_malformed_json_is_400(client):
    response = client.post(
        "/api/youtube-age", content=b'{"channel": ', headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_unresolvable_is_400(client):
    response = client.post("/api/youtube-age", json={"channel": "@ghost"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid channel URL or ID"}


def test_not_found_is_404(client):
    response = client.post("/api/youtube-age", json={"channel": "UCaaaaaaaaaaaaaaaaaaaaaa"})
    assert response.status_code == 404
    assert response.json() == {"error": "Channel not found"}


def test_upstream_status_is_forwarded(client, directory):
    directory.channel_error = UpstreamError("Failed to fetch channel data", status_code=403)
    response = client.post("/api/youtube-age", json={"channel": MRBEAST_ID})
    assert response.status_code == 403
    assert response.json() == {"error": "Failed to fetch channel data"}


def test_transport_failure_is_500(client, directory):
    directory.channel_error = UpstreamError()
    response = client.post("/api/youtube-age", json={"channel": MRBEAST_ID})
    assert response.status_code == 500
    assert response.json() == {"error": "Could not fetch channel data"}


def test_cors_preflight_for_allowed_origin(client):
    response = client.options(
        "/api/youtube-age",
        headers={
            "Origin": "https://socialagechecker.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://socialagechecker.com"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_rejects_other_origins(client):
    response = client.get("/health", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in response.headers


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_get_with_invalid_utf8_escape_is_400_without_lookup(client, directory):
    response = client.get("/api/youtube-age/%C3%28")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid channel URL or ID"}
    assert directory.handle_calls == []


def test_get_path_is_decoded_exactly_once(client, directory):
    response = client.get("/api/youtube-age/%2540MrBeast")

    assert response.status_code == 400
    assert directory.handle_calls == ["%40MrBeast"]


def test_get_with_encoded_handle(client, directory):
    response = client.get("/api/youtube-age/%40MrBeast")

    assert response.status_code == 200
    assert directory.handle_calls == ["MrBeast"]


def test_post_mixed_case_channel_url(client, directory):
    response = client.post("/api/youtube-age", json={"channel": f"https://www.YouTube.com/Channel/{MRBEAST_ID}"})

    assert response.status_code == 200
    assert response.json()["channel_id"] == MRBEAST_ID
    assert directory.handle_calls == []


def test_whitespace_only_body_is_400_required(client, directory):
    response = client.post("/api/youtube-age", json={"channel": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "Channel URL or ID is required"}
    assert directory.handle_calls == []
