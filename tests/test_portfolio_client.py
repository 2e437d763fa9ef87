import json

import httpx
import pytest

import config
import portfolio_client
from portfolio_client import PortfolioClient, PortfolioClientError, resolve_base_url


def make_client(handler) -> PortfolioClient:
    return PortfolioClient("http://api.test", transport=httpx.MockTransport(handler))


@pytest.mark.parametrize("hostname", ["localhost", "127.0.0.1", "[::1]", "LOCALHOST"])
def test_local_hostnames_use_local_api(monkeypatch, hostname):
    monkeypatch.setattr(config, "LOCAL_API_URL", "http://localhost:4000/")

    assert resolve_base_url(hostname) == "http://localhost:4000"


def test_other_hostnames_use_deployed_api(monkeypatch):
    monkeypatch.setattr(config, "DEPLOYED_API_URL", "https://api.example.com")

    assert resolve_base_url("portfolio.example.com") == "https://api.example.com"


def test_explicit_api_url_wins(monkeypatch):
    monkeypatch.setattr(config, "PORTFOLIO_API_URL", "https://staging.example.com/")

    assert resolve_base_url() == "https://staging.example.com"


def test_fetch_skills():
    skills = [{"title": "Backend", "icon": "server", "skills": "Node,Express"}]

    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/skills"
        return httpx.Response(200, json=skills)

    with make_client(handler) as client:
        assert client.fetch_skills() == skills


def test_fetch_failure_raises():
    with make_client(lambda request: httpx.Response(500, text="boom")) as client:
        with pytest.raises(PortfolioClientError, match="Failed to fetch contact info"):
            client.fetch_contact_info()


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={"error": "Not Found"}),
        httpx.Response(200, text="<html>maintenance</html>"),
    ],
)
def test_fetch_achievements_degrades_to_empty(response):
    with make_client(lambda request: response) as client:
        assert client.fetch_achievements() == []


def test_fetch_achievements_other_errors_raise():
    with make_client(lambda request: httpx.Response(502)) as client:
        with pytest.raises(PortfolioClientError):
            client.fetch_achievements()


def test_save_sends_whole_collection_with_bearer_token():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True})

    services = [{"title": "Web", "description": "Sites", "features": ["SEO"]}]
    with make_client(handler) as client:
        assert client.save_services(services, "tok") == {"success": True}

    assert seen == {"method": "PUT", "auth": "Bearer tok", "body": services}


def test_save_surfaces_server_error_message():
    def handler(request):
        return httpx.Response(400, json={"error": "Each service must have a title and description."})

    with make_client(handler) as client:
        with pytest.raises(PortfolioClientError) as excinfo:
            client.save_services([{"title": "Web"}], "tok")

    assert str(excinfo.value) == "Each service must have a title and description."
    assert excinfo.value.status_code == 400


def test_save_falls_back_to_generic_message():
    with make_client(lambda request: httpx.Response(500, text="Internal Server Error")) as client:
        with pytest.raises(PortfolioClientError, match="Failed to save about info"):
            client.save_about({"intro": "Hi"}, "tok")


def test_upload_image_posts_multipart(tmp_path):
    image = tmp_path / "avatar.png"
    image.write_bytes(b"png-bytes")

    def handler(request):
        assert request.url.path == "/upload"
        assert request.headers["Authorization"] == "Bearer tok"
        assert b'name="image"; filename="avatar.png"' in request.content
        assert b"png-bytes" in request.content
        return httpx.Response(200, json={"url": "/uploads/1-2-avatar.png"})

    with make_client(handler) as client:
        assert client.upload_image(image, "tok") == {"url": "/uploads/1-2-avatar.png"}


def test_upload_failure_message():
    with make_client(lambda request: httpx.Response(400, json={"error": "No file uploaded"})) as client:
        with pytest.raises(PortfolioClientError, match="No file uploaded"):
            client.upload_image(b"", "tok", filename="empty.png")


def test_transport_errors_are_wrapped():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with make_client(handler) as client:
        with pytest.raises(PortfolioClientError, match="Failed to fetch projects"):
            client.fetch_projects()


def test_default_base_url_is_resolved(monkeypatch):
    monkeypatch.setattr(config, "PORTFOLIO_API_URL", "")
    monkeypatch.setattr(config, "LOCAL_API_URL", "http://localhost:4000")

    with portfolio_client.PortfolioClient() as client:
        assert client.base_url == "http://localhost:4000"


@pytest.mark.parametrize(
    "call, message",
    [
        (lambda client: client.fetch_skills(), "Failed to fetch skills"),
        (lambda client: client.save_projects([], "tok"), "Failed to save projects"),
        (lambda client: client.upload_image(b"png", "tok", filename="a.png"), "Image upload failed"),
    ],
)
def test_non_json_success_body_raises_client_error(call, message):
    with make_client(lambda request: httpx.Response(200, text="<html>proxy page</html>")) as client:
        with pytest.raises(PortfolioClientError, match=message):
            call(client)


def test_upload_response_without_url_raises():
    with make_client(lambda request: httpx.Response(200, json={"ok": True})) as client:
        with pytest.raises(PortfolioClientError, match="Image upload failed"):
            client.upload_image(b"png", "tok", filename="a.png")
