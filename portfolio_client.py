import logging
from pathlib import Path
from typing import Any

import httpx

import config

logger = logging.getLogger(__name__)

LOCAL_HOSTNAMES = {"localhost", "127.0.0.1", "[::1]", "::1"}

RESOURCE_LABELS = {
    "skills": "skills",
    "certifications": "certifications",
    "achievements": "achievements",
    "projects": "projects",
    "experiences": "experiences",
    "services": "services",
    "contact-info": "contact info",
    "about": "about info",
}


class PortfolioClientError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def resolve_base_url(hostname: str | None = None) -> str:
    if config.PORTFOLIO_API_URL and hostname is None:
        return config.PORTFOLIO_API_URL.rstrip("/")
    if (hostname or "localhost").lower() in LOCAL_HOSTNAMES:
        return config.LOCAL_API_URL.rstrip("/")
    return config.DEPLOYED_API_URL.rstrip("/")


def _json_body(response: httpx.Response, message: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise PortfolioClientError(message, response.status_code) from exc


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return fallback


class PortfolioClient:
    """Thin wrapper over the content API: one read and one write per resource."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = (base_url or resolve_base_url()).rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout_seconds, transport=transport)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "PortfolioClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self, resource: str) -> Any:
        label = RESOURCE_LABELS[resource]
        try:
            resp = self._http.get(f"/{resource}")
        except httpx.HTTPError as exc:
            raise PortfolioClientError(f"Failed to fetch {label}") from exc
        if resp.is_error:
            raise PortfolioClientError(f"Failed to fetch {label}", resp.status_code)
        return _json_body(resp, f"Failed to fetch {label}")

    def save(self, resource: str, payload: Any, token: str) -> dict:
        label = RESOURCE_LABELS[resource]
        logger.info("Saving resource=%s base_url=%s", resource, self.base_url)
        try:
            resp = self._http.put(
                f"/{resource}",
                json=payload,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as exc:
            raise PortfolioClientError(f"Failed to save {label}") from exc
        if resp.is_error:
            raise PortfolioClientError(_error_message(resp, f"Failed to save {label}"), resp.status_code)
        return _json_body(resp, f"Failed to save {label}")

    def upload_image(self, source: str | Path | bytes, token: str, filename: str | None = None) -> dict:
        if isinstance(source, bytes):
            content = source
            name = filename or "upload"
        else:
            path = Path(source)
            content = path.read_bytes()
            name = filename or path.name

        try:
            resp = self._http.post(
                "/upload",
                files={"image": (name, content)},
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as exc:
            raise PortfolioClientError("Image upload failed") from exc
        if resp.is_error:
            raise PortfolioClientError(_error_message(resp, "Image upload failed"), resp.status_code)
        result = _json_body(resp, "Image upload failed")
        if not isinstance(result, dict) or "url" not in result:
            raise PortfolioClientError("Image upload failed", resp.status_code)
        logger.info("Uploaded image name=%s url=%s", name, result["url"])
        return result

    def fetch_skills(self) -> list[dict]:
        return self.fetch("skills")

    def fetch_certifications(self) -> list[dict]:
        return self.fetch("certifications")

    def fetch_achievements(self) -> list[dict]:
        # Hosts without this endpoint answer 404 or an HTML page; show nothing.
        try:
            resp = self._http.get("/achievements")
        except httpx.HTTPError as exc:
            raise PortfolioClientError("Failed to fetch achievements") from exc
        if resp.status_code == 404:
            return []
        if resp.is_error:
            raise PortfolioClientError("Failed to fetch achievements", resp.status_code)
        try:
            return resp.json()
        except ValueError:
            return []

    def fetch_projects(self) -> list[dict]:
        return self.fetch("projects")

    def fetch_experiences(self) -> list[dict]:
        return self.fetch("experiences")

    def fetch_services(self) -> list[dict]:
        return self.fetch("services")

    def fetch_contact_info(self) -> dict:
        return self.fetch("contact-info")

    def fetch_about(self) -> dict:
        return self.fetch("about")

    def save_skills(self, skills: list[dict], token: str) -> dict:
        return self.save("skills", skills, token)

    def save_certifications(self, certifications: list[dict], token: str) -> dict:
        return self.save("certifications", certifications, token)

    def save_achievements(self, achievements: list[dict], token: str) -> dict:
        return self.save("achievements", achievements, token)

    def save_projects(self, projects: list[dict], token: str) -> dict:
        return self.save("projects", projects, token)

    def save_experiences(self, experiences: list[dict], token: str) -> dict:
        return self.save("experiences", experiences, token)

    def save_services(self, services: list[dict], token: str) -> dict:
        return self.save("services", services, token)

    def save_contact_info(self, contact_info: dict, token: str) -> dict:
        return self.save("contact-info", contact_info, token)

    def save_about(self, about: dict, token: str) -> dict:
        return self.save("about", about, token)
