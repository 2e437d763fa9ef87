"""Client-side admin session flag with a soft expiry.

This only gates the local admin tooling. It is not a security boundary: the
server checks its own bearer token on every write.
"""

import hmac
import json
import logging
import time
from pathlib import Path

import config

logger = logging.getLogger(__name__)


class AdminSession:
    def __init__(
        self,
        path: Path | None = None,
        password: str | None = None,
        ttl_seconds: int | None = None,
    ):
        self.path = Path(path or config.ADMIN_SESSION_FILE)
        self.password = config.ADMIN_PASSWORD if password is None else password
        self.ttl_seconds = config.ADMIN_SESSION_TTL_SECONDS if ttl_seconds is None else ttl_seconds

    def login(self, password: str, now: float | None = None) -> bool:
        if not self.password or not hmac.compare_digest(password.encode(), self.password.encode()):
            logger.info("Admin login rejected")
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"admin_auth": True, "admin_auth_time": time.time() if now is None else now}),
            encoding="utf-8",
        )
        return True

    def logout(self) -> None:
        self.path.unlink(missing_ok=True)

    def logged_in_at(self) -> float | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        if not isinstance(data, dict) or data.get("admin_auth") is not True:
            return None
        stamp = data.get("admin_auth_time")
        return float(stamp) if isinstance(stamp, (int, float)) else None

    def is_authenticated(self, now: float | None = None) -> bool:
        stamp = self.logged_in_at()
        if stamp is None:
            return False
        current = time.time() if now is None else now
        if current - stamp < self.ttl_seconds:
            return True
        self.logout()
        return False
