import json
import os
from pathlib import Path

DEFAULT_SESSION_PATH = Path(os.environ.get("DONATION_ADMIN_HOME", Path.home() / ".donation_admin")) / "session.json"


class SessionStore:
    """Bearer token and username persisted between runs; cleared on logout."""

    def __init__(self, path=None):
        self.path = Path(path) if path else DEFAULT_SESSION_PATH

    def load(self):
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, token, username):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token, "username": username}), encoding="utf-8")
        os.chmod(self.path, 0o600)

    def clear(self):
        if self.path.exists():
            self.path.unlink()

    @property
    def token(self):
        return self.load().get("token")

    @property
    def username(self):
        return self.load().get("username")
