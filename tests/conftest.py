"""
Shared fixtures.

Every test gets a fresh app bound to a file-backed SQLite database under
``tmp_path``. A file (rather than ``sqlite://``) lets the dashboard's worker
threads, each with their own connection, see the same rows as the request.
"""
import pytest

from donation_admin import create_app
from donation_admin.client import ApiClient, SessionStore
from donation_admin.config import TestingConfig
from donation_admin.extensions import db


@pytest.fixture
def app(tmp_path):
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"

    app = create_app(_Config)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username="admin", key="ray-hope-2024"):
    return client.post("/api/auth/login", json={"username": username, "accessKey": key})


@pytest.fixture
def token(client):
    resp = login(client)
    assert resp.status_code == 200
    return resp.get_json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make(client, auth_headers):
    """POST a payload to an entity collection and return the created record."""
    def _make(collection, payload):
        resp = client.post(f"/api/{collection}", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


# ---------------- HTTP adapter for the console client ----------------
class _Response:
    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code
        self.content = resp.data

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("response body is not JSON")
        return data


class FlaskHttp:
    """Quacks like requests.Session.request, but drives the Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = url.split("://", 1)[-1]
        path = path[path.index("/"):]
        self.calls.append((method, path))
        return _Response(self.test_client.open(path, method=method, json=json, headers=headers))


@pytest.fixture
def http(client):
    return FlaskHttp(client)


@pytest.fixture
def api(http, tmp_path):
    return ApiClient("http://testserver/api", store=SessionStore(tmp_path / "session.json"), http=http)


@pytest.fixture
def logged_in_api(api):
    api.login("admin", "ray-hope-2024")
    return api
