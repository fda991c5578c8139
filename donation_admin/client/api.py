import logging
import os
from pathlib import Path

import requests

from .session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.environ.get("DONATION_ADMIN_API", "http://localhost:5000/api")


class ApiClientError(Exception):
    def __init__(self, message, status_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ApiClient:
    """Thin wrapper over the REST API. Every call sends the stored bearer token."""

    def __init__(self, base_url=DEFAULT_BASE_URL, store=None, http=None, timeout=15):
        self.base_url = base_url.rstrip("/")
        self.store = store or SessionStore()
        self.http = http or requests.Session()
        self.timeout = timeout

    # ---------------- Plumbing ----------------
    def _headers(self):
        headers = {"Content-Type": "application/json"}
        token = self.store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method, endpoint, body=None):
        url = f"{self.base_url}{endpoint}"
        try:
            resp = self.http.request(method, url, json=body, headers=self._headers(), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiClientError("Network error") from exc

        if not resp.ok:
            try:
                payload = resp.json()
            except ValueError:
                payload = {}
            raise ApiClientError(
                payload.get("error") or "Request failed",
                status_code=resp.status_code,
                details=payload.get("details"),
            )
        return resp

    def request(self, method, endpoint, body=None):
        return self._send(method, endpoint, body).json()

    # ---------------- Auth ----------------
    @property
    def username(self):
        return self.store.username

    @property
    def is_authenticated(self):
        return bool(self.store.token and self.store.username)

    def login(self, username, access_key):
        data = self.request("POST", "/auth/login", {"username": username, "accessKey": access_key})
        self.store.save(data["token"], data["username"])
        return data

    def logout(self):
        self.store.clear()

    # ---------------- Dashboard ----------------
    def get_dashboard_stats(self):
        return self.request("GET", "/dashboard/stats")

    def get_monthly_analytics(self):
        return self.request("GET", "/analytics/monthly")

    # ---------------- Expenses ----------------
    def get_expenses(self):
        return self.request("GET", "/expenses")

    def create_expense(self, data):
        return self.request("POST", "/expenses", data)

    def update_expense(self, expense_id, data):
        return self.request("PUT", f"/expenses/{expense_id}", data)

    def delete_expense(self, expense_id):
        return self.request("DELETE", f"/expenses/{expense_id}")

    # ---------------- Donations / campaigns / donors / beneficiaries ----------------
    def get_donations(self):
        return self.request("GET", "/donations")

    def create_donation(self, data):
        return self.request("POST", "/donations", data)

    def get_campaigns(self):
        return self.request("GET", "/campaigns")

    def create_campaign(self, data):
        return self.request("POST", "/campaigns", data)

    def get_donors(self):
        return self.request("GET", "/donors")

    def create_donor(self, data):
        return self.request("POST", "/donors", data)

    def get_beneficiaries(self):
        return self.request("GET", "/beneficiaries")

    def create_beneficiary(self, data):
        return self.request("POST", "/beneficiaries", data)

    # ---------------- Export ----------------
    def export_expenses(self, destination="expenses.xlsx"):
        """Download the expense spreadsheet and write it to ``destination``."""
        resp = self._send("GET", "/export/expenses")
        path = Path(destination)
        path.write_bytes(resp.content)
        return path
