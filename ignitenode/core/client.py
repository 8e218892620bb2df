import logging

import requests

from ignitenode.core.delta import Delta

logger = logging.getLogger(__name__)


class TransportError(RuntimeError):
    pass


class AuthenticationError(TransportError):
    pass


class IgniteClient:
    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.token = None
        self.user = None

    def _headers(self):
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _post(self, path: str, payload: dict) -> dict:
        url = f"{self.base_url}{path}"

        try:
            response = requests.post(
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e

        try:
            data = response.json()
        except ValueError:
            raise TransportError(f"Invalid response: {response.text}")

        if not response.ok:  # status bukan 2xx
            message = data.get("message") if isinstance(data, dict) else None
            raise TransportError(message or f"HTTP {response.status_code}")

        return data

    def login(self, email: str, password: str) -> dict:
        """
        Authenticate and keep the bearer token for later requests.
        Returns the user record sent back by the server.
        """
        try:
            data = self._post("/api/auth/login", {"email": email, "password": password})
        except TransportError as e:
            raise AuthenticationError(str(e)) from e

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError("Login response did not contain a token")

        self.token = token
        self.user = data.get("user") or {}
        return self.user

    def send_bandwidth(self, delta: Delta) -> dict:
        if not self.token:
            raise TransportError("Not authenticated")

        return self._post(
            "/api/bandwidth",
            {"bytesUp": delta.bytes_out, "bytesDown": delta.bytes_in},
        )
