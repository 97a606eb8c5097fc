"""HTTP client for the hosted serverless functions (job search, interview, resume)."""
from __future__ import annotations

from typing import Any

import requests

from careerpilot.log import get_logger
from careerpilot.remote.base import RemoteError, RemoteFunctions
from careerpilot.retry import retry

log = get_logger(__name__)


class FunctionsClient(RemoteFunctions):
    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        *,
        timeout: float = 20.0,
        max_attempts: int = 3,
        base_delay: float = 2.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        self._post = retry(
            max_attempts=max_attempts,
            base_delay=base_delay,
            retryable=(requests.RequestException,),
        )(self._post_once)

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/functions/v1/{name}"

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["apikey"] = self.api_key
        return headers

    def _post_once(self, name: str, body: dict[str, Any]) -> requests.Response:
        r = self.session.post(self.url_for(name), json=body, headers=self._headers(), timeout=self.timeout)
        # 5xx is worth another attempt; 4xx is not
        if r.status_code >= 500:
            r.raise_for_status()
        return r

    def invoke(self, name: str, body: dict[str, Any]) -> Any:
        if not self.base_url:
            raise RemoteError(name, "functions endpoint not configured")

        try:
            r = self._post(name, body)
        except requests.RequestException as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise RemoteError(name, str(exc), status_code=status) from exc

        if not r.ok:
            raise RemoteError(name, f"HTTP {r.status_code}: {r.text[:200]}", status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as exc:
            raise RemoteError(name, "response is not valid JSON", status_code=r.status_code) from exc

        log.debug("%s returned HTTP %d", name, r.status_code)
        return data
