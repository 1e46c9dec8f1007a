"""National Weather Service (api.weather.gov) client."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from .base import RequestConfig, UpstreamError


DEFAULT_BASE_URL = "https://api.weather.gov"
# NWS rejects requests without an identifying User-Agent.
DEFAULT_USER_AGENT = "(murphybytes.com murphybytes@gmail.com)"


@dataclass(frozen=True)
class UpstreamResponse:
    status_code: int
    content: bytes


class NWSClient:
    """Issue single GET requests against the NWS API.

    No retries are attempted; every request is bounded by
    ``request_config.timeout``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def points_url(self, latitude: str, longitude: str) -> str:
        # coordinates are forwarded verbatim, the upstream validates them
        return f"{self.base_url}/points/{latitude},{longitude}"

    def fetch(self, url: str) -> UpstreamResponse:
        response = self._request("GET", url)
        return UpstreamResponse(status_code=response.status_code, content=response.content)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "NWSClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # helpers ------------------------------------------------------------
    def _headers(self) -> dict:
        return {"User-Agent": self.user_agent, "Accept": "application/geo+json"}

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("NWS returned %s for %s: %s", response.status_code, response.url, response.text[:200])
            raise UpstreamError(
                f"API request failed with status: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request to %s timed out", url, exc_info=exc)
            raise UpstreamError(f"failed to make request: {exc}") from exc
        except requests.RequestException as exc:
            self._log.error("Request to %s failed", url, exc_info=exc)
            raise UpstreamError(f"failed to make request: {exc}") from exc
        self._log.debug("GET %s -> %s", url, response.status_code)
        return self._handle_response(response)


__all__ = ["NWSClient", "UpstreamResponse", "DEFAULT_BASE_URL", "DEFAULT_USER_AGENT"]
