from __future__ import annotations

import logging
from typing import Any

import requests

from harga_pangan.domain import ProviderError

DEFAULT_BASE_URL = "https://panelharga.badanpangan.go.id"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "harga-pangan/0.1"

logger = logging.getLogger(__name__)


class PanelHargaClient:
    """Thin wrapper over a requests session for the price panel JSON API.

    Every failure mode of a single GET (network error, timeout, non-2xx
    status, undecodable body) surfaces as ProviderError.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {"User-Agent": user_agent, "Accept": "application/json"}
        )
        self._request_count = 0

    @property
    def request_count(self) -> int:
        return self._request_count

    def build_url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def get_json(self, path: str) -> Any:
        url = self.build_url(path)
        logger.debug("Price panel request url=%s", url)
        self._request_count += 1
        try:
            response = self._session.get(url, timeout=self._timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ProviderError(
                str(exc) or exc.__class__.__name__, context={"url": url}
            ) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise ProviderError(
                f"Invalid JSON body: {exc}", context={"url": url}
            ) from exc

    def close(self) -> None:
        self._session.close()
