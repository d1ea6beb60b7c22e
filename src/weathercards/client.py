# OOP boundary for external i/o
# all http/keys live here, so the rest of the code is pure and testable
# use a thread-local session per ThreadPoolExecutor worker

from __future__ import annotations
import logging
import os
import threading
from typing import Any, Dict

import requests
from requests.adapters import HTTPAdapter

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import CityNotFound, HttpError, MalformedPayload, NetworkError, NotConfigured, Unauthorized

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    # encapsulates provider details like base URL, params, auth and timeout
    # no retries: one search is one request and one reported outcome

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = "weathercards/0.1",
    ):
        self.api_key = api_key or os.getenv("OPENWEATHER_API_KEY")
        if not self.api_key:
            # fail when key is missing to avoid confusing downstream errors
            raise NotConfigured(
                "API key not configured. Please add OPENWEATHER_API_KEY to your .env file."
            )

        self.base_url = (base_url or os.getenv("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

        # each worker thread lazily obtains its own session through _session()
        self._local = threading.local()

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.user_agent})
        adapter = HTTPAdapter(max_retries=0)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _session(self) -> requests.Session:
        sess = getattr(self._local, "session", None)
        if sess is None:
            sess = self._build_session()
            self._local.session = sess
        return sess

    def get_city_forecast(self, city: str) -> Dict[str, Any]:
        # fetch the 5 day / 3 hour forecast JSON for one city in metric units
        query = (city or "").strip()
        if not query:
            raise ValueError("city must be a non-empty string")

        params = {"q": query, "appid": self.api_key, "units": "metric"}
        url = f"{self.base_url}/forecast"
        logger.debug("GET %s q=%r", url, query)

        try:
            resp = self._session().get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Request error for {query!r}: {exc}") from exc

        if resp.status_code == 404:
            raise CityNotFound(query)
        if resp.status_code == 401:
            raise Unauthorized(f"HTTP 401 for {query!r}: API key rejected")
        if resp.status_code >= 400:
            # include a short response snippet to speed up triage
            snippet = (resp.text or "")[:300]
            logger.warning("forecast request for %r failed with HTTP %d", query, resp.status_code)
            raise HttpError(resp.status_code, f"HTTP {resp.status_code} for {query!r}. Body: {snippet}")

        try:
            return resp.json()
        except ValueError as exc:
            raise MalformedPayload(f"Invalid JSON for {query!r}: {exc}") from exc
