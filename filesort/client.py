"""Shared HTTP client for talking to a filesort server."""
from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter

from filesort.config import get_server_url


def _make_session() -> requests.Session:
    session = requests.Session()
    adapter = HTTPAdapter()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


# Module-level singleton — reuses TCP connections across all requests in a process
_session: requests.Session | None = None


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = _make_session()
    return _session


def api_url(path: str) -> str:
    """Construct full API URL from config server URL + path."""
    base = get_server_url().rstrip("/")
    return f"{base}{path}"


def post(path: str, data: Any) -> Any:
    resp = _get_session().post(api_url(path), json=data, timeout=(5, 30))
    resp.raise_for_status()
    return resp.json()
