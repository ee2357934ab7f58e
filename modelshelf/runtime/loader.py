"""Load a prebuilt app config from a local JSON file or an HTTP(S) URL."""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any, Optional

import httpx

from ..errors import RuntimeConfigError
from .overrides import RuntimeOverrides, default_overrides

logger = logging.getLogger(__name__)

# Status codes safe to retry (transient server errors + rate limiting).
_RETRYABLE_STATUS_CODES = {502, 503, 504, 429}


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(
    url: str,
    *,
    max_retries: int = 3,
    backoff_base: float = 0.5,
    timeout: float = 15.0,
) -> httpx.Response:
    """GET with exponential backoff on connection errors and 502/503/504/429."""
    last_exc: Optional[Exception] = None
    for attempt in range(max_retries):
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True) as client:
                resp = client.get(url)

            if resp.status_code < 400:
                return resp

            if resp.status_code in _RETRYABLE_STATUS_CODES and attempt < max_retries - 1:
                wait = backoff_base * (2**attempt)
                logger.warning(
                    "Retryable HTTP %d on GET %s (attempt %d/%d, waiting %.1fs)",
                    resp.status_code,
                    url,
                    attempt + 1,
                    max_retries,
                    wait,
                )
                time.sleep(wait)
                continue

            raise RuntimeConfigError(f"GET {url} returned HTTP {resp.status_code}")

        except (httpx.ConnectError, httpx.TimeoutException, httpx.RemoteProtocolError) as exc:
            last_exc = exc
            if attempt < max_retries - 1:
                wait = backoff_base * (2**attempt)
                logger.warning(
                    "Connection error on GET %s: %s (attempt %d/%d, waiting %.1fs)",
                    url,
                    exc,
                    attempt + 1,
                    max_retries,
                    wait,
                )
                time.sleep(wait)
            else:
                raise RuntimeConfigError(
                    f"Request failed after {max_retries} attempts: {exc}"
                ) from exc

    raise RuntimeConfigError(
        f"Request failed after {max_retries} attempts"
        + (f": {last_exc}" if last_exc else "")
    )


def _decode(raw: str, source: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, ValueError) as exc:
        raise RuntimeConfigError(f"{source} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise RuntimeConfigError(f"{source} must contain a JSON object")
    return data


def load_app_config(source: str) -> dict[str, Any]:
    """Read a prebuilt app config from *source* (file path or URL)."""
    if _is_url(source):
        logger.debug("Fetching runtime config from %s", source)
        return _decode(_fetch(source).text, source)

    path = os.path.expanduser(source)
    logger.debug("Reading runtime config from %s", path)
    try:
        with open(path) as f:
            raw = f.read()
    except OSError as exc:
        raise RuntimeConfigError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return _decode(raw, path)


def load_overrides(source: Optional[str] = None) -> RuntimeOverrides:
    """Runtime overrides from *source*, or the bundled config when None/empty."""
    if not source:
        return default_overrides()
    return RuntimeOverrides.from_app_config(load_app_config(source))
