"""HTTP retrieval of the shared document."""

from __future__ import annotations

import requests

from .config import DEFAULT_TIMEOUT
from .errors import FetchError
from .logging_config import get_logger

logger = get_logger(__name__)


def fetch_document(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Issue a single GET for ``url`` and return the decoded body.

    Raises:
        FetchError: On any transport failure or a non-2xx status code.
    """
    logger.debug(f"Fetching {url}")
    try:
        with requests.get(url, timeout=timeout) as response:
            if not 200 <= response.status_code < 300:
                raise FetchError(
                    f"Failed to fetch document: HTTP {response.status_code}"
                )
            if response.encoding is None:
                response.encoding = response.apparent_encoding
            body = response.text
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch document: {exc}") from exc

    logger.debug(f"Fetched {len(body)} characters from {url}")
    return body


__all__ = ["fetch_document"]
