"""
HTTP Utility module for provider requests.
One GET per call: no retries here. Retrying is the caller's decision, and transport
failures are not retried across credentials.
"""

from typing import Any, Dict, Optional

import requests

from data_acquisition.errors import TransportError
from utils.logger import setup_logger

logger = setup_logger('http_utils')

# Truncation for bodies echoed into logs/errors
BODY_PREVIEW_CHARS = 500

JSON_HEADERS = {"Accept": "application/json"}


def get_json(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: float = 30,
    source_name: str = "API"
) -> Dict[str, Any]:
    """
    Make a single HTTP GET and decode a JSON object body.

    Args:
        session: requests session to issue the call on
        url: The full URL to request.
        params: Query parameters dictionary.
        timeout: Per-request timeout in seconds.
        source_name: Name of the data source for logging.

    Returns:
        Decoded JSON object.

    Raises:
        TransportError: network failure, timeout, non-2xx status, or a body that is
            not a JSON object (e.g. the provider answered in CSV).
    """
    try:
        response = session.get(url, params=params, headers=JSON_HEADERS, timeout=timeout)
    except requests.exceptions.RequestException as e:
        logger.error(f"{source_name} connection error: {e}")
        raise TransportError(f"{source_name} request failed: {e}") from e

    if not response.ok:
        logger.error(f"{source_name} HTTP {response.status_code}: {response.reason}")
        raise TransportError(
            f"{source_name} request failed: HTTP {response.status_code} {response.reason}",
            status_code=response.status_code
        )

    try:
        data = response.json()
    except ValueError as e:
        preview = (response.text or '')[:BODY_PREVIEW_CHARS]
        logger.error(f"{source_name} JSON parsing error. Body starts with: {preview}")
        raise TransportError(
            f"Invalid JSON response from {source_name}. Response may be CSV format or corrupted.",
            status_code=response.status_code
        ) from e

    if not isinstance(data, dict):
        raise TransportError(
            f"Unexpected {type(data).__name__} response from {source_name}; expected a JSON object.",
            status_code=response.status_code
        )

    return data
