import logging

import requests

from core.exceptions import UserApiError

logger = logging.getLogger(__name__)


def json_body(resp: requests.Response, fallback: str):
    """Decode a JSON body, turning a malformed one into UserApiError(fallback)."""
    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Malformed JSON from %s %s: %s", resp.request.method if resp.request else "?", resp.url, e)
        raise UserApiError(fallback, status_code=resp.status_code) from e


def error_message(resp: requests.Response, fallback: str) -> str:
    """
    Pull a user-facing message out of an error response.

    Understands {"error": "..."}, the envelope form
    {"ok": false, "error": {"message": "..."}} and FastAPI's
    {"detail": "..."}. Anything else yields ``fallback``.
    """
    try:
        data = resp.json()
    except ValueError:
        return fallback
    if not isinstance(data, dict):
        return fallback
    err = data.get("error")
    if isinstance(err, dict):
        err = err.get("message")
    if isinstance(err, str) and err:
        return err
    detail = data.get("detail")
    if isinstance(detail, str) and detail:
        return detail
    return fallback
