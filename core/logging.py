"""
Logging setup and outgoing request logging.

- configure_logging() sets the root level/format once per process.
- Every API call carries an X-Request-ID header (UUID4, see new_request_id).
- log_response is a requests response hook; it logs method, path, status,
  latency and request id.
"""
import logging
import uuid

import requests

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("user_directory.requests")


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once handlers exist, so Streamlit reruns are safe
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


def new_request_id() -> str:
    return str(uuid.uuid4())


def log_response(response: requests.Response, *args, **kwargs):
    request = response.request
    latency = response.elapsed.total_seconds() * 1000.0
    logger.info(
        "[request] id=%s method=%s path=%s status=%s latency_ms=%.2f",
        request.headers.get("X-Request-ID", "-"), request.method, request.path_url,
        response.status_code, latency,
    )
    return response
