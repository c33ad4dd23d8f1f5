import logging
from typing import List, Union

import requests
from pydantic import ValidationError

from config.settings import settings
from core.exceptions import DELETE_ERROR, FETCH_ERROR, SAVE_ERROR, UserApiError
from core.logging import log_response, new_request_id
from core.response import error_message, json_body
from models.user import FormData, User

logger = logging.getLogger(__name__)

UserId = Union[int, str]


class UserApiClient:
    """
    Thin client for the users REST API.

    Every failure (transport error, non-2xx status, malformed body) is
    raised as UserApiError carrying a message ready for display.
    """

    def __init__(self, base_url: str | None = None, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.base_url = (base_url or settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        if log_response not in self.session.hooks["response"]:
            self.session.hooks["response"].append(log_response)

    def user_url(self, user_id: UserId) -> str:
        return f"{self.base_url}/{user_id}"

    def _request(self, method: str, url: str, fallback: str, json: dict | None = None) -> requests.Response:
        headers = {"X-Request-ID": new_request_id()}
        if json is not None:
            headers["Content-Type"] = "application/json"
        try:
            return self.session.request(method, url, json=json, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise UserApiError(fallback) from e

    # --- operations ---

    def list_users(self) -> List[User]:
        resp = self._request("GET", self.base_url, FETCH_ERROR)
        if not resp.ok:
            logger.warning("List users returned %s", resp.status_code)
            raise UserApiError(FETCH_ERROR, status_code=resp.status_code)
        data = json_body(resp, FETCH_ERROR)
        if not isinstance(data, list):
            logger.warning("List users returned a %s, expected a list", type(data).__name__)
            raise UserApiError(FETCH_ERROR, status_code=resp.status_code)
        try:
            return [User.model_validate(item) for item in data]
        except ValidationError as e:
            logger.warning("List users returned malformed records: %s", e)
            raise UserApiError(FETCH_ERROR, status_code=resp.status_code) from e

    def _save(self, method: str, url: str, form: FormData) -> None:
        resp = self._request(method, url, SAVE_ERROR, json=form.model_dump())
        if not resp.ok:
            message = error_message(resp, SAVE_ERROR)
            logger.warning("%s %s returned %s: %s", method, url, resp.status_code, message)
            raise UserApiError(message, status_code=resp.status_code)

    def create_user(self, form: FormData) -> None:
        self._save("POST", self.base_url, form)

    def update_user(self, user_id: UserId, form: FormData) -> None:
        self._save("PUT", self.user_url(user_id), form)

    def delete_user(self, user_id: UserId) -> None:
        url = self.user_url(user_id)
        resp = self._request("DELETE", url, DELETE_ERROR)
        if not resp.ok:
            logger.warning("DELETE %s returned %s", url, resp.status_code)
            raise UserApiError(DELETE_ERROR, status_code=resp.status_code)
