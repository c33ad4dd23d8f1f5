import json
import sys
from pathlib import Path

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict


# Ensure project root is on sys.path so `services.*` imports work
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from models.view_state import ViewState
from services.user_api import UserApiClient
from services.user_directory import UserDirectory

BASE_URL = "http://testserver/api/users"


class FakeUsersBackend(BaseAdapter):
    """
    In-memory stand-in for the users API, mounted on a requests.Session.

    Records every request in ``calls`` as (method, path, json body).
    ``fail_next`` queues canned (status, body) replies that take priority
    over the normal handling; a body of ``None`` sends no content, and an
    Exception instance is raised as a transport error instead. ``on_request``,
    when set, is called with each request before it is answered.
    """

    def __init__(self, users=None):
        super().__init__()
        self.users = list(users or [])
        self.next_id = max((u["id"] for u in self.users), default=0) + 1
        self.calls = []
        self.fail_next = []
        self.on_request = None

    # --- requests adapter API ---

    def send(self, request, **kwargs):
        path = request.path_url
        body = json.loads(request.body) if request.body else None
        self.calls.append((request.method, path, body))
        if self.on_request is not None:
            self.on_request(request)

        if self.fail_next:
            canned = self.fail_next.pop(0)
            if isinstance(canned, Exception):
                raise canned
            status, payload = canned
        else:
            status, payload = self._handle(request.method, path, body)
        return self._response(request, status, payload)

    def close(self):
        pass

    # --- fake API ---

    def _handle(self, method, path, body):
        parts = path.strip("/").split("/")  # ["api", "users", id?]
        if len(parts) == 2:
            if method == "GET":
                return 200, self.users
            if method == "POST":
                if any(u["email"] == body["email"] for u in self.users):
                    return 400, {"error": "email taken"}
                user = {"id": self.next_id, **body}
                self.next_id += 1
                self.users.append(user)
                return 201, user
        elif len(parts) == 3:
            user = next((u for u in self.users if str(u["id"]) == parts[2]), None)
            if user is None:
                return 404, {"error": "User not found"}
            if method == "PUT":
                user.update(body)
                return 200, user
            if method == "DELETE":
                self.users.remove(user)
                return 200, {"message": "User deleted"}
        return 405, {"error": "Method not allowed"}

    @staticmethod
    def _response(request, status, payload):
        resp = requests.Response()
        resp.status_code = status
        resp.request = request
        resp.url = request.url
        resp.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        if payload is None:
            resp._content = b""
        elif isinstance(payload, bytes):
            resp._content = payload
        else:
            resp._content = json.dumps(payload).encode("utf-8")
        resp.encoding = "utf-8"
        return resp


@pytest.fixture()
def backend():
    return FakeUsersBackend(users=[
        {"id": 1, "name": "Ann", "email": "a@x.com"},
        {"id": 2, "name": "Bo", "email": "b@x.com", "phone": "555-0102"},
    ])


@pytest.fixture()
def client(backend):
    session = requests.Session()
    session.mount("http://testserver", backend)
    return UserApiClient(base_url=BASE_URL, session=session)


@pytest.fixture()
def directory(client):
    """A controller that has not fetched anything yet."""
    return UserDirectory(client=client, state=ViewState())
