import json
from http import HTTPStatus
from urllib.parse import urlparse

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from smartcare.client import SmartCareClient
from smartcare.config import ApiConfig, AppConfig, Settings, StorageConfig

BASE_URL = "http://testserver"

REQUIRED_FIELDS = {
    'patients': ('name', 'age'),
    'guardians': ('name', 'tel'),
    'accidents': ('patientId',),
    'cameras': ('name',),
    'messages': ('message',),
    'users': ('username', 'name', 'role'),
    'rooms': ('name',),
    'env-logs': ('roomId',),
}


class FakeBackend(BaseAdapter):
    """In-memory stand-in for the REST API, mounted on a requests.Session"""

    def __init__(self):
        super().__init__()
        self.accounts = {
            1: {'id': 1, 'username': 'a', 'role': 'nurse', 'name': 'A'},
            2: {'id': 2, 'username': 'boss', 'role': 'director', 'name': 'Boss',
                'preferredLanguage': 'en'},
            3: {'id': 3, 'username': 'pat', 'role': 'patient', 'name': 'Pat'},
        }
        self.passwords = {'a': 'pw', 'boss': 'pw', 'pat': 'pw'}
        self.collections = {name: {} for name in REQUIRED_FIELDS if name != 'users'}
        self.collections['users'] = self.accounts
        self.next_id = 100
        self.session_user = None
        self.login_token = None
        self.down = False
        self.forced = {}
        self.calls = []

    def login_as(self, user_id):
        self.session_user = user_id

    def force(self, method, path, status, message=''):
        self.forced[(method, path)] = (status, message)

    def seed(self, collection, **fields):
        self.next_id += 1
        record = {'id': self.next_id, **fields}
        self.collections[collection][self.next_id] = record
        return record

    def close(self):
        pass

    def send(self, request, **kwargs):
        if self.down:
            raise requests.ConnectionError("backend unreachable")
        path = urlparse(request.url).path
        body = json.loads(request.body) if request.body else None
        self.calls.append((request.method, path, body, dict(request.headers)))

        if (request.method, path) in self.forced:
            status, message = self.forced[(request.method, path)]
            return self._response(request, status, {'message': message} if message else None)
        return self._route(request, request.method, path, body)

    def _route(self, request, method, path, body):
        if path == '/api/login':
            username = (body or {}).get('username')
            if self.passwords.get(username) != (body or {}).get('password'):
                return self._response(request, 401, {'message': 'Invalid credentials'})
            user = next(u for u in self.accounts.values() if u['username'] == username)
            self.session_user = user['id']
            payload = dict(user)
            if self.login_token:
                payload['token'] = self.login_token
            return self._response(request, 200, payload)
        if path == '/api/register':
            missing = [f for f in REQUIRED_FIELDS['users'] if not (body or {}).get(f)]
            if missing:
                return self._response(request, 400, {'message': f"{missing[0]} is required"})
            record = self._insert('users', {k: v for k, v in body.items() if k != 'password'})
            self.passwords[record['username']] = body.get('password')
            self.session_user = record['id']
            return self._response(request, 201, record)
        if path == '/api/logout':
            self.session_user = None
            return self._response(request, 200)
        if path == '/api/user':
            if self.session_user is None:
                return self._response(request, 401, {'message': 'Unauthorized'})
            return self._response(request, 200, self.accounts[self.session_user])

        if self.session_user is None:
            return self._response(request, 401, {'message': 'Unauthorized'})

        parts = [p for p in path.split('/') if p]
        if len(parts) < 2 or parts[0] != 'api' or parts[1] not in self.collections:
            return self._response(request, 404, {'message': 'Not found'})
        collection = self.collections[parts[1]]

        if len(parts) == 2:
            if method == 'GET':
                return self._response(request, 200, list(collection.values()))
            if method == 'POST':
                missing = [f for f in REQUIRED_FIELDS[parts[1]] if (body or {}).get(f) in (None, '')]
                if missing:
                    return self._response(request, 400, {'message': f"{missing[0]} is required"})
                return self._response(request, 201, self._insert(parts[1], body))
            return self._response(request, 405)

        entity_id = int(parts[2])
        if entity_id not in collection:
            return self._response(request, 404, {'message': f"{parts[1]} {entity_id} not found"})
        if method == 'PUT':
            collection[entity_id] = {**collection[entity_id], **(body or {}), 'id': entity_id}
            return self._response(request, 200, collection[entity_id])
        if method == 'DELETE':
            del collection[entity_id]
            return self._response(request, 204)
        return self._response(request, 405)

    def _insert(self, collection, fields):
        self.next_id += 1
        record = {**fields, 'id': self.next_id}
        self.collections[collection][self.next_id] = record
        return record

    def _response(self, request, status, payload=None):
        response = requests.Response()
        response.status_code = status
        response.reason = HTTPStatus(status).phrase
        response.request = request
        response.url = request.url
        response.headers = CaseInsensitiveDict({'Content-Type': 'application/json'})
        response._content = json.dumps(payload).encode('utf-8') if payload is not None else b''
        response.encoding = 'utf-8'
        return response


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def http(backend):
    session = requests.Session()
    session.mount(BASE_URL, backend)
    return session


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api=ApiConfig(base_url=BASE_URL, timeout=5),
        storage=StorageConfig(url=f"sqlite:///{tmp_path / 'client_state.db'}"),
        app=AppConfig(default_language='ko', max_redirect_attempts=3),
    )


@pytest.fixture
def client(settings, http):
    return SmartCareClient(settings=settings, http=http)


@pytest.fixture
def nurse_client(client, backend):
    """Client whose bootstrap found a valid server session for user 1"""
    backend.login_as(1)
    client.start()
    return client
