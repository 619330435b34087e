# tests/conftest.py

import json

import pytest
from django.conf import settings
from django.test import Client

from apps.core.credentials import issue_token
from apps.core.models import Project, Task, User


class ApiClient:
    """
    Cliente JSON fino sobre o django.test.Client

    Todas as rotas são relativas a /api/v1.
    """

    base = '/api/v1'

    def __init__(self, client: Client):
        self.client = client

    def _extra(self, token):
        return {'HTTP_AUTHORIZATION': f'Bearer {token}'} if token else {}

    def get(self, path, token=None):
        return self.client.get(self.base + path, **self._extra(token))

    def post(self, path, data=None, token=None, raw=None):
        body = raw if raw is not None else json.dumps(data if data is not None else {})
        return self.client.post(self.base + path, data=body, content_type='application/json', **self._extra(token))

    def put(self, path, data=None, token=None):
        body = json.dumps(data) if data is not None else ''
        return self.client.put(self.base + path, data=body, content_type='application/json', **self._extra(token))

    def delete(self, path, token=None):
        return self.client.delete(self.base + path, **self._extra(token))


@pytest.fixture
def api():
    return ApiClient(Client())


def token_for(user: User) -> str:
    return issue_token(user.id, user.username, settings.MINIPM_TOKEN_SIGNING_KEY, settings.MINIPM_TOKEN_ISSUER)


@pytest.fixture
def make_user(db):
    """
    Cria conta direto no banco e devolve (user, token)

    O hash não é real; testes de login passam pelo endpoint de registro.
    """

    def _make(username='alice'):
        user = User.objects.create(username=username, password_hash='unused')
        return user, token_for(user)

    return _make


@pytest.fixture
def alice(make_user):
    return make_user('alice')


@pytest.fixture
def bob(make_user):
    return make_user('bob')


@pytest.fixture
def alice_project(alice):
    user, _ = alice
    return Project.objects.create(owner=user, title='Alice project', description='First')


@pytest.fixture
def alice_task(alice_project):
    return Task.objects.create(project=alice_project, title='Write docs')
