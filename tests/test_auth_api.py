# tests/test_auth_api.py

import pytest

from apps.core.credentials import verify_password
from apps.core.models import User

pytestmark = pytest.mark.django_db


def register(api, username='alice', password='secret1'):
    return api.post('/auth/register', {'username': username, 'password': password})


def login(api, username='alice', password='secret1'):
    return api.post('/auth/login', {'username': username, 'password': password})


class TestRegister:

    def test_creates_user_and_returns_201(self, api):
        response = register(api)

        assert response.status_code == 201
        body = response.json()
        assert body['username'] == 'alice'
        assert response['Location'] == f"/api/v1/users/{body['id']}"
        assert 'password' not in body and 'passwordHash' not in body

        user = User.objects.get(pk=body['id'])
        assert user.password_hash != 'secret1'
        assert verify_password('secret1', user.password_hash)

    def test_duplicate_username_is_conflict_and_keeps_first_account(self, api):
        register(api, password='secret1')
        original_hash = User.objects.get(username='alice').password_hash

        response = register(api, password='other-password')

        assert response.status_code == 409
        assert response.json() == {'error': 'Username already exists'}
        assert User.objects.filter(username='alice').count() == 1
        assert User.objects.get(username='alice').password_hash == original_hash
        assert login(api, password='secret1').status_code == 200

    def test_usernames_are_case_sensitive(self, api):
        assert register(api, username='alice').status_code == 201
        assert register(api, username='Alice').status_code == 201

    @pytest.mark.parametrize('payload, field', [
        ({'username': 'al', 'password': 'secret1'}, 'username'),
        ({'username': '   ', 'password': 'secret1'}, 'username'),
        ({'password': 'secret1'}, 'username'),
        ({'username': 'alice', 'password': '12345'}, 'password'),
        ({'username': 'alice'}, 'password'),
    ])
    def test_invalid_input_is_rejected(self, api, payload, field):
        response = api.post('/auth/register', payload)

        assert response.status_code == 400
        body = response.json()
        assert field in body['fields']
        assert body['error']
        assert not User.objects.exists()

    def test_boundary_lengths_are_accepted(self, api):
        assert register(api, username='abc', password='123456').status_code == 201

    def test_malformed_json_is_bad_request(self, api):
        response = api.post('/auth/register', raw='{"username": ')

        assert response.status_code == 400
        assert response.json()['error'] == 'Malformed JSON body'

    def test_non_object_json_is_bad_request(self, api):
        response = api.post('/auth/register', raw='["alice", "secret1"]')

        assert response.status_code == 400


class TestLogin:

    def test_returns_token_usable_on_protected_routes(self, api):
        register(api)

        response = login(api)

        assert response.status_code == 200
        token = response.json()['token']
        assert api.get('/projects', token=token).status_code == 200

    def test_wrong_password_is_unauthorized(self, api):
        register(api)

        response = login(api, password='wrong-password')

        assert response.status_code == 401
        assert response.json() == {'error': 'Invalid username or password'}
        assert response['WWW-Authenticate'] == 'Bearer'

    def test_unknown_user_gets_same_response_as_wrong_password(self, api):
        register(api)

        unknown = login(api, username='nobody')
        wrong = login(api, password='wrong-password')

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_missing_fields_are_unauthorized(self, api):
        response = api.post('/auth/login', {'username': 'alice'})

        assert response.status_code == 401

    def test_get_is_not_allowed(self, api):
        assert api.get('/auth/login').status_code == 405


class TestHealth:

    def test_reports_healthy(self, api):
        response = api.get('/health')

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'healthy'
        assert body['database'] == 'ok'

    def test_root_redirects_to_health(self, client):
        response = client.get('/')

        assert response.status_code == 302
        assert response['Location'] == '/api/v1/health'


class TestRegisterRejectsBadJson:

    def test_lone_surrogate_in_password_is_bad_request(self, api):
        response = api.post('/auth/register', raw=r'{"username": "carol", "password": "\ud800abcdef"}')

        assert response.status_code == 400
        assert response.json()['error'] == 'Malformed JSON body'
        assert not User.objects.exists()

    @pytest.mark.parametrize('payload, field', [
        ({'username': 12345, 'password': 'secret1'}, 'username'),
        ({'username': 'carol', 'password': ['secret1']}, 'password'),
    ])
    def test_non_string_credentials_are_rejected(self, api, payload, field):
        response = api.post('/auth/register', payload)

        assert response.status_code == 400
        assert field in response.json()['fields']
        assert not User.objects.exists()

    def test_non_string_login_is_unauthorized(self, api):
        response = api.post('/auth/login', {'username': ['alice'], 'password': 'secret1'})

        assert response.status_code == 401
