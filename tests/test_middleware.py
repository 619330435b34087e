# tests/test_middleware.py

import json

from django.core.exceptions import RequestDataTooBig, SuspiciousOperation

from apps.core.exceptions import Conflict, NotFound, Unauthenticated, ValidationError
from apps.core.middleware import ApiErrorMiddleware


def _middleware():
    return ApiErrorMiddleware(lambda request: None)


def test_api_errors_become_json(rf):
    request = rf.get('/api/v1/projects/1')

    not_found = _middleware().process_exception(request, NotFound())
    conflict = _middleware().process_exception(request, Conflict('Username already exists'))

    assert not_found.status_code == 404
    assert json.loads(not_found.content) == {'error': 'Not found'}
    assert conflict.status_code == 409
    assert json.loads(conflict.content) == {'error': 'Username already exists'}


def test_unauthenticated_sets_challenge_header(rf):
    response = _middleware().process_exception(rf.get('/api/v1/projects'), Unauthenticated())

    assert response.status_code == 401
    assert response['WWW-Authenticate'] == 'Bearer'


def test_validation_error_carries_fields(rf):
    error = ValidationError('Title required', fields={'title': ['Title required']})

    response = _middleware().process_exception(rf.post('/api/v1/projects'), error)

    assert response.status_code == 400
    assert json.loads(response.content) == {'error': 'Title required', 'fields': {'title': ['Title required']}}


def test_unexpected_error_hides_details(rf):
    error = RuntimeError('no such table: app_user; password=hunter2')

    response = _middleware().process_exception(rf.get('/api/v1/projects'), error)

    assert response.status_code == 500
    assert json.loads(response.content) == {'error': 'Internal server error'}
    assert b'hunter2' not in response.content


def test_non_api_errors_are_left_to_django(rf):
    assert _middleware().process_exception(rf.get('/admin/'), RuntimeError('boom')) is None


def test_oversized_request_is_bad_request(rf):
    error = RequestDataTooBig('Request body exceeded settings.DATA_UPLOAD_MAX_MEMORY_SIZE.')

    response = _middleware().process_exception(rf.post('/api/v1/projects'), error)

    assert response.status_code == 400
    assert json.loads(response.content) == {'error': 'Bad request'}


def test_suspicious_operation_outside_api_is_left_to_django(rf):
    assert _middleware().process_exception(rf.get('/admin/'), SuspiciousOperation('bad host')) is None
