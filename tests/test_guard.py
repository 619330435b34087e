# tests/test_guard.py

import pytest
from django.conf import settings

from apps.core.credentials import issue_token
from apps.core.exceptions import Unauthenticated
from apps.core.permissions import AuthContext, OwnershipGuard


@pytest.fixture
def guard():
    return OwnershipGuard.from_settings()


def _request(rf, header=None):
    extra = {'HTTP_AUTHORIZATION': header} if header is not None else {}
    return rf.get('/api/v1/projects', **extra)


def _token(subject, issuer=None):
    return issue_token(subject, 'alice', settings.MINIPM_TOKEN_SIGNING_KEY, issuer or settings.MINIPM_TOKEN_ISSUER)


def test_valid_bearer_token_yields_auth_context(rf, guard):
    auth = guard.authenticate(_request(rf, f'Bearer {_token(7)}'))
    assert auth == AuthContext(user_id=7)


def test_scheme_is_case_insensitive(rf, guard):
    auth = guard.authenticate(_request(rf, f'bearer {_token(7)}'))
    assert auth.user_id == 7


@pytest.mark.parametrize('header', [None, '', 'Bearer', 'Bearer ', 'Basic dXNlcjpwYXNz', 'Token abc'])
def test_missing_or_foreign_scheme_is_rejected(rf, guard, header):
    with pytest.raises(Unauthenticated):
        guard.authenticate(_request(rf, header))


def test_garbage_token_is_rejected(rf, guard):
    with pytest.raises(Unauthenticated):
        guard.authenticate(_request(rf, 'Bearer not-a-token'))


def test_wrong_issuer_is_rejected(rf, guard):
    with pytest.raises(Unauthenticated):
        guard.authenticate(_request(rf, f'Bearer {_token(7, issuer="Elsewhere")}'))


@pytest.mark.parametrize('subject', ['abc', '0', '-3', '1.5', '١٢'])
def test_non_positive_integer_subject_is_rejected(rf, guard, subject):
    with pytest.raises(Unauthenticated):
        guard.authenticate(_request(rf, f'Bearer {_token(subject)}'))
